# /app/services/tablet_service.py
import logging
from typing import List, Optional, Tuple

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.activity import Activity
from app.models.blocked_site import BlockedSite
from app.models.student import Student
from app.models.tablet import Tablet
from app.schemas.tablet import TabletCreate

logger = logging.getLogger(__name__)


def list_tablets(db: Session) -> List[dict]:
    """
    모든 태블릿을 배정된 학생 정보(id, name, grade)와 함께 태블릿 번호 순으로 반환합니다.
    배정된 학생이 없으면 student 는 None.
    """
    rows = (
        db.query(Tablet, Student)
        .outerjoin(Student, Tablet.student_id == Student.id)
        .order_by(Tablet.tablet_number)
        .all()
    )
    return [
        {
            "id": tablet.id,
            "tablet_number": tablet.tablet_number,
            "status": tablet.status,
            "last_activity": tablet.last_activity,
            "current_app": tablet.current_app,
            "current_url": tablet.current_url,
            "screen_time": tablet.screen_time,
            "is_blocked": tablet.is_blocked,
            "created_at": tablet.created_at,
            "student": {"id": student.id, "name": student.name, "grade": student.grade} if student else None,
        }
        for tablet, student in rows
    ]


def get_tablet(db: Session, tablet_id: str) -> Optional[Tablet]:
    return db.query(Tablet).filter(Tablet.id == tablet_id).first()


def create_tablet(db: Session, tablet_in: TabletCreate) -> Tablet:
    existing = db.query(Tablet).filter(Tablet.tablet_number == tablet_in.tablet_number).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Tablet number {tablet_in.tablet_number} already exists."
        )
    if tablet_in.student_id and not db.query(Student).filter(Student.id == tablet_in.student_id).first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid tablet data")

    tablet = Tablet(**tablet_in.model_dump())
    db.add(tablet)
    db.commit()
    db.refresh(tablet)
    return tablet


def update_tablet_status(db: Session, tablet_id: str, new_status: str, is_blocked: Optional[bool] = None) -> Tablet:
    tablet = get_tablet(db, tablet_id)
    if not tablet:
        logger.warning("Status update for unknown tablet %s", tablet_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update tablet status")

    tablet.status = new_status
    if is_blocked is not None:
        tablet.is_blocked = is_blocked
    db.commit()
    db.refresh(tablet)
    return tablet


def unblock_tablet(db: Session, tablet_id: str) -> Tablet:
    """ blocked 상태의 태블릿을 다시 online 으로 되돌립니다. """
    tablet = get_tablet(db, tablet_id)
    if not tablet:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to unblock tablet")

    tablet.status = "online"
    tablet.is_blocked = False
    db.commit()
    db.refresh(tablet)
    return tablet


def list_activities_for_tablet(db: Session, tablet_id: str) -> List[dict]:
    rows = (
        db.query(Activity, Student.id.label("student_id"), Student.name.label("student_name"))
        .outerjoin(Student, Activity.student_id == Student.id)
        .filter(Activity.tablet_id == tablet_id)
        .order_by(Activity.timestamp.desc())
        .limit(settings.TABLET_ACTIVITY_LIMIT)
        .all()
    )
    return [
        {
            "id": row.Activity.id,
            "activity_type": row.Activity.activity_type,
            "application": row.Activity.application,
            "url": row.Activity.url,
            "title": row.Activity.title,
            "category": row.Activity.category,
            "duration": row.Activity.duration,
            "is_blocked": row.Activity.is_blocked,
            "timestamp": row.Activity.timestamp,
            "student": {"id": row.student_id, "name": row.student_name} if row.student_id else None,
        }
        for row in rows
    ]


def lock_all_tablets(db: Session) -> int:
    """
    online 상태인 모든 태블릿을 blocked 로 전환합니다.
    online 태블릿이 없으면 아무 행도 바뀌지 않습니다.
    """
    locked = (
        db.query(Tablet)
        .filter(Tablet.status == "online")
        .update({Tablet.status: "blocked", Tablet.is_blocked: True}, synchronize_session=False)
    )
    db.commit()
    logger.info("Emergency lock: %d tablet(s) blocked", locked)
    return locked


def block_site_for_tablet(db: Session, tablet_id: str, url: str, reason: Optional[str]) -> Tuple[BlockedSite, bool]:
    """
    차단 사이트를 추가하고, 해당 태블릿이 그 URL(부분 문자열 일치)을 보고 있으면 태블릿도 차단합니다.
    두 쓰기는 하나의 트랜잭션으로 커밋됩니다.
    """
    site = BlockedSite(url=url, category="inappropriate", reason=reason, is_active=True)
    db.add(site)

    tablet_blocked = False
    tablet = db.query(Tablet).filter(Tablet.id == tablet_id).with_for_update().first()
    if tablet and tablet.current_url and url in tablet.current_url:
        tablet.status = "blocked"
        tablet.is_blocked = True
        tablet_blocked = True

    db.commit()
    db.refresh(site)
    logger.info("Blocked %s for tablet %s (tablet locked: %s)", url, tablet_id, tablet_blocked)
    return site, tablet_blocked
