import logging
from datetime import datetime
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.alert import Alert
from app.models.student import Student
from app.models.tablet import Tablet
from app.models.user import User
from app.schemas.alert import AlertCreate

logger = logging.getLogger(__name__)


def list_alerts(db: Session, resolved: Optional[bool] = None) -> List[dict]:
    query = (
        db.query(
            Alert,
            Student.name.label("student_name"),
            Tablet.tablet_number.label("tablet_number"),
        )
        .outerjoin(Student, Alert.student_id == Student.id)
        .outerjoin(Tablet, Alert.tablet_id == Tablet.id)
    )
    if resolved is not None:
        query = query.filter(Alert.is_resolved == resolved)

    rows = query.order_by(Alert.created_at.desc()).all()
    return [
        {
            "id": row.Alert.id,
            "alert_type": row.Alert.alert_type,
            "severity": row.Alert.severity,
            "title": row.Alert.title,
            "description": row.Alert.description,
            "is_resolved": row.Alert.is_resolved,
            "created_at": row.Alert.created_at,
            "resolved_at": row.Alert.resolved_at,
            "student": {"id": row.Alert.student_id, "name": row.student_name} if row.student_name is not None else None,
            "tablet": {"id": row.Alert.tablet_id, "tablet_number": row.tablet_number} if row.tablet_number is not None else None,
        }
        for row in rows
    ]


def _user_exists(db: Session, user_id: str) -> bool:
    return db.query(User.id).filter(User.id == user_id).first() is not None


def create_alert(db: Session, alert_in: AlertCreate) -> Alert:
    student = db.query(Student).filter(Student.id == alert_in.student_id).first()
    tablet = db.query(Tablet).filter(Tablet.id == alert_in.tablet_id).first()
    if not student or not tablet:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid alert data")

    if alert_in.resolved_by and not _user_exists(db, alert_in.resolved_by):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid alert data")

    data = alert_in.model_dump()
    # resolved_at 은 is_resolved 가 true 일 때만 채워짐
    if data["is_resolved"]:
        data["resolved_at"] = data["resolved_at"] or datetime.utcnow()
    else:
        data["resolved_at"] = None
        data["resolved_by"] = None

    alert = Alert(**data)
    db.add(alert)
    db.commit()
    db.refresh(alert)
    logger.info("Alert created: %s [%s] %s", alert.id, alert.severity, alert.title)
    return alert


def resolve_alert(db: Session, alert_id: str, resolved_by: Optional[str]) -> Alert:
    """
    알림을 해결 처리합니다. 이미 해결된 알림도 다시 호출하면 resolved_at 이 갱신됩니다.
    """
    alert = db.query(Alert).filter(Alert.id == alert_id).first()
    if not alert:
        logger.warning("Resolve requested for unknown alert %s", alert_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to resolve alert")
    if resolved_by and not _user_exists(db, resolved_by):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown resolver")

    alert.is_resolved = True
    alert.resolved_by = resolved_by
    alert.resolved_at = datetime.utcnow()
    db.commit()
    db.refresh(alert)
    return alert
