from datetime import datetime, timezone
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.activity import Activity
from app.models.student import Student
from app.models.tablet import Tablet
from app.schemas.activity import ActivityCreate


def _as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # 저장된 timestamp 는 naive UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def create_activity(db: Session, activity_in: ActivityCreate) -> Activity:
    student = db.query(Student).filter(Student.id == activity_in.student_id).first()
    tablet = db.query(Tablet).filter(Tablet.id == activity_in.tablet_id).first()
    if not student or not tablet:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid activity data")

    activity = Activity(**activity_in.model_dump())
    db.add(activity)
    db.commit()
    db.refresh(activity)
    return activity


def list_student_activities(
    db: Session,
    student_id: str,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> List[Activity]:
    """ 학생의 활동 기록 (start, end 모두 포함) 최신순 """
    query = db.query(Activity).filter(Activity.student_id == student_id)
    start, end = _as_naive_utc(start), _as_naive_utc(end)
    if start is not None:
        query = query.filter(Activity.timestamp >= start)
    if end is not None:
        query = query.filter(Activity.timestamp <= end)
    return query.order_by(Activity.timestamp.desc()).all()
