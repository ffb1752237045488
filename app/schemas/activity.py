from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel
from app.schemas.student import StudentRef


class ActivityCreate(CamelModel):
    student_id: str
    tablet_id: str
    activity_type: str
    application: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    duration: int = 0
    is_blocked: bool = False


class ActivityResponse(CamelModel):
    id: str
    student_id: str
    tablet_id: str
    activity_type: str
    application: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    duration: Optional[int] = 0
    is_blocked: Optional[bool] = False
    timestamp: Optional[datetime] = None


class ActivityWithStudent(CamelModel):
    id: str
    activity_type: str
    application: Optional[str] = None
    url: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    duration: Optional[int] = 0
    is_blocked: Optional[bool] = False
    timestamp: Optional[datetime] = None
    student: Optional[StudentRef] = None
