# /app/schemas/student.py
from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel


class StudentCreate(CamelModel):
    name: str
    grade: str
    email: Optional[str] = None
    tablet_id: Optional[str] = None
    is_active: bool = True


class StudentUpdate(CamelModel):
    name: Optional[str] = None
    grade: Optional[str] = None
    email: Optional[str] = None
    tablet_id: Optional[str] = None
    is_active: Optional[bool] = None


class StudentResponse(CamelModel):
    id: str
    name: str
    grade: str
    email: Optional[str] = None
    tablet_id: Optional[str] = None
    is_active: Optional[bool] = None
    created_at: Optional[datetime] = None


class StudentSummary(CamelModel):
    id: str
    name: str
    grade: str


class StudentRef(CamelModel):
    id: str
    name: str
