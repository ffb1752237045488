from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.student import StudentSummary

TabletStatus = Literal["online", "offline", "warning", "blocked"]


class TabletCreate(CamelModel):
    tablet_number: str
    student_id: Optional[str] = None
    status: TabletStatus = "offline"
    last_activity: Optional[datetime] = None
    current_app: Optional[str] = None
    current_url: Optional[str] = None
    screen_time: int = Field(0, ge=0)
    is_blocked: bool = False


class TabletStatusUpdate(CamelModel):
    status: TabletStatus
    is_blocked: Optional[bool] = None


class TabletResponse(CamelModel):
    id: str
    tablet_number: str
    student_id: Optional[str] = None
    status: str
    last_activity: Optional[datetime] = None
    current_app: Optional[str] = None
    current_url: Optional[str] = None
    screen_time: Optional[int] = 0
    is_blocked: Optional[bool] = False
    created_at: Optional[datetime] = None


class TabletWithStudent(CamelModel):
    id: str
    tablet_number: str
    status: str
    last_activity: Optional[datetime] = None
    current_app: Optional[str] = None
    current_url: Optional[str] = None
    screen_time: Optional[int] = 0
    is_blocked: Optional[bool] = False
    created_at: Optional[datetime] = None
    student: Optional[StudentSummary] = None


class BlockSiteRequest(CamelModel):
    url: str
    reason: Optional[str] = None


class BlockSiteResponse(CamelModel):
    success: bool
    message: str
    site_id: str
    tablet_blocked: bool


class LockAllResponse(CamelModel):
    success: bool
    message: str
    locked_count: int
