from datetime import datetime
from typing import Literal, Optional

from app.schemas.common import CamelModel
from app.schemas.student import StudentRef

AlertSeverity = Literal["low", "medium", "high"]


class AlertCreate(CamelModel):
    student_id: str
    tablet_id: str
    alert_type: str
    severity: AlertSeverity = "medium"
    title: str
    description: Optional[str] = None
    is_resolved: bool = False
    resolved_by: Optional[str] = None
    resolved_at: Optional[datetime] = None


class AlertResolveRequest(CamelModel):
    resolved_by: Optional[str] = None


class AlertResponse(CamelModel):
    id: str
    student_id: str
    tablet_id: str
    alert_type: str
    severity: str
    title: str
    description: Optional[str] = None
    is_resolved: Optional[bool] = False
    resolved_by: Optional[str] = None
    resolved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class TabletRef(CamelModel):
    id: str
    tablet_number: str


class AlertWithDetails(CamelModel):
    id: str
    alert_type: str
    severity: str
    title: str
    description: Optional[str] = None
    is_resolved: Optional[bool] = False
    created_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    student: Optional[StudentRef] = None
    tablet: Optional[TabletRef] = None
