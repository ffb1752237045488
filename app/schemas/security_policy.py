from datetime import datetime
from typing import Any, Dict, Optional

from app.schemas.common import CamelModel


class SecurityPolicyCreate(CamelModel):
    name: str
    description: Optional[str] = None
    rules: Dict[str, Any]
    is_active: bool = True


class SecurityPolicyUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    rules: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class SecurityPolicyResponse(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    rules: Dict[str, Any]
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
