from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel


class BlockedSiteCreate(CamelModel):
    url: str
    category: str
    reason: Optional[str] = None
    is_active: bool = True


class BlockedSiteResponse(CamelModel):
    id: str
    url: str
    category: str
    reason: Optional[str] = None
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None
