from datetime import datetime
from typing import Optional

from app.schemas.common import CamelModel


class UserCreate(CamelModel):
    username: str
    password: str
    role: str = "teacher"
    name: str
    email: Optional[str] = None


class UserResponse(CamelModel):
    # password 는 응답에 포함하지 않음
    id: str
    username: str
    role: str
    name: str
    email: Optional[str] = None
    created_at: Optional[datetime] = None
