import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base

TABLET_STATUSES = ("online", "offline", "warning", "blocked")

class Tablet(Base):
    __tablename__ = "tablets"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    tablet_number = Column(String(50), unique=True, nullable=False, index=True)
    student_id = Column(String(36), ForeignKey("students.id"), nullable=True)
    status = Column(String(20), nullable=False, default="offline")
    last_activity = Column(DateTime, nullable=True)
    current_app = Column(String(255), nullable=True)
    current_url = Column(String(2048), nullable=True)
    screen_time = Column(Integer, default=0)  # 분 단위
    is_blocked = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (CheckConstraint("status IN ('online', 'offline', 'warning', 'blocked')"),)

    student = relationship("Student", back_populates="tablets")
