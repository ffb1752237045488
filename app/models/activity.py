import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.db.base import Base

class Activity(Base):
    __tablename__ = "activities"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False, index=True)
    tablet_id = Column(String(36), ForeignKey("tablets.id"), nullable=False, index=True)
    activity_type = Column(String(50), nullable=False)  # web_navigation, app_usage, search
    application = Column(String(255), nullable=True)
    url = Column(String(2048), nullable=True)
    title = Column(String(512), nullable=True)
    category = Column(String(50), nullable=True)  # educational, entertainment, social, inappropriate
    duration = Column(Integer, default=0)  # 분 단위
    is_blocked = Column(Boolean, default=False)
    timestamp = Column(DateTime, default=datetime.utcnow, index=True)

    student = relationship("Student")
    tablet = relationship("Tablet")
