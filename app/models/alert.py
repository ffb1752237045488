import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.db.base import Base

class Alert(Base):
    __tablename__ = "alerts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    student_id = Column(String(36), ForeignKey("students.id"), nullable=False)
    tablet_id = Column(String(36), ForeignKey("tablets.id"), nullable=False)
    alert_type = Column(String(50), nullable=False)  # inappropriate_content, excessive_time, blocked_download, unauthorized_app
    severity = Column(String(10), nullable=False, default="medium")
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    is_resolved = Column(Boolean, default=False, index=True)
    resolved_by = Column(String(36), ForeignKey("users.id"), nullable=True)
    resolved_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (CheckConstraint("severity IN ('low', 'medium', 'high')"),)

    student = relationship("Student")
    tablet = relationship("Tablet")
    resolver = relationship("User")
