# /app/models/student.py
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from app.db.base import Base

class Student(Base):
    __tablename__ = "students"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    grade = Column(String(50), nullable=False)
    email = Column(String(255), nullable=True)
    # tablet_number of the assigned tablet, not Tablet.id
    tablet_id = Column(String(50), unique=True, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    tablets = relationship("Tablet", back_populates="student")
