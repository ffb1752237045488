# /app/services/student_service.py
import logging
from sqlalchemy.orm import Session
from fastapi import HTTPException, status
from typing import List, Optional

from app.models.student import Student
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


def list_students(db: Session) -> List[Student]:
    """ 최근 등록된 학생부터 반환 """
    return db.query(Student).order_by(Student.created_at.desc()).all()


def get_student(db: Session, student_id: str) -> Optional[Student]:
    return db.query(Student).filter(Student.id == student_id).first()


def get_student_by_tablet_id(db: Session, tablet_id: str) -> Optional[Student]:
    """ tablet_id 중복 확인용 """
    return db.query(Student).filter(Student.tablet_id == tablet_id).first()


def create_student(db: Session, *, student_in: StudentCreate) -> Student:
    if student_in.tablet_id and get_student_by_tablet_id(db, student_in.tablet_id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Tablet {student_in.tablet_id} is already assigned to another student."
        )

    db_student = Student(**student_in.model_dump())
    db.add(db_student)
    db.commit()
    db.refresh(db_student)
    logger.info("Student created: %s (%s)", db_student.id, db_student.name)
    return db_student


def update_student(db: Session, student_id: str, changes: StudentUpdate) -> Student:
    student = get_student(db, student_id)
    if not student:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update student")

    updates = changes.model_dump(exclude_unset=True)
    new_tablet_id = updates.get("tablet_id")
    if new_tablet_id and new_tablet_id != student.tablet_id:
        owner = get_student_by_tablet_id(db, new_tablet_id)
        if owner and owner.id != student.id:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"Tablet {new_tablet_id} is already assigned to another student."
            )

    for field, value in updates.items():
        setattr(student, field, value)
    db.commit()
    db.refresh(student)
    return student
