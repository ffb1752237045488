from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.activity import ActivityResponse
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services.activity_service import list_student_activities
from app.services.student_service import create_student, get_student, list_students, update_student

router = APIRouter()


@router.get("", response_model=List[StudentResponse], summary="학생 목록")
def get_students(db: Session = Depends(get_db)):
    return list_students(db)


@router.post("", response_model=StudentResponse, summary="학생 등록")
def post_student(
    student_in: StudentCreate = Body(...),
    db: Session = Depends(get_db)
):
    """
    학생을 등록합니다. 이미 다른 학생에게 배정된 tabletId 면 409 를 반환합니다.
    """
    return create_student(db, student_in=student_in)


@router.get("/{student_id}", response_model=StudentResponse, summary="학생 조회")
def get_student_detail(student_id: str, db: Session = Depends(get_db)):
    student = get_student(db, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.patch("/{student_id}", response_model=StudentResponse, summary="학생 정보 수정")
def patch_student(
    student_id: str,
    changes: StudentUpdate = Body(...),
    db: Session = Depends(get_db)
):
    return update_student(db, student_id, changes)


@router.get("/{student_id}/activities", response_model=List[ActivityResponse], summary="학생 활동 기록")
def get_student_activities(
    student_id: str,
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    db: Session = Depends(get_db)
):
    """
    startDate / endDate 는 모두 포함 범위이며 생략할 수 있습니다. 최신순으로 반환합니다.
    """
    return list_student_activities(db, student_id, start_date, end_date)
