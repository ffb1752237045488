from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.activity import ActivityCreate, ActivityResponse
from app.services.activity_service import create_activity

router = APIRouter()


@router.post("", response_model=ActivityResponse, summary="활동 기록 추가")
def post_activity(
    activity_in: ActivityCreate = Body(...),
    db: Session = Depends(get_db)
):
    return create_activity(db, activity_in)
