from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import create_user, get_user

router = APIRouter()


@router.post("", response_model=UserResponse, summary="사용자 생성")
def post_user(
    user_in: UserCreate = Body(...),
    db: Session = Depends(get_db)
):
    """
    비밀번호는 bcrypt 해시로 저장되며 응답에는 포함되지 않습니다.
    """
    return create_user(db, user_in)


@router.get("/{user_id}", response_model=UserResponse, summary="사용자 조회")
def get_user_detail(user_id: str, db: Session = Depends(get_db)):
    user = get_user(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
