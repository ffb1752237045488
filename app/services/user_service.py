from typing import Optional

from fastapi import HTTPException, status
from passlib.hash import bcrypt
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import UserCreate


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, user_in: UserCreate) -> User:
    if get_user_by_username(db, user_in.username):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already registered")

    user = User(
        username=user_in.username,
        password=bcrypt.hash(user_in.password),
        role=user_in.role,
        name=user_in.name,
        email=user_in.email,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
