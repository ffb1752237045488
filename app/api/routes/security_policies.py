from typing import List

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.security_policy import SecurityPolicyCreate, SecurityPolicyResponse, SecurityPolicyUpdate
from app.services.security_policy_service import (
    create_security_policy, list_security_policies, update_security_policy
)

router = APIRouter()


@router.get("", response_model=List[SecurityPolicyResponse], summary="활성 보안 정책 목록")
def get_security_policies(db: Session = Depends(get_db)):
    return list_security_policies(db)


@router.post("", response_model=SecurityPolicyResponse, summary="보안 정책 생성")
def post_security_policy(
    policy_in: SecurityPolicyCreate = Body(...),
    db: Session = Depends(get_db)
):
    return create_security_policy(db, policy_in)


@router.put("/{policy_id}", response_model=SecurityPolicyResponse, summary="보안 정책 수정")
def put_security_policy(
    policy_id: str,
    changes: SecurityPolicyUpdate = Body(...),
    db: Session = Depends(get_db)
):
    return update_security_policy(db, policy_id, changes)
