from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.security_policy import SecurityPolicy
from app.schemas.security_policy import SecurityPolicyCreate, SecurityPolicyUpdate


def list_security_policies(db: Session):
    """ 활성화된 정책만 반환 """
    return db.query(SecurityPolicy).filter(SecurityPolicy.is_active == True).all()  # noqa: E712


def create_security_policy(db: Session, policy_in: SecurityPolicyCreate) -> SecurityPolicy:
    policy = SecurityPolicy(**policy_in.model_dump())
    db.add(policy)
    db.commit()
    db.refresh(policy)
    return policy


def update_security_policy(db: Session, policy_id: str, changes: SecurityPolicyUpdate) -> SecurityPolicy:
    policy = db.query(SecurityPolicy).filter(SecurityPolicy.id == policy_id).first()
    if not policy:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update security policy")

    for field, value in changes.model_dump(exclude_unset=True).items():
        setattr(policy, field, value)
    db.commit()
    db.refresh(policy)
    return policy
