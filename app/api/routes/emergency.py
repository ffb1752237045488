from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.tablet import LockAllResponse
from app.services.tablet_service import lock_all_tablets

router = APIRouter()


@router.post("/lock-all", response_model=LockAllResponse, summary="전체 태블릿 긴급 잠금")
def post_lock_all(db: Session = Depends(get_db)):
    """
    online 상태의 모든 태블릿을 blocked 로 전환합니다. 여러 번 호출해도 결과는 같습니다.
    """
    locked = lock_all_tablets(db)
    return LockAllResponse(success=True, message="All tablets locked", locked_count=locked)
