from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.dashboard import DashboardStats
from app.services.dashboard_service import get_dashboard_stats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats, summary="대시보드 통계")
def read_dashboard_stats(db: Session = Depends(get_db)):
    """
    전체/온라인 태블릿 수, 미해결 알림 수, 활성 차단 사이트 수,
    온라인 태블릿의 평균 사용 시간(분)을 반환합니다.
    """
    return get_dashboard_stats(db)
