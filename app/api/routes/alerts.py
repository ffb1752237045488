from typing import List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.alert import AlertCreate, AlertResolveRequest, AlertResponse, AlertWithDetails
from app.services.alert_service import create_alert, list_alerts, resolve_alert

router = APIRouter()


@router.get("", response_model=List[AlertWithDetails], summary="알림 목록")
def get_alerts(resolved: Optional[bool] = None, db: Session = Depends(get_db)):
    """
    resolved 를 생략하면 전체, true/false 면 해결 여부로 필터링합니다. 최신순.
    """
    return list_alerts(db, resolved)


@router.post("", response_model=AlertResponse, summary="알림 생성")
def post_alert(
    alert_in: AlertCreate = Body(...),
    db: Session = Depends(get_db)
):
    return create_alert(db, alert_in)


@router.put("/{alert_id}/resolve", response_model=AlertResponse, summary="알림 해결 처리")
def put_alert_resolve(
    alert_id: str,
    req: Optional[AlertResolveRequest] = Body(None),
    db: Session = Depends(get_db)
):
    """
    이미 해결된 알림도 다시 해결 처리되며 resolvedAt 이 갱신됩니다.
    """
    return resolve_alert(db, alert_id, req.resolved_by if req else None)
