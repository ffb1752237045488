from typing import List

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.activity import ActivityWithStudent
from app.schemas.tablet import (
    TabletCreate, TabletResponse, TabletStatusUpdate, TabletWithStudent,
    BlockSiteRequest, BlockSiteResponse
)
from app.services.tablet_service import (
    list_tablets, get_tablet, create_tablet, update_tablet_status, unblock_tablet,
    list_activities_for_tablet, block_site_for_tablet
)

router = APIRouter()


@router.get("", response_model=List[TabletWithStudent], summary="태블릿 목록 (학생 정보 포함)")
def get_tablets(db: Session = Depends(get_db)):
    return list_tablets(db)


@router.post("", response_model=TabletResponse, summary="태블릿 등록")
def post_tablet(
    tablet_in: TabletCreate = Body(...),
    db: Session = Depends(get_db)
):
    return create_tablet(db, tablet_in)


@router.get("/{tablet_id}", response_model=TabletResponse, summary="태블릿 조회")
def get_tablet_detail(tablet_id: str, db: Session = Depends(get_db)):
    tablet = get_tablet(db, tablet_id)
    if not tablet:
        raise HTTPException(status_code=404, detail="Tablet not found")
    return tablet


@router.put("/{tablet_id}/status", response_model=TabletResponse, summary="태블릿 상태 변경")
def put_tablet_status(
    tablet_id: str,
    req: TabletStatusUpdate = Body(...),
    db: Session = Depends(get_db)
):
    """
    status 는 online / offline / warning / blocked 중 하나.
    isBlocked 를 생략하면 기존 값을 유지합니다.
    """
    return update_tablet_status(db, tablet_id, req.status, req.is_blocked)


@router.post("/{tablet_id}/unblock", response_model=TabletResponse, summary="태블릿 차단 해제")
def post_tablet_unblock(tablet_id: str, db: Session = Depends(get_db)):
    return unblock_tablet(db, tablet_id)


@router.get("/{tablet_id}/activity", response_model=List[ActivityWithStudent], summary="태블릿 최근 활동 10건")
def get_tablet_activity(tablet_id: str, db: Session = Depends(get_db)):
    return list_activities_for_tablet(db, tablet_id)


@router.post("/{tablet_id}/block-site", response_model=BlockSiteResponse, summary="사이트 차단")
def post_block_site(
    tablet_id: str,
    req: BlockSiteRequest = Body(...),
    db: Session = Depends(get_db)
):
    """
    차단 사이트 목록에 URL 을 추가합니다.
    태블릿의 현재 URL 에 해당 URL 이 포함되어 있으면 태블릿도 blocked 로 전환됩니다.
    """
    site, tablet_blocked = block_site_for_tablet(db, tablet_id, req.url, req.reason)
    return BlockSiteResponse(success=True, message="Site blocked", site_id=site.id, tablet_blocked=tablet_blocked)
