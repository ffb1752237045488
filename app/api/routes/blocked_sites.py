from typing import List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.dependencies.db import get_db
from app.schemas.blocked_site import BlockedSiteCreate, BlockedSiteResponse
from app.services.blocked_site_service import create_blocked_site, delete_blocked_site, list_blocked_sites

router = APIRouter()


@router.get("", response_model=List[BlockedSiteResponse], summary="차단 사이트 목록")
def get_blocked_sites(db: Session = Depends(get_db)):
    return list_blocked_sites(db)


@router.post("", response_model=BlockedSiteResponse, summary="차단 사이트 추가")
def post_blocked_site(
    site_in: BlockedSiteCreate = Body(...),
    db: Session = Depends(get_db)
):
    return create_blocked_site(db, site_in)


@router.delete("/{site_id}", status_code=status.HTTP_204_NO_CONTENT, summary="차단 사이트 삭제")
def remove_blocked_site(site_id: str, db: Session = Depends(get_db)):
    delete_blocked_site(db, site_id)
