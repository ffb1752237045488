from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.models.blocked_site import BlockedSite
from app.schemas.blocked_site import BlockedSiteCreate


def list_blocked_sites(db: Session):
    return db.query(BlockedSite).order_by(BlockedSite.created_at.desc()).all()


def create_blocked_site(db: Session, site_in: BlockedSiteCreate) -> BlockedSite:
    site = BlockedSite(**site_in.model_dump())
    db.add(site)
    db.commit()
    db.refresh(site)
    return site


def delete_blocked_site(db: Session, site_id: str) -> None:
    site = db.query(BlockedSite).filter(BlockedSite.id == site_id).first()
    if not site:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blocked site not found")
    db.delete(site)
    db.commit()
