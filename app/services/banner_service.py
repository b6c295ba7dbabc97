from typing import List

from sqlalchemy.orm import Session

from app.models import Banner
from app.schemas.banners import BannerCreate, BannerUpdate
from app.services.patch import apply_patch, extract_patch, get_or_404


def list_banners(db: Session, active_only: bool = True) -> List[Banner]:
    query = db.query(Banner)
    if active_only:
        query = query.filter(Banner.is_active == True)  # noqa: E712
    return query.order_by(Banner.display_order, Banner.id).all()


def create_banner(db: Session, banner_data: BannerCreate) -> Banner:
    banner = Banner(**banner_data.model_dump())
    db.add(banner)
    db.commit()
    db.refresh(banner)
    return banner


def update_banner(db: Session, banner_id: int, banner_in: BannerUpdate) -> Banner:
    banner = get_or_404(db, Banner, banner_id, "Banner")
    data = extract_patch(
        banner_in, non_nullable=("title", "subtitle", "image", "display_order", "is_active")
    )
    apply_patch(banner, data)
    db.commit()
    db.refresh(banner)
    return banner


def delete_banner(db: Session, banner_id: int) -> None:
    banner = get_or_404(db, Banner, banner_id, "Banner")
    db.delete(banner)
    db.commit()
