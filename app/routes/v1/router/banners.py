from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.banners import BannerCreate, BannerOut, BannerUpdate
from app.schemas.transactions import DeleteResult
from app.services import banner_service

router = APIRouter()


@router.get("", response_model=List[BannerOut])
def list_banners(db: Session = Depends(get_db)):
    """Active banners in display order."""
    return banner_service.list_banners(db)


@router.post("", response_model=BannerOut, status_code=status.HTTP_201_CREATED)
def create_banner(payload: BannerCreate, db: Session = Depends(get_db)):
    return banner_service.create_banner(db, payload)


@router.put("/{banner_id}", response_model=BannerOut)
def update_banner(banner_id: int, payload: BannerUpdate, db: Session = Depends(get_db)):
    return banner_service.update_banner(db, banner_id, payload)


@router.delete("/{banner_id}", response_model=DeleteResult)
def delete_banner(banner_id: int, db: Session = Depends(get_db)):
    banner_service.delete_banner(db, banner_id)
    return {"success": True, "message": f"Banner {banner_id} deleted"}
