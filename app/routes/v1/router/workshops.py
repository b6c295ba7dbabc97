from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.transactions import DeleteResult
from app.schemas.workshops import WorkshopCreate, WorkshopOut, WorkshopUpdate
from app.services import workshop_service

router = APIRouter()


@router.get("", response_model=List[WorkshopOut])
def list_workshops(db: Session = Depends(get_db)):
    return workshop_service.list_workshops(db)


@router.get("/{workshop_id}", response_model=WorkshopOut)
def get_workshop(workshop_id: int, db: Session = Depends(get_db)):
    return workshop_service.get_workshop(db, workshop_id)


@router.post("", response_model=WorkshopOut, status_code=status.HTTP_201_CREATED)
def create_workshop(payload: WorkshopCreate, db: Session = Depends(get_db)):
    return workshop_service.create_workshop(db, payload)


@router.put("/{workshop_id}", response_model=WorkshopOut)
def update_workshop(workshop_id: int, payload: WorkshopUpdate, db: Session = Depends(get_db)):
    return workshop_service.update_workshop(db, workshop_id, payload)


@router.delete("/{workshop_id}", response_model=DeleteResult)
def delete_workshop(workshop_id: int, db: Session = Depends(get_db)):
    """Rejected with 409 while any order, towing request or quotation points at it."""
    workshop_service.delete_workshop(db, workshop_id)
    return {"success": True, "message": f"Workshop {workshop_id} deleted"}
