from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.admins import AdminCreate, AdminLoginResponse, AdminOut, AdminUpdate
from app.schemas.transactions import DeleteResult
from app.schemas.users import LoginRequest
from app.services import admin_service, auth_service

router = APIRouter()


@router.post("/login", response_model=AdminLoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    admin = auth_service.authenticate_admin(db, payload.email, payload.password)
    return {"success": True, "admin": admin}


@router.get("", response_model=List[AdminOut])
def list_admins(db: Session = Depends(get_db)):
    return admin_service.list_admins(db)


@router.post("", response_model=AdminOut, status_code=status.HTTP_201_CREATED)
def create_admin(payload: AdminCreate, db: Session = Depends(get_db)):
    return admin_service.create_admin(db, payload)


@router.get("/{admin_id}", response_model=AdminOut)
def get_admin(admin_id: int, db: Session = Depends(get_db)):
    return admin_service.get_admin(db, admin_id)


@router.put("/{admin_id}", response_model=AdminOut)
def update_admin(admin_id: int, payload: AdminUpdate, db: Session = Depends(get_db)):
    return admin_service.update_admin(db, admin_id, payload)


@router.delete("/{admin_id}", response_model=DeleteResult)
def delete_admin(admin_id: int, db: Session = Depends(get_db)):
    admin_service.delete_admin(db, admin_id)
    return {"success": True, "message": f"Admin {admin_id} deleted"}
