from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.transactions import DeleteResult
from app.schemas.vehicles import VehicleCreate, VehicleOut, VehicleUpdate
from app.services import vehicle_service

router = APIRouter()


@router.get("/{user_id}/vehicles", response_model=List[VehicleOut])
def list_vehicles(user_id: int, db: Session = Depends(get_db)):
    return vehicle_service.list_vehicles(db, user_id)


@router.post("/{user_id}/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED)
def create_vehicle(user_id: int, payload: VehicleCreate, db: Session = Depends(get_db)):
    return vehicle_service.create_vehicle(db, user_id, payload)


@router.get("/{user_id}/vehicles/{vehicle_id}", response_model=VehicleOut)
def get_vehicle(user_id: int, vehicle_id: int, db: Session = Depends(get_db)):
    return vehicle_service.get_vehicle(db, user_id, vehicle_id)


@router.put("/{user_id}/vehicles/{vehicle_id}", response_model=VehicleOut)
def update_vehicle(user_id: int, vehicle_id: int, payload: VehicleUpdate, db: Session = Depends(get_db)):
    return vehicle_service.update_vehicle(db, user_id, vehicle_id, payload)


@router.delete("/{user_id}/vehicles/{vehicle_id}", response_model=DeleteResult)
def delete_vehicle(user_id: int, vehicle_id: int, db: Session = Depends(get_db)):
    vehicle_service.delete_vehicle(db, user_id, vehicle_id)
    return {"success": True, "message": f"Vehicle {vehicle_id} deleted"}
