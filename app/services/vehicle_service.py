from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import NotFound
from app.models import User, Vehicle
from app.schemas.vehicles import VehicleCreate, VehicleUpdate
from app.services.patch import apply_patch, extract_patch, get_or_404


def list_vehicles(db: Session, user_id: int) -> List[Vehicle]:
    get_or_404(db, User, user_id, "User")
    return (
        db.query(Vehicle)
        .filter(Vehicle.user_id == user_id)
        .order_by(Vehicle.created_at.desc(), Vehicle.id.desc())
        .all()
    )


def get_vehicle(db: Session, user_id: int, vehicle_id: int) -> Vehicle:
    vehicle = (
        db.query(Vehicle)
        .filter(Vehicle.id == vehicle_id, Vehicle.user_id == user_id)
        .first()
    )
    if not vehicle:
        raise NotFound("Vehicle not found")
    return vehicle


def create_vehicle(db: Session, user_id: int, vehicle_data: VehicleCreate) -> Vehicle:
    get_or_404(db, User, user_id, "User")
    vehicle = Vehicle(user_id=user_id, **vehicle_data.model_dump())
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    return vehicle


def update_vehicle(db: Session, user_id: int, vehicle_id: int, vehicle_in: VehicleUpdate) -> Vehicle:
    vehicle = get_vehicle(db, user_id, vehicle_id)
    data = extract_patch(vehicle_in, non_nullable=("model", "year", "chassis", "engine"))
    apply_patch(vehicle, data)
    db.commit()
    db.refresh(vehicle)
    return vehicle


def delete_vehicle(db: Session, user_id: int, vehicle_id: int) -> None:
    vehicle = get_vehicle(db, user_id, vehicle_id)
    db.delete(vehicle)
    db.commit()
