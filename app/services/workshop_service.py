from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import ReferenceInUse
from app.logger import Logger
from app.models import Quotation, ShopOrder, TowingRequest, Workshop
from app.schemas.workshops import WorkshopCreate, WorkshopUpdate
from app.services.patch import apply_patch, extract_patch, get_or_404

logger = Logger.get_logger(__name__)


def list_workshops(db: Session) -> List[Workshop]:
    return db.query(Workshop).order_by(Workshop.rating.desc(), Workshop.id).all()


def get_workshop(db: Session, workshop_id: int) -> Workshop:
    return get_or_404(db, Workshop, workshop_id, "Workshop")


def create_workshop(db: Session, workshop_data: WorkshopCreate) -> Workshop:
    workshop = Workshop(**workshop_data.model_dump())
    db.add(workshop)
    db.commit()
    db.refresh(workshop)
    return workshop


def update_workshop(db: Session, workshop_id: int, workshop_in: WorkshopUpdate) -> Workshop:
    workshop = get_workshop(db, workshop_id)
    data = extract_patch(workshop_in, non_nullable=("name", "rating", "location", "icon"))
    apply_patch(workshop, data)
    db.commit()
    db.refresh(workshop)
    return workshop


def delete_workshop(db: Session, workshop_id: int) -> None:
    workshop = get_workshop(db, workshop_id)
    for model, label in (
        (ShopOrder, "shop orders"),
        (TowingRequest, "towing requests"),
        (Quotation, "quotations"),
    ):
        in_use = db.query(model.id).filter(model.workshop_id == workshop_id).first()
        if in_use:
            raise ReferenceInUse(f"Workshop {workshop_id} is referenced by existing {label}")

    db.delete(workshop)
    db.commit()
    logger.info("Workshop %s deleted", workshop_id)
