from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.dependencies import get_db
from app.schemas.cart import CartItemOut, CartQuantityUpdate
from app.schemas.transactions import DeleteResult
from app.services import cart_service

router = APIRouter()


@router.get("/{user_id}/cart", response_model=List[CartItemOut])
def get_cart(user_id: int, db: Session = Depends(get_db)):
    return cart_service.list_cart(db, user_id)


@router.put("/{user_id}/cart", response_model=List[CartItemOut])
def set_cart_quantity(user_id: int, payload: CartQuantityUpdate, db: Session = Depends(get_db)):
    return cart_service.set_quantity(db, user_id, payload)


@router.delete("/{user_id}/cart", response_model=DeleteResult)
def clear_cart(user_id: int, db: Session = Depends(get_db)):
    cart_service.list_cart(db, user_id)
    removed = cart_service.clear_cart(db, user_id)
    return {"success": True, "message": f"Removed {removed} cart item(s)"}
