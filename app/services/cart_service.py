from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import ReferenceNotFound
from app.models import CartItem, Product, User
from app.schemas.cart import CartQuantityUpdate
from app.services.patch import get_or_404


def list_cart(db: Session, user_id: int) -> List[CartItem]:
    get_or_404(db, User, user_id, "User")
    return (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.id)
        .all()
    )


def set_quantity(db: Session, user_id: int, data: CartQuantityUpdate) -> List[CartItem]:
    """Upsert one cart line; quantity 0 drops it."""
    get_or_404(db, User, user_id, "User")
    if db.get(Product, data.product_id) is None:
        raise ReferenceNotFound(f"Product with ID {data.product_id} does not exist")

    item = (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id, CartItem.product_id == data.product_id)
        .first()
    )
    if data.quantity == 0:
        if item:
            db.delete(item)
    elif item:
        item.quantity = data.quantity
    else:
        db.add(CartItem(user_id=user_id, product_id=data.product_id, quantity=data.quantity))
    db.commit()
    return list_cart(db, user_id)


def clear_cart(db: Session, user_id: int) -> int:
    removed = (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed
