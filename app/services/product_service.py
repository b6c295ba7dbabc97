from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import ReferenceInUse
from app.logger import Logger
from app.models import Product, ShopOrderItem
from app.schemas.products import ProductCreate, ProductUpdate
from app.services.patch import apply_patch, extract_patch, get_or_404
from app.services.workshop_refs import normalize_workshop_id

logger = Logger.get_logger(__name__)


def list_products(db: Session, category: Optional[str] = None) -> List[Product]:
    query = db.query(Product)
    if category:
        query = query.filter(Product.category == category)
    return query.order_by(Product.id).all()


def get_product(db: Session, product_id: int) -> Product:
    return get_or_404(db, Product, product_id, "Product")


def create_product(db: Session, product_data: ProductCreate) -> Product:
    data = product_data.model_dump()
    data["workshop_id"] = normalize_workshop_id(db, data["workshop_id"], required=False)
    product = Product(**data)
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


def update_product(db: Session, product_id: int, product_in: ProductUpdate) -> Product:
    product = get_product(db, product_id)
    data = extract_patch(product_in, non_nullable=("name", "price", "category", "image", "stock"))
    if "workshop_id" in data:
        data["workshop_id"] = normalize_workshop_id(db, data["workshop_id"], required=False)
    apply_patch(product, data)
    db.commit()
    db.refresh(product)
    return product


def delete_product(db: Session, product_id: int) -> None:
    product = get_product(db, product_id)
    in_use = db.query(ShopOrderItem.id).filter(ShopOrderItem.product_id == product_id).first()
    if in_use:
        raise ReferenceInUse(f"Product {product_id} is referenced by existing shop orders")
    db.delete(product)
    db.commit()
    logger.info("Product %s deleted", product_id)
