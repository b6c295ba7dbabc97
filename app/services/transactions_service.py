import json
import random
import uuid
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import InternalError, ReferenceNotFound, ValidationError
from app.db.session import transaction_scope
from app.logger import Logger
from app.models import (
    Product,
    Quotation,
    ShopOrder,
    ShopOrderItem,
    TowingRequest,
    Transaction,
    User,
    Workshop,
)
from app.schemas.transactions import (
    CheckoutCreate,
    QuotationCreate,
    QuoteType,
    TowingCreate,
    TransactionStatus,
    TransactionType,
    TransactionUpdate,
)
from app.services.cart_service import clear_cart
from app.services.patch import apply_patch, extract_patch, get_or_404
from app.services.workshop_refs import normalize_workshop_id

logger = Logger.get_logger(__name__)

CENT = Decimal("0.01")


def money(value) -> Decimal:
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def generate_transaction_id(db: Session) -> str:
    """
    Draw ``TX`` + zero padded digits until one is free in the ledger.

    Falls back to a UUID based id once the attempts run out, which only
    happens when the short id space is close to full.
    """
    prefix = settings.TRANSACTION_ID_PREFIX
    digits = settings.TRANSACTION_ID_DIGITS
    for _ in range(settings.TRANSACTION_ID_MAX_ATTEMPTS):
        candidate = f"{prefix}{random.randint(0, 10 ** digits - 1):0{digits}d}"
        if db.get(Transaction, candidate) is None:
            return candidate
        logger.debug("Transaction id %s already taken, drawing again", candidate)

    fallback = f"{prefix}{uuid.uuid4().hex[:12].upper()}"
    logger.warning(
        "No free %s-digit transaction id after %s attempts, using %s",
        digits, settings.TRANSACTION_ID_MAX_ATTEMPTS, fallback,
    )
    return fallback


def _insert_ledger_entry(db: Session, build: Callable[[str], Transaction]) -> Transaction:
    """
    Run ``build`` with a fresh transaction id inside one unit of work.

    ``generate_transaction_id`` only checks ids that are already committed, so a
    concurrent request can claim the same id first. That surfaces as an
    ``IntegrityError`` on the ledger insert; the whole unit is rolled back and
    rebuilt with a new id. Integrity errors on other rows are re-raised.
    """
    for _ in range(settings.TRANSACTION_ID_MAX_ATTEMPTS):
        txn_id = generate_transaction_id(db)
        try:
            with transaction_scope(db):
                return build(txn_id)
        except IntegrityError:
            if db.get(Transaction, txn_id) is None:
                raise
            logger.warning("Transaction id %s was claimed concurrently, retrying", txn_id)
    raise InternalError("Could not allocate a transaction id")


def quote_price(quote_type: QuoteType) -> Decimal:
    if quote_type == QuoteType.detailed:
        return money(settings.DETAILED_QUOTE_PRICE)
    return money(settings.BRIEF_QUOTE_PRICE)


def _resolve_user(db: Session, user_id: Optional[int]) -> Optional[int]:
    if user_id is None:
        return None
    if db.get(User, user_id) is None:
        raise ReferenceNotFound(f"User with ID {user_id} does not exist")
    return user_id


def _shop_title(item_count: int, workshop_name: str) -> str:
    noun = "Item" if item_count == 1 else "Items"
    return f"{item_count} {noun} Order at {workshop_name}"


# ---------- checkout ----------

def _price_cart(db: Session, data: CheckoutCreate) -> Tuple[List[Tuple[Product, int]], Decimal]:
    lines = []
    total = Decimal("0.00")
    for line in data.cart:
        product = db.get(Product, line.id)
        if product is None:
            raise ReferenceNotFound(f"Product with ID {line.id} does not exist")
        if line.price is not None and money(line.price) != money(product.price):
            logger.info(
                "Cart price for product %s is stale (client %s, current %s)",
                product.id, line.price, product.price,
            )
        lines.append((product, line.quantity))
        total += money(product.price) * line.quantity
    return lines, money(total)


def _add_order_items(db: Session, order: ShopOrder, lines: List[Tuple[Product, int]]) -> None:
    for product, quantity in lines:
        price = money(product.price)
        order.items.append(
            ShopOrderItem(
                product_id=product.id,
                product_name=product.name,
                product_price=price,
                quantity=quantity,
                subtotal=money(price * quantity),
            )
        )
    db.flush()


def checkout(db: Session, data: CheckoutCreate) -> Transaction:
    workshop_id = normalize_workshop_id(db, data.workshop.id, required=True)
    user_id = _resolve_user(db, data.user_id)

    lines, computed_total = _price_cart(db, data)
    supplied_total = money(data.total)
    if computed_total != supplied_total:
        raise ValidationError(
            f"Total mismatch: cart adds up to {computed_total}, got {supplied_total}"
        )

    workshop_name = data.workshop.name or db.get(Workshop, workshop_id).name
    today = date.today()

    def build(txn_id: str) -> Transaction:
        txn = Transaction(
            id=txn_id,
            type=TransactionType.Shop,
            title=_shop_title(len(data.cart), workshop_name),
            date=today,
            amount=computed_total,
            status=TransactionStatus.pending,
            user_id=user_id,
        )
        db.add(txn)
        order = ShopOrder(
            transaction=txn,
            user_id=user_id,
            workshop_id=workshop_id,
            total=computed_total,
            status=TransactionStatus.pending,
            date=today,
        )
        db.add(order)
        db.flush()
        _add_order_items(db, order, lines)
        return txn

    txn = _insert_ledger_entry(db, build)

    logger.info(
        "Checkout %s: %s line(s), total %s, workshop %s, user %s",
        txn.id, len(lines), computed_total, workshop_id, user_id,
    )

    if user_id is not None:
        try:
            clear_cart(db, user_id)
        except SQLAlchemyError:
            db.rollback()
            logger.error("Could not clear cart of user %s after checkout %s", user_id, txn.id, exc_info=True)

    db.refresh(txn)
    return txn


# ---------- towing ----------

def create_towing_request(db: Session, data: TowingCreate) -> Transaction:
    workshop_id = normalize_workshop_id(db, data.workshop_id, required=True)
    user_id = _resolve_user(db, data.user_id)

    rate = money(settings.TOWING_FLAT_RATE)
    amount = money(data.amount)
    if amount != rate:
        raise ValidationError(f"Towing amount must be {rate}")

    today = date.today()

    def build(txn_id: str) -> Transaction:
        txn = Transaction(
            id=txn_id,
            type=TransactionType.Towing,
            title=f"Towing to {data.workshop_name} from {data.pickup} to {data.destination}",
            date=today,
            amount=amount,
            status=TransactionStatus.pending,
            user_id=user_id,
        )
        db.add(txn)
        db.add(
            TowingRequest(
                transaction=txn,
                user_id=user_id,
                workshop_id=workshop_id,
                pickup=data.pickup,
                destination=data.destination,
                pickup_latitude=data.pickup_latitude,
                pickup_longitude=data.pickup_longitude,
                destination_latitude=data.destination_latitude,
                destination_longitude=data.destination_longitude,
                notes=data.notes,
                amount=amount,
                status=TransactionStatus.pending,
                date=today,
            )
        )
        return txn

    txn = _insert_ledger_entry(db, build)

    logger.info("Towing request %s for workshop %s, user %s", txn.id, workshop_id, user_id)
    db.refresh(txn)
    return txn


# ---------- quotation ----------

def create_quotation(db: Session, data: QuotationCreate) -> Transaction:
    workshop_id = normalize_workshop_id(db, data.workshop_id, required=True)
    user_id = _resolve_user(db, data.user_id)

    price = quote_price(data.quote_type)
    amount = money(data.amount)
    if amount != price:
        raise ValidationError(f"Amount for a {data.quote_type.value} quote must be {price}")

    label = data.type or data.quote_type.value.capitalize()
    today = date.today()

    def build(txn_id: str) -> Transaction:
        txn = Transaction(
            id=txn_id,
            type=TransactionType.Quotation,
            title=f"{label} Quote: {data.model}",
            date=today,
            amount=amount,
            status=TransactionStatus.pending,
            user_id=user_id,
        )
        db.add(txn)
        db.add(
            Quotation(
                transaction=txn,
                user_id=user_id,
                workshop_id=workshop_id,
                model=data.model,
                year=data.year,
                engine=data.engine,
                chassis=data.chassis,
                description=data.description,
                quote_type=data.quote_type,
                images=json.dumps(data.images) if data.images else None,
                amount=amount,
                status=TransactionStatus.pending,
                date=today,
            )
        )
        return txn

    txn = _insert_ledger_entry(db, build)

    logger.info("Quotation %s (%s) for workshop %s, user %s", txn.id, data.quote_type.value, workshop_id, user_id)
    db.refresh(txn)
    return txn


# ---------- status / CRUD ----------

def list_transactions(
    db: Session,
    type: Optional[TransactionType] = None,
    status: Optional[TransactionStatus] = None,
    user_id: Optional[int] = None,
) -> List[Transaction]:
    query = db.query(Transaction)
    if type is not None:
        query = query.filter(Transaction.type == type)
    if status is not None:
        query = query.filter(Transaction.status == status)
    if user_id is not None:
        query = query.filter(Transaction.user_id == user_id)
    return query.order_by(Transaction.date.desc(), Transaction.created_at.desc()).all()


def get_transaction(db: Session, txn_id: str) -> Transaction:
    return get_or_404(db, Transaction, txn_id, "Transaction")


def update_transaction(db: Session, txn_id: str, payload: TransactionUpdate) -> Transaction:
    txn = get_transaction(db, txn_id)
    data = extract_patch(payload, non_nullable=("type", "title", "amount", "status", "date"))

    # the detail row lives in a per-type table, so the type is fixed at creation
    if "type" in data and data["type"] != txn.type:
        raise ValidationError(f"Cannot change type of transaction {txn.id} from {txn.type.value}")
    if "amount" in data:
        data["amount"] = money(data["amount"])

    with transaction_scope(db):
        apply_patch(txn, data)
        if "status" in data and txn.detail is not None:
            txn.detail.status = data["status"]

    logger.info("Transaction %s updated: %s", txn.id, sorted(data))
    db.refresh(txn)
    return txn


def set_admin_message(db: Session, txn_id: str, message: Optional[str]) -> Transaction:
    txn = get_transaction(db, txn_id)
    if txn.type != TransactionType.Quotation:
        raise ValidationError("Admin messages can only be attached to quotations")

    with transaction_scope(db):
        txn.quotation.admin_message = message

    db.refresh(txn)
    return txn


def delete_transaction(db: Session, txn_id: str) -> None:
    txn = get_transaction(db, txn_id)
    with transaction_scope(db):
        db.delete(txn)
    logger.info("Transaction %s deleted", txn_id)
