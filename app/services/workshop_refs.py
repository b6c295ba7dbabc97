"""
Workshop reference normalization.

Clients send workshop ids in every shape a form can produce: ints, numeric
strings, floats, empty strings or nothing at all. ``normalize_workshop_id``
turns that into either a verified workshop id or ``None``.

Required contexts (checkout, towing, quotation) never return ``None``: a
missing or unparseable value raises ``ValidationError`` and an unknown id
raises ``ReferenceNotFound``. Optional contexts (products) degrade to
``None`` instead.
"""
from typing import Any, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import ReferenceNotFound, ValidationError
from app.logger import Logger
from app.models.workshops import Workshop
from app.schemas.transactions import ROW_ID_MAX

logger = Logger.get_logger(__name__)


def parse_workshop_id(raw: Any) -> Optional[int]:
    """Parse a raw client value into a positive int that fits the id column, or ``None``."""
    if raw is None:
        return None
    # bool is an int subclass, True must not become workshop 1
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            return None
        value = int(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return None
        try:
            value = int(text)
        except ValueError:
            return None
    else:
        return None
    if value <= 0 or value > ROW_ID_MAX:
        return None
    return value


def workshop_exists(db: Session, workshop_id: int) -> bool:
    return db.query(Workshop.id).filter(Workshop.id == workshop_id).first() is not None


def normalize_workshop_id(db: Session, raw: Any, *, required: bool) -> Optional[int]:
    parsed = parse_workshop_id(raw)
    logger.debug(
        "normalize_workshop_id raw=%r (%s) parsed=%r required=%s",
        raw, type(raw).__name__, parsed, required,
    )

    if parsed is None:
        if required:
            if raw is None or (isinstance(raw, str) and not raw.strip()):
                raise ValidationError("Workshop is required")
            raise ValidationError("Invalid workshop id")
        return None

    if not workshop_exists(db, parsed):
        if required:
            raise ReferenceNotFound(f"Workshop with ID {parsed} does not exist")
        logger.warning("Workshop %s does not exist, storing no workshop", parsed)
        return None

    logger.debug("normalize_workshop_id resolved %r -> %s", raw, parsed)
    return parsed
