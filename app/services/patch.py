from typing import Any, Dict, Iterable, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.core.exceptions import NotFound, ValidationError

ModelT = TypeVar("ModelT")


def get_or_404(db: Session, model: Type[ModelT], pk: Any, label: str) -> ModelT:
    obj = db.get(model, pk)
    if obj is None:
        raise NotFound(f"{label} not found")
    return obj


def extract_patch(payload: BaseModel, non_nullable: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Fields the client actually sent.

    Absent fields are left out; an explicit ``null`` is kept so nullable
    columns can be cleared, and rejected for the names in ``non_nullable``.
    """
    data = payload.model_dump(exclude_unset=True)
    if not data:
        raise ValidationError("No fields to update")
    for field in non_nullable:
        if field in data and data[field] is None:
            raise ValidationError(f"{field} cannot be null")
    return data


def apply_patch(obj, data: Dict[str, Any]):
    for field, value in data.items():
        setattr(obj, field, value)
    return obj
