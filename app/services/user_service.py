from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.core.security import hash_password
from app.logger import Logger
from app.models.users import User
from app.schemas.users import UserCreate, UserUpdate
from app.services.patch import apply_patch, extract_patch, get_or_404

logger = Logger.get_logger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _ensure_email_free(db: Session, email: str, exclude_id: int = None) -> None:
    query = db.query(User).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    if query.first():
        raise ValidationError("Email already in use by another account")


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def get_user(db: Session, user_id: int) -> User:
    return get_or_404(db, User, user_id, "User")


def create_user(db: Session, user_data: UserCreate) -> User:
    email = _normalize_email(user_data.email)
    _ensure_email_free(db, email)
    user = User(
        email=email,
        password=hash_password(user_data.password),
        name=user_data.name,
        phone=user_data.phone,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User %s registered", user.id)
    return user


def update_user(db: Session, user_id: int, user_in: UserUpdate) -> User:
    user = get_user(db, user_id)
    data = extract_patch(user_in, non_nullable=("email", "name"))

    password = data.pop("password", None)
    if password:
        data["password"] = hash_password(password)
    if "email" in data:
        data["email"] = _normalize_email(data["email"])
        _ensure_email_free(db, data["email"], exclude_id=user.id)

    apply_patch(user, data)
    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int) -> None:
    user = get_user(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("User %s deleted", user_id)
