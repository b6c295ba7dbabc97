from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.core.security import hash_password
from app.logger import Logger
from app.models.admins import Admin
from app.schemas.admins import AdminCreate, AdminUpdate
from app.services.patch import apply_patch, extract_patch, get_or_404

logger = Logger.get_logger(__name__)


def _ensure_email_free(db: Session, email: str, exclude_id: int = None) -> None:
    query = db.query(Admin).filter(Admin.email == email)
    if exclude_id is not None:
        query = query.filter(Admin.id != exclude_id)
    if query.first():
        raise ValidationError("Admin with this email already exists")


def list_admins(db: Session) -> List[Admin]:
    return db.query(Admin).order_by(Admin.id).all()


def get_admin(db: Session, admin_id: int) -> Admin:
    return get_or_404(db, Admin, admin_id, "Admin")


def create_admin(db: Session, admin_data: AdminCreate) -> Admin:
    email = admin_data.email.strip().lower()
    _ensure_email_free(db, email)
    admin = Admin(
        email=email,
        password=hash_password(admin_data.password),
        name=admin_data.name,
        role=admin_data.role,
        is_active=admin_data.is_active,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Admin %s created with role %s", admin.id, admin.role)
    return admin


def update_admin(db: Session, admin_id: int, admin_in: AdminUpdate) -> Admin:
    admin = get_admin(db, admin_id)
    data = extract_patch(admin_in, non_nullable=("email", "name", "role", "is_active"))

    password = data.pop("password", None)
    if password:
        data["password"] = hash_password(password)
    if "email" in data:
        data["email"] = data["email"].strip().lower()
        _ensure_email_free(db, data["email"], exclude_id=admin.id)

    apply_patch(admin, data)
    db.commit()
    db.refresh(admin)
    return admin


def delete_admin(db: Session, admin_id: int) -> None:
    admin = get_admin(db, admin_id)
    db.delete(admin)
    db.commit()
    logger.info("Admin %s deleted", admin_id)
