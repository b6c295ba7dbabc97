from datetime import datetime

from sqlalchemy.orm import Session

from app.core.exceptions import AccountDisabled, AuthenticationError
from app.core.security import dummy_verify, verify_password
from app.logger import Logger
from app.models.admins import Admin
from app.models.users import User

logger = Logger.get_logger(__name__)


def _check_credentials(record, password: str) -> None:
    # unknown email and wrong password must look the same to the caller
    if record is None:
        dummy_verify()
        raise AuthenticationError()
    if not verify_password(password, record.password):
        raise AuthenticationError()


def authenticate_user(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    _check_credentials(user, password)
    logger.info("User %s logged in", user.id)
    return user


def authenticate_admin(db: Session, email: str, password: str) -> Admin:
    """
    Verify admin credentials, then the account state.

    A deactivated account is only reported once the password checked out,
    so the 403 cannot be used to test which emails are registered.
    """
    admin = db.query(Admin).filter(Admin.email == email.strip().lower()).first()
    _check_credentials(admin, password)
    if not admin.is_active:
        raise AccountDisabled("Admin account is deactivated")

    admin.last_login = datetime.utcnow()
    db.commit()
    db.refresh(admin)
    logger.info("Admin %s logged in", admin.id)
    return admin
