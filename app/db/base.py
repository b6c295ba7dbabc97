# Import every model so Base.metadata knows all tables (create_all, alembic).
from app.db.session import Base  # noqa: F401
from app import models  # noqa: F401
