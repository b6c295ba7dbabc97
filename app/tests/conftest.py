import os

# must be set before anything imports app.core.config
os.environ["DATABASE_URI"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.security import hash_password
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.main import app as application
from app.models import Admin, Product, User, Workshop


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(application)


@pytest.fixture
def workshop(db):
    ws = Workshop(
        name="Syarikat Bengkel Soan Huat Sdn. Bhd.",
        rating=Decimal("4.5"),
        location="Kuching",
        icon="car-wrench",
    )
    db.add(ws)
    db.commit()
    db.refresh(ws)
    return ws


@pytest.fixture
def oil(db, workshop):
    product = Product(
        name="Synthetic Engine Oil 5W-40",
        price=Decimal("185.00"),
        category="Oil",
        image="/images/oil.png",
        stock=20,
        workshop_id=workshop.id,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def brake_pads(db):
    product = Product(
        name="Ceramic Brake Pads",
        price=Decimal("120.50"),
        category="Brakes",
        image="/images/brakes.png",
        stock=8,
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def user(db):
    u = User(
        email="aisyah@example.com",
        password=hash_password("s3cret-pass"),
        name="Aisyah",
        phone="0123456789",
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def admin(db):
    a = Admin(
        email="ops@example.com",
        password=hash_password("admin-pass"),
        name="Ops",
        role="admin",
        is_active=True,
    )
    db.add(a)
    db.commit()
    db.refresh(a)
    return a
