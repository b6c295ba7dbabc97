import pytest

from app.create_admin import create_admin
from app.models import Admin
from app.core.security import verify_password


def test_register_then_login(client):
    res = client.post(
        "/api/users/register",
        json={"email": "farid@example.com", "password": "tyre-change", "name": "Farid"},
    )
    assert res.status_code == 201

    res = client.post("/api/users/login", json={"email": "Farid@example.com", "password": "tyre-change"})

    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["user"]["email"] == "farid@example.com"
    assert "password" not in body["user"]


def test_register_duplicate_email(client, user):
    res = client.post(
        "/api/users/register",
        json={"email": user.email, "password": "pw", "name": "Copycat"},
    )

    assert res.status_code == 400


def test_login_does_not_reveal_which_part_was_wrong(client, user):
    wrong_password = client.post("/api/users/login", json={"email": user.email, "password": "nope"})
    unknown_email = client.post("/api/users/login", json={"email": "ghost@example.com", "password": "nope"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid email or password"}


def test_passwords_are_hashed(db, user):
    assert user.password != "s3cret-pass"
    assert verify_password("s3cret-pass", user.password)


def test_admin_login_records_last_login(client, db, admin):
    res = client.post("/api/admin/login", json={"email": admin.email, "password": "admin-pass"})

    assert res.status_code == 200
    assert res.json()["admin"]["last_login"] is not None
    db.expire_all()
    assert db.get(Admin, admin.id).last_login is not None


def test_admin_login_enumeration_resistance(client, admin):
    wrong_password = client.post("/api/admin/login", json={"email": admin.email, "password": "x"})
    unknown_email = client.post("/api/admin/login", json={"email": "nobody@example.com", "password": "x"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_deactivated_admin(client, admin):
    res = client.put(f"/api/admin/{admin.id}", json={"isActive": False})
    assert res.json()["is_active"] is False

    # wrong password still looks like any other failed login
    assert client.post("/api/admin/login", json={"email": admin.email, "password": "x"}).status_code == 401

    res = client.post("/api/admin/login", json={"email": admin.email, "password": "admin-pass"})
    assert res.status_code == 403
    assert res.json() == {"error": "Admin account is deactivated"}


def test_admin_crud(client):
    res = client.post("/api/admin", json={"email": "lead@example.com", "password": "pw", "name": "Lead", "role": "manager"})
    assert res.status_code == 201
    created = res.json()
    assert created["role"] == "manager"
    assert created["is_active"] is True

    assert client.post("/api/admin", json={"email": "lead@example.com", "password": "pw", "name": "Dup"}).status_code == 400

    res = client.put(f"/api/admin/{created['id']}", json={"name": "Team Lead", "password": ""})
    assert res.json()["name"] == "Team Lead"
    assert client.post("/api/admin/login", json={"email": "lead@example.com", "password": "pw"}).status_code == 200

    assert client.put(f"/api/admin/{created['id']}", json={"is_active": None}).status_code == 400
    assert client.delete(f"/api/admin/{created['id']}").status_code == 200
    assert client.get(f"/api/admin/{created['id']}").status_code == 404


@pytest.mark.parametrize("email", ["Root@Example.com", "root@example.com"])
def test_create_admin_cli(db, email):
    created = create_admin(email, "Root", "bootstrap-pass")

    assert created is not None
    assert create_admin("root@example.com", "Again", "other") is None
    stored = db.query(Admin).filter_by(email="root@example.com").one()
    assert verify_password("bootstrap-pass", stored.password)
