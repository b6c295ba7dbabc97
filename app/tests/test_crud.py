import pytest

from app.models import Banner, CartItem, Product, User, Workshop

TX = "/api/transactions"


def make_shop_order(client, workshop, product, quantity=1):
    body = {
        "cart": [{"id": product.id, "quantity": quantity}],
        "workshop": {"id": workshop.id, "name": workshop.name},
        "total": float(product.price * quantity),
    }
    res = client.post(f"{TX}/checkout", json=body)
    assert res.status_code == 201
    return res.json()["transaction"]


# ---------- health ----------

def test_health(client):
    res = client.get("/api/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "database": "connected"}


# ---------- workshops ----------

def test_workshop_crud(client):
    res = client.post(
        "/api/workshops",
        json={"name": "Kedai Motor Ah Seng", "rating": 4.2, "location": "Miri", "icon": "tools"},
    )
    assert res.status_code == 201
    workshop_id = res.json()["id"]

    res = client.put(f"/api/workshops/{workshop_id}", json={"rating": 4.8})
    assert res.status_code == 200
    assert res.json()["rating"] == 4.8
    assert res.json()["name"] == "Kedai Motor Ah Seng"

    assert [w["id"] for w in client.get("/api/workshops").json()] == [workshop_id]
    assert client.delete(f"/api/workshops/{workshop_id}").status_code == 200
    assert client.get(f"/api/workshops/{workshop_id}").status_code == 404


def test_workshop_rating_bounds(client):
    res = client.post(
        "/api/workshops",
        json={"name": "Too Good", "rating": 7, "location": "Sibu", "icon": "star"},
    )

    assert res.status_code == 400
    assert res.json()["error"].startswith("Invalid value for rating")


def test_delete_workshop_with_shop_order_is_rejected(client, db, workshop, oil):
    make_shop_order(client, workshop, oil)

    res = client.delete(f"/api/workshops/{workshop.id}")

    assert res.status_code == 409
    assert res.json() == {"error": f"Workshop {workshop.id} is referenced by existing shop orders"}
    assert db.get(Workshop, workshop.id) is not None


@pytest.mark.parametrize(
    "path, body, label",
    [
        (
            "towing",
            {"workshopName": "Soan Huat", "amount": 500, "pickup": "A", "destination": "B"},
            "towing requests",
        ),
        (
            "quotation",
            {"model": "Proton X70", "year": "2021", "engine": "1.8 TGDi", "chassis": "PX7-001", "amount": 5},
            "quotations",
        ),
    ],
)
def test_delete_workshop_with_service_rows_is_rejected(client, workshop, path, body, label):
    body = dict(body, workshopId=workshop.id)
    assert client.post(f"{TX}/{path}", json=body).status_code == 201

    res = client.delete(f"/api/workshops/{workshop.id}")

    assert res.status_code == 409
    assert label in res.json()["error"]


def test_delete_workshop_after_its_orders_are_gone(client, db, workshop, oil):
    txn = make_shop_order(client, workshop, oil)
    assert client.delete(f"{TX}/{txn['id']}").status_code == 200

    res = client.delete(f"/api/workshops/{workshop.id}")

    assert res.status_code == 200
    db.expire_all()
    # product keeps existing without a workshop
    assert db.get(Product, oil.id).workshop_id is None


def test_update_workshop_requires_fields(client, workshop):
    assert client.put(f"/api/workshops/{workshop.id}", json={}).status_code == 400
    assert client.put("/api/workshops/999", json={"name": "x"}).status_code == 404


# ---------- products ----------

@pytest.mark.parametrize("raw", ["", "abc", "999", None, 0, "99999999999999999999"])
def test_product_with_unusable_workshop_is_stored_without_one(client, workshop, raw):
    body = {"name": "Wiper Blade", "price": 35, "category": "Accessories", "image": "/w.png", "workshopId": raw}
    res = client.post("/api/products", json=body)

    assert res.status_code == 201
    assert res.json()["workshop_id"] is None


def test_product_with_workshop_string_id(client, workshop):
    body = {"name": "Air Filter", "price": 48.9, "category": "Filters", "image": "/f.png", "workshopId": str(workshop.id)}
    res = client.post("/api/products", json=body)

    assert res.status_code == 201
    assert res.json()["workshop_id"] == workshop.id


def test_product_filter_by_category(client, oil, brake_pads):
    res = client.get("/api/products", params={"category": "Brakes"})

    assert [p["name"] for p in res.json()] == ["Ceramic Brake Pads"]
    assert len(client.get("/api/products").json()) == 2


def test_product_partial_update(client, db, oil):
    res = client.put(f"/api/products/{oil.id}", json={"price": 199.9})

    assert res.status_code == 200
    assert res.json()["price"] == 199.9
    assert res.json()["stock"] == 20
    assert res.json()["workshop_id"] == oil.workshop_id

    res = client.put(f"/api/products/{oil.id}", json={"workshopId": None})
    assert res.json()["workshop_id"] is None

    assert client.put(f"/api/products/{oil.id}", json={"name": None}).status_code == 400


def test_price_change_does_not_rewrite_order_history(client, workshop, oil):
    txn = make_shop_order(client, workshop, oil, quantity=2)
    client.put(f"/api/products/{oil.id}", json={"price": 1, "name": "Renamed Oil"})

    item = client.get(f"{TX}/{txn['id']}").json()["detail"]["items"][0]

    assert item["product_name"] == "Synthetic Engine Oil 5W-40"
    assert item["product_price"] == 185.0
    assert item["subtotal"] == 370.0


def test_delete_product_in_order_history_is_rejected(client, workshop, oil, brake_pads):
    make_shop_order(client, workshop, oil)

    res = client.delete(f"/api/products/{oil.id}")
    assert res.status_code == 409
    assert res.json() == {"error": f"Product {oil.id} is referenced by existing shop orders"}

    assert client.delete(f"/api/products/{brake_pads.id}").status_code == 200
    assert client.delete(f"/api/products/{brake_pads.id}").status_code == 404


# ---------- users ----------

def test_user_crud(client, db):
    res = client.post("/api/users", json={"email": "Ben@Example.com", "password": "pw", "name": "Ben"})
    assert res.status_code == 201
    created = res.json()
    assert created["email"] == "ben@example.com"
    assert "password" not in created

    res = client.put(f"/api/users/{created['id']}", json={"phone": "0198887777"})
    assert res.json()["phone"] == "0198887777"
    assert res.json()["name"] == "Ben"

    assert client.delete(f"/api/users/{created['id']}").status_code == 200
    assert client.get(f"/api/users/{created['id']}").status_code == 404


def test_user_blank_password_keeps_hash(client, db, user):
    before = user.password

    res = client.put(f"/api/users/{user.id}", json={"name": "Aisyah Binti Ali", "password": ""})

    assert res.status_code == 200
    db.expire_all()
    assert db.get(User, user.id).password == before

    client.put(f"/api/users/{user.id}", json={"password": "new-pass"})
    db.expire_all()
    assert db.get(User, user.id).password != before


def test_user_email_must_stay_unique(client, user):
    other = client.post("/api/users", json={"email": "other@example.com", "password": "pw", "name": "Other"}).json()

    res = client.put(f"/api/users/{other['id']}", json={"email": user.email})

    assert res.status_code == 400
    assert res.json() == {"error": "Email already in use by another account"}


def test_register_missing_fields(client):
    res = client.post("/api/users/register", json={"email": "x@example.com"})

    assert res.status_code == 400
    assert res.json() == {"error": "Missing required fields: name, password"}


def test_deleting_user_keeps_ledger(client, db, workshop, oil, user):
    body = {
        "cart": [{"id": oil.id, "quantity": 1}],
        "workshop": {"id": workshop.id, "name": "Soan Huat"},
        "total": 185,
        "userId": user.id,
    }
    txn_id = client.post(f"{TX}/checkout", json=body).json()["transaction"]["id"]

    assert client.delete(f"/api/users/{user.id}").status_code == 200

    txn = client.get(f"{TX}/{txn_id}").json()
    assert txn["user_id"] is None


# ---------- vehicles ----------

def test_vehicle_crud(client, user):
    base = f"/api/users/{user.id}/vehicles"
    res = client.post(
        base,
        json={"model": "Perodua Myvi", "year": 2020, "chassis": "M600-88", "engine": "1.5 Dual VVT-i", "plateNumber": "QAA 1234"},
    )
    assert res.status_code == 201
    vehicle = res.json()
    assert vehicle["plate_number"] == "QAA 1234"
    assert vehicle["year"] == "2020"

    res = client.put(f"{base}/{vehicle['id']}", json={"plateNumber": None})
    assert res.json()["plate_number"] is None

    assert len(client.get(base).json()) == 1
    assert client.delete(f"{base}/{vehicle['id']}").status_code == 200
    assert client.get(f"{base}/{vehicle['id']}").status_code == 404


def test_vehicle_belongs_to_user(client, user):
    other = client.post("/api/users", json={"email": "o@example.com", "password": "pw", "name": "O"}).json()
    vehicle = client.post(
        f"/api/users/{user.id}/vehicles",
        json={"model": "Axia", "year": "2016", "chassis": "B200", "engine": "1.0"},
    ).json()

    assert client.get(f"/api/users/{other['id']}/vehicles/{vehicle['id']}").status_code == 404
    assert client.get("/api/users/999/vehicles").status_code == 404


# ---------- cart ----------

def test_cart_quantity_and_clear(client, db, user, oil, brake_pads):
    base = f"/api/users/{user.id}/cart"

    client.put(base, json={"productId": oil.id, "quantity": 2})
    res = client.put(base, json={"productId": brake_pads.id, "quantity": 1})
    assert [(i["product_id"], i["quantity"]) for i in res.json()] == [(oil.id, 2), (brake_pads.id, 1)]

    res = client.put(base, json={"productId": oil.id, "quantity": 5})
    assert res.json()[0]["quantity"] == 5

    res = client.put(base, json={"productId": brake_pads.id, "quantity": 0})
    assert [i["product_id"] for i in res.json()] == [oil.id]
    assert res.json()[0]["product"]["name"] == "Synthetic Engine Oil 5W-40"

    assert client.put(base, json={"productId": 999, "quantity": 1}).status_code == 400

    res = client.delete(base)
    assert res.json() == {"success": True, "message": "Removed 1 cart item(s)"}
    assert db.query(CartItem).count() == 0


# ---------- banners ----------

def test_banners_listed_active_in_display_order(client, db):
    db.add_all(
        [
            Banner(title="Second", subtitle="s", image="/2.png", display_order=2),
            Banner(title="First", subtitle="s", image="/1.png", display_order=1),
            Banner(title="Hidden", subtitle="s", image="/h.png", display_order=0, is_active=False),
        ]
    )
    db.commit()

    assert [b["title"] for b in client.get("/api/banners").json()] == ["First", "Second"]


def test_banner_crud(client):
    res = client.post(
        "/api/banners",
        json={"title": "Merdeka Sale", "subtitle": "20% off oil", "image": "/m.png", "linkUrl": "/products?category=Oil"},
    )
    assert res.status_code == 201
    banner = res.json()
    assert banner["link_url"] == "/products?category=Oil"
    assert banner["is_active"] is True

    res = client.put(f"/api/banners/{banner['id']}", json={"isActive": False})
    assert res.json()["is_active"] is False
    assert client.get("/api/banners").json() == []

    assert client.delete(f"/api/banners/{banner['id']}").status_code == 200
    assert client.delete(f"/api/banners/{banner['id']}").status_code == 404
