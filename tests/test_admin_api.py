import pytest

from breakway_api.app.core.config import settings


ADMIN_PATHS = ["/api/admin/stats", "/api/admin/users", "/api/admin/orders"]


@pytest.mark.parametrize("path", ADMIN_PATHS)
def test_admin_routes_reject_non_admins(client, register, headers, path):
    user_id = register()
    resp = client.get(path, headers=headers(user_id))

    assert resp.status_code == 403
    assert resp.json() == {"message": "Forbidden: Admin access required."}


@pytest.mark.parametrize("path", ADMIN_PATHS)
def test_admin_routes_reject_unauthenticated(client, headers, path):
    assert client.get(path).status_code == 401
    assert client.get(path, headers=headers("U-ghost")).status_code == 401


def test_stats_after_promotion(client, register, headers, db):
    bob = register(name="Bob", contact="b@x.com")
    carol = register(name="Carol", contact="0700000001")
    client.post("/api/orders", headers=headers(bob), json={"item": "6kg"})
    order_id = client.post("/api/orders", headers=headers(carol), json={"item": "13kg"}).json()["id"]
    client.put(f"/api/orders/{order_id}/cancel", headers=headers(carol))

    assert client.get("/api/admin/stats", headers=headers(bob)).status_code == 403

    db.users.update(bob, is_admin=True)
    resp = client.get("/api/admin/stats", headers=headers(bob))

    assert resp.status_code == 200
    # Seeded admin + Bob + Carol; cancelled orders still count.
    assert resp.json() == {"userCount": 3, "orderCount": 2}


def test_admin_lists_users_without_passwords(client, register, admin_headers):
    register(name="Bob", contact="b@x.com")
    resp = client.get("/api/admin/users", headers=admin_headers)

    assert resp.status_code == 200
    users = resp.json()
    assert {u["name"] for u in users} == {settings.admin_name, "Bob"}
    assert all("password" not in u for u in users)


def test_admin_lists_all_orders(client, register, headers, admin_headers):
    alice = register(name="Alice", contact="a@x.com")
    bob = register(name="Bob", contact="b@x.com")
    client.post("/api/orders", headers=headers(alice), json={"item": "6kg"})
    client.post("/api/orders", headers=headers(bob), json={"item": "13kg"})

    resp = client.get("/api/admin/orders", headers=admin_headers)

    assert resp.status_code == 200
    assert [(o["userId"], o["item"]) for o in resp.json()] == [(alice, "6kg"), (bob, "13kg")]
