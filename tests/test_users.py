"""用户接口与登录流程的集成测试。"""

from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from phone_api.packages.inventory.core.security import decode_token


def test_login_returns_token_and_user(client: TestClient):
    response = client.post("/api/User/Login", json={"email": "ADMIN@phone.local", "password": "admin123"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == "admin@phone.local"
    assert data["user"]["role_name"] == "admin"

    claims = decode_token(data["access_token"])
    assert claims["sub"] == data["user"]["id"]
    assert "permissions" not in claims


def test_login_with_wrong_password_is_unauthorized(client: TestClient):
    response = client.post("/api/User/Login", json={"email": "admin@phone.local", "password": "wrong"})
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_user_crud_flow(client: TestClient, admin_headers):
    email = f"crud-{uuid.uuid4().hex[:6]}@phone.local"
    created = client.post(
        "/api/User/Create",
        headers=admin_headers,
        json={"user_name": "crud", "email": email, "password": "secret123"},
    )
    assert created.status_code == 201
    user_id = created.json()["data"]

    duplicate = client.post(
        "/api/User/Create",
        headers=admin_headers,
        json={"user_name": "crud", "email": email.upper(), "password": "secret123"},
    )
    assert duplicate.status_code == 409

    detail = client.get(f"/api/User/GetById/{user_id}", headers=admin_headers)
    assert detail.status_code == 200
    assert detail.json()["data"]["role_id"] is None

    updated = client.put(
        f"/api/User/Update/{user_id}",
        headers=admin_headers,
        json={"user_name": "renamed", "password": "another123"},
    )
    assert updated.status_code == 200
    login = client.post("/api/User/Login", json={"email": email, "password": "another123"})
    assert login.status_code == 200

    listing = client.get("/api/User/GetAll", headers=admin_headers).json()["data"]
    assert "renamed" in [item["user_name"] for item in listing]

    deleted = client.delete(f"/api/User/Delete/{user_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert client.get(f"/api/User/GetById/{user_id}", headers=admin_headers).status_code == 404


def test_assign_unknown_role_is_not_found(client: TestClient, admin_headers):
    user_id = client.post(
        "/api/User/Create",
        headers=admin_headers,
        json={"user_name": "lonely", "email": f"lonely-{uuid.uuid4().hex[:6]}@phone.local", "password": "secret123"},
    ).json()["data"]

    response = client.patch(f"/api/User/AssignRole/{user_id}/{uuid.uuid4()}", headers=admin_headers)
    assert response.status_code == 404

    zero = client.patch(f"/api/User/AssignRole/{user_id}/{uuid.UUID(int=0)}", headers=admin_headers)
    assert zero.status_code == 400


def test_user_routes_require_authentication(client: TestClient):
    assert client.get("/api/User/GetAll").status_code == 401
