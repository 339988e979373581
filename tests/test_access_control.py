"""接口权限守卫的集成测试。"""

from __future__ import annotations

import uuid
from datetime import timedelta

from fastapi.testclient import TestClient

from phone_api.packages.inventory.core.config import get_settings
from phone_api.packages.inventory.core.security import create_access_token


def _create_user(client: TestClient, headers: dict[str, str], *, role_id: str | None = None) -> tuple[str, str]:
    email = f"user-{uuid.uuid4().hex[:8]}@phone.local"
    payload = {"user_name": "tester", "email": email, "password": "secret123"}
    if role_id is not None:
        payload["role_id"] = role_id
    response = client.post("/api/User/Create", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()["data"], email


def _login(client: TestClient, email: str, password: str = "secret123") -> dict[str, str]:
    response = client.post("/api/User/Login", json={"email": email, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['data']['access_token']}"}


def _create_role_with(client: TestClient, headers: dict[str, str], *permission_names: str) -> str:
    role_resp = client.post(
        "/api/Role/Create",
        headers=headers,
        json={"name": f"role-{uuid.uuid4().hex[:8]}"},
    )
    assert role_resp.status_code == 201
    role_id = role_resp.json()["data"]

    catalog = {item["name"]: item["id"] for item in client.get("/api/Permission/GetAll", headers=headers).json()["data"]}
    for name in permission_names:
        add_resp = client.post(f"/api/Role/AddPermission/{role_id}/{catalog[name]}", headers=headers)
        assert add_resp.status_code == 200
    return role_id


def test_missing_token_is_unauthorized(client: TestClient):
    response = client.get("/api/Phone/GetPaged")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Unauthorized: No valid token provided."}


def test_invalid_and_expired_tokens_are_unauthorized(client: TestClient):
    bad = client.get("/api/Brand/GetAll", headers={"Authorization": "Bearer not-a-jwt"})
    assert bad.status_code == 401

    token, _ = create_access_token({"sub": str(uuid.uuid4())}, expires_delta=timedelta(seconds=-5))
    expired = client.get("/api/Brand/GetAll", headers={"Authorization": f"Bearer {token}"})
    assert expired.status_code == 401
    assert expired.json()["message"] == "Unauthorized: No valid token provided."


def test_admin_passes_gate(client: TestClient, admin_headers):
    response = client.get("/api/Phone/GetPaged", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "total_records" in body["data"]


def test_token_without_subject_is_invalid_identity(client: TestClient):
    token, _ = create_access_token({"email": "ghost@phone.local"})
    response = client.get("/api/Brand/GetAll", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Access denied: Invalid user."}


def test_user_without_role_is_denied(client: TestClient, admin_headers):
    _, email = _create_user(client, admin_headers)
    headers = _login(client, email)

    response = client.get("/api/Phone/GetPaged", headers=headers)
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Access denied: No roles assigned."}


def test_role_permission_allows_only_mapped_endpoint(client: TestClient, admin_headers):
    role_id = _create_role_with(client, admin_headers, "phone.create")
    _, email = _create_user(client, admin_headers, role_id=role_id)
    headers = _login(client, email)

    created = client.post(
        "/api/Phone/Create",
        headers=headers,
        json={"model": "Gate Phone", "price": 199.5, "stock": 3},
    )
    assert created.status_code == 201

    phone_id = created.json()["data"]
    denied = client.delete(f"/api/Phone/Delete/{phone_id}", headers=headers)
    assert denied.status_code == 403
    assert denied.json()["message"] == "Access denied: Insufficient permissions."

    wrong_method = client.delete("/api/Phone/Create", headers=headers)
    assert wrong_method.status_code == 405
    assert wrong_method.json() == {"success": False, "message": "Method Not Allowed"}


def test_assigned_role_is_used_for_user_without_cached_roles(client: TestClient, admin_headers):
    role_id = _create_role_with(client, admin_headers, "brand.getall")
    user_id, email = _create_user(client, admin_headers)

    assign = client.patch(f"/api/User/AssignRole/{user_id}/{role_id}", headers=admin_headers)
    assert assign.status_code == 200

    headers = _login(client, email)
    assert client.get("/api/Brand/GetAll", headers=headers).status_code == 200
    assert client.get("/api/Phone/GetPaged", headers=headers).status_code == 403


def test_cached_role_permissions_survive_until_expiry(client: TestClient, admin_headers, permission_cache):
    role_id = _create_role_with(client, admin_headers, "brand.getall")
    _, email = _create_user(client, admin_headers, role_id=role_id)
    headers = _login(client, email)
    assert client.get("/api/Brand/GetAll", headers=headers).status_code == 200

    catalog = {item["name"]: item["id"] for item in client.get("/api/Permission/GetAll", headers=admin_headers).json()["data"]}
    removed = client.delete(f"/api/Role/RemovePermission/{role_id}/{catalog['brand.getall']}", headers=admin_headers)
    assert removed.status_code == 200

    # 缓存仍持有旧的权限列表
    assert client.get("/api/Brand/GetAll", headers=headers).status_code == 200

    permission_cache.delete(f"role_{role_id}")
    assert client.get("/api/Brand/GetAll", headers=headers).status_code == 403


def test_claims_source_uses_token_permissions(client: TestClient, admin_headers, monkeypatch):
    role_id = _create_role_with(client, admin_headers, "brand.getall")
    _, email = _create_user(client, admin_headers, role_id=role_id)

    settings = get_settings()
    monkeypatch.setattr(settings, "permission_source", "claims")
    headers = _login(client, email)

    assert client.get("/api/Brand/GetAll", headers=headers).status_code == 200
    denied = client.post("/api/Brand/Create", headers=headers, json={"name": "Nope"})
    assert denied.status_code == 403
    assert denied.json()["message"] == "Access denied: Insufficient permissions."


def test_claims_source_rejects_malformed_claim(client: TestClient, monkeypatch):
    monkeypatch.setattr(get_settings(), "permission_source", "claims")

    token, _ = create_access_token({"sub": str(uuid.uuid4()), "permissions": "{not json"})
    response = client.get("/api/Brand/GetAll", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Access denied: Invalid permissions format."}

    token, _ = create_access_token({"sub": str(uuid.uuid4())})
    response = client.get("/api/Brand/GetAll", headers={"Authorization": f"Bearer {token}"})
    assert response.json()["message"] == "Access denied: No permissions found."


def test_database_source_ignores_permissions_claim(client: TestClient):
    token, _ = create_access_token({"sub": str(uuid.uuid4()), "permissions": '["brand.getall"]'})
    response = client.get("/api/Brand/GetAll", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 403
    assert response.json()["message"] == "Access denied: No roles assigned."


def test_health_is_public(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["data"] == {"status": "healthy"}
    assert response.headers.get("X-Request-ID")


def test_unknown_route_uses_envelope(client: TestClient, admin_headers):
    response = client.get("/api/Phone/Nope/extra/segments", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_wrong_method_on_protected_route_uses_envelope(client: TestClient, admin_headers):
    response = client.delete("/api/Phone/Create", headers=admin_headers)
    assert response.status_code == 405
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Method Not Allowed"
    assert "detail" not in body


def test_user_without_admin_role_cannot_grant_itself_admin(client: TestClient, admin_headers):
    user_id, email = _create_user(client, admin_headers)
    headers = _login(client, email)
    roles = client.get("/api/Role/GetAll", headers=headers).json()["data"]
    admin_role_id = next(role["id"] for role in roles if role["name"] == "admin")

    response = client.patch(f"/api/User/AssignRole/{user_id}/{admin_role_id}", headers=headers)
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Access denied: Administrator role required."}

    detail = client.get(f"/api/User/GetById/{user_id}", headers=headers).json()["data"]
    assert detail.get("role_id") is None


def test_role_and_user_changes_require_admin_role(client: TestClient, admin_headers):
    role_id = _create_role_with(client, admin_headers, "phone.getpaged")
    user_id, email = _create_user(client, admin_headers, role_id=role_id)
    headers = _login(client, email)
    catalog = {item["name"]: item["id"] for item in client.get("/api/Permission/GetAll", headers=headers).json()["data"]}

    assert client.post("/api/Role/Create", headers=headers, json={"name": "escalate"}).status_code == 403
    assert client.post(f"/api/Role/AddPermission/{role_id}/{catalog['phone.delete']}", headers=headers).status_code == 403
    assert client.delete(f"/api/Role/Delete/{role_id}", headers=headers).status_code == 403
    assert client.delete(f"/api/User/Delete/{user_id}", headers=headers).status_code == 403

    assert client.get("/api/Role/GetAll", headers=headers).status_code == 200
    assert client.get("/api/Phone/GetPaged", headers=headers).status_code == 200
