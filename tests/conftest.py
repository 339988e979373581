"""测试夹具：为 pytest 提供数据库、权限缓存与客户端的共享配置。"""

import os
import tempfile
from typing import Generator

TEST_DB_PATH = os.path.join(os.path.dirname(__file__), "test.db")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB_PATH}")
os.environ.setdefault("PERMISSION_CACHE_BACKEND", "memory")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "phone_api_test_logs"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from phone_api.main import app  # noqa: E402
from phone_api.packages.inventory.core.config import get_settings  # noqa: E402
from phone_api.packages.inventory.core.dependencies import get_db  # noqa: E402
from phone_api.packages.inventory.core.permission_cache import InMemoryPermissionCache, get_permission_cache  # noqa: E402
from phone_api.packages.inventory.db import session as db_session  # noqa: E402
from phone_api.packages.inventory.db.init_db import init_db  # noqa: E402
from phone_api.packages.inventory.models.base import Base  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_database() -> Generator[None, None, None]:
    """创建隔离的 SQLite 测试数据库，并在会话结束后清理。"""
    db_session.engine.dispose()
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)

    Base.metadata.create_all(bind=db_session.engine)
    init_db()
    yield

    db_session.engine.dispose()
    if os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)


@pytest.fixture()
def db_session_fixture() -> Generator[Session, None, None]:
    """提供给测试用例使用的数据库会话。"""
    session = db_session.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def permission_cache() -> InMemoryPermissionCache:
    """每个用例独享的权限缓存，避免用例之间的缓存结果互相影响。"""
    return InMemoryPermissionCache()


@pytest.fixture()
def client(db_session_fixture, permission_cache):
    """构建 FastAPI TestClient，并注入测试专用的数据库与缓存依赖。"""
    def override_get_db() -> Generator[Session, None, None]:
        session = db_session.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_permission_cache] = lambda: permission_cache

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture()
def admin_headers(client: TestClient) -> dict[str, str]:
    settings = get_settings()
    response = client.post(
        "/api/User/Login",
        json={"email": settings.default_admin_email, "password": settings.default_admin_password},
    )
    assert response.status_code == 200
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
