"""权限解析器的单元测试：令牌声明与数据库 + 缓存两种来源。"""

import json
import uuid

import pytest

from phone_api.packages.inventory.core.exceptions import AuthorizationError, AuthorizationFailure
from phone_api.packages.inventory.core.permission_cache import InMemoryPermissionCache
from phone_api.packages.inventory.core.permission_resolver import (
    ClaimPermissionResolver,
    DatabasePermissionResolver,
    encode_permissions_claim,
)
from phone_api.packages.inventory.core.principal import Principal


class FakeStore:
    def __init__(self, roles_by_user=None, names_by_role=None):
        self.roles_by_user = roles_by_user or {}
        self.names_by_role = names_by_role or {}
        self.role_queries = 0
        self.permission_queries = 0

    def role_ids_for_user(self, user_id):
        self.role_queries += 1
        return list(self.roles_by_user.get(user_id, []))

    def permission_names_for_role(self, role_id):
        self.permission_queries += 1
        return list(self.names_by_role.get(role_id, []))


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _principal_with_claim(value):
    return Principal(user_id=uuid.uuid4(), claims={"permissions": value})


def test_claim_permissions_are_decoded():
    principal = _principal_with_claim(json.dumps(["phone.create", "brand.getall"]))
    assert ClaimPermissionResolver().resolve(principal) == {"phone.create", "brand.getall"}


@pytest.mark.parametrize("value", [None, "", "[]"])
def test_missing_or_empty_claim_is_rejected(value):
    claims = {} if value is None else {"permissions": value}
    principal = Principal(user_id=uuid.uuid4(), claims=claims)
    with pytest.raises(AuthorizationError) as exc_info:
        ClaimPermissionResolver().resolve(principal)
    assert exc_info.value.reason is AuthorizationFailure.NO_PERMISSIONS_CLAIM


@pytest.mark.parametrize(
    "value",
    ["not json", "{\"phone.create\": true}", "[1, 2]", "\"phone.create\"", ["phone.create"]],
)
def test_malformed_claim_is_rejected_without_crashing(value):
    with pytest.raises(AuthorizationError) as exc_info:
        ClaimPermissionResolver().resolve(_principal_with_claim(value))
    assert exc_info.value.reason is AuthorizationFailure.MALFORMED_PERMISSIONS_CLAIM
    assert exc_info.value.detail == "Access denied: Invalid permissions format."


def test_encoded_claim_round_trips_through_resolver():
    claim = encode_permissions_claim(["phone.create", "phone.create", "phone.delete"])
    assert json.loads(claim) == ["phone.create", "phone.delete"]


def test_database_resolver_unions_role_permissions():
    user_id = uuid.uuid4()
    first, second = uuid.uuid4(), uuid.uuid4()
    store = FakeStore(
        roles_by_user={user_id: [first, second]},
        names_by_role={first: ["phone.create"], second: ["phone.delete", "phone.create"]},
    )
    resolver = DatabasePermissionResolver(store, InMemoryPermissionCache(), 3600)

    assert resolver.resolve(Principal(user_id=user_id)) == {"phone.create", "phone.delete"}


def test_cache_miss_populates_and_second_request_skips_store():
    user_id, role_id = uuid.uuid4(), uuid.uuid4()
    store = FakeStore(roles_by_user={user_id: [role_id]}, names_by_role={role_id: ["phone.getbyid"]})
    cache = InMemoryPermissionCache()
    resolver = DatabasePermissionResolver(store, cache, 3600)

    first = resolver.resolve(Principal(user_id=user_id))
    second = resolver.resolve(Principal(user_id=user_id))

    assert first == second == {"phone.getbyid"}
    assert store.role_queries == 1
    assert store.permission_queries == 1
    assert cache.get(f"user_{user_id}") == [str(role_id)]
    assert cache.get(f"role_{role_id}") == ["phone.getbyid"]


def test_store_is_queried_again_after_ttl_expires():
    user_id, role_id = uuid.uuid4(), uuid.uuid4()
    store = FakeStore(roles_by_user={user_id: [role_id]}, names_by_role={role_id: ["phone.getbyid"]})
    clock = FakeClock()
    resolver = DatabasePermissionResolver(store, InMemoryPermissionCache(clock=clock), 60)

    resolver.resolve(Principal(user_id=user_id))
    clock.now += 61
    resolver.resolve(Principal(user_id=user_id))

    assert store.role_queries == 2
    assert store.permission_queries == 2


def test_role_cache_is_shared_between_users():
    alice, bob, role_id = uuid.uuid4(), uuid.uuid4(), uuid.uuid4()
    store = FakeStore(roles_by_user={alice: [role_id], bob: [role_id]}, names_by_role={role_id: ["brand.getall"]})
    resolver = DatabasePermissionResolver(store, InMemoryPermissionCache(), 3600)

    resolver.resolve(Principal(user_id=alice))
    resolver.resolve(Principal(user_id=bob))

    assert store.role_queries == 2
    assert store.permission_queries == 1


def test_user_without_roles_is_rejected():
    resolver = DatabasePermissionResolver(FakeStore(), InMemoryPermissionCache(), 3600)
    with pytest.raises(AuthorizationError) as exc_info:
        resolver.resolve(Principal(user_id=uuid.uuid4()))
    assert exc_info.value.reason is AuthorizationFailure.NO_ROLES_ASSIGNED


def test_database_resolver_requires_identity():
    resolver = DatabasePermissionResolver(FakeStore(), InMemoryPermissionCache(), 3600)
    with pytest.raises(AuthorizationError) as exc_info:
        resolver.resolve(Principal(user_id=None))
    assert exc_info.value.reason is AuthorizationFailure.INVALID_IDENTITY
