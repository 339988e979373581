"""权限映射表的单元测试。"""

from phone_api.packages.inventory.core.config import get_settings
from phone_api.packages.inventory.core.permission_map import (
    PERMISSION_MAP,
    PhonePermission,
    all_permission_names,
    get_endpoint,
    to_permission_name,
)


def test_lookup_is_case_insensitive():
    assert get_endpoint("phone.getbyid") == "/api/Phone/GetById:GET"
    assert get_endpoint("PHONE.GETBYID") == get_endpoint("phone.getbyid")
    assert get_endpoint("Brand.Delete") == "/api/Brand/Delete:DELETE"


def test_unknown_or_malformed_names_have_no_signature():
    assert get_endpoint("phone.fly") is None
    assert get_endpoint("phone") is None
    assert get_endpoint("phone.getbyid.extra") is None
    assert get_endpoint("") is None


def test_every_permission_maps_to_exactly_one_signature():
    names = all_permission_names()
    assert len(names) == len(set(names))
    assert len(names) == sum(len(actions) for actions in PERMISSION_MAP.values())
    assert "phone.approve" in names
    assert "brand.getall" in names


def test_permission_name_format():
    assert to_permission_name("Phone", PhonePermission.GET_PAGED) == "phone.getpaged"


def test_signatures_follow_configured_prefix(monkeypatch):
    monkeypatch.setattr(get_settings(), "api_prefix", "/v2/api/")
    assert get_endpoint("phone.getbyid") == "/v2/api/Phone/GetById:GET"
    assert get_endpoint("phone.getbyid", prefix="") == "/Phone/GetById:GET"
