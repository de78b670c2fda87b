import pytest

from item_api.config import base_url, parse_bool, parse_port


@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("off", False), ("0", False), ("maybe", False), (None, False)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_parse_bool_default():
    assert parse_bool(None, default=True) is True
    assert parse_bool("unknown", default=True) is True


def test_parse_port():
    assert parse_port(None) == 8080
    assert parse_port("") == 8080
    assert parse_port("9000") == 9000


@pytest.mark.parametrize("raw", ["70000", "-1", "http"])
def test_parse_port_rejects(raw):
    with pytest.raises(ValueError):
        parse_port(raw)


def test_base_url():
    assert base_url("127.0.0.1", 8080) == "http://127.0.0.1:8080/"


def test_base_url_brackets_ipv6_hosts():
    assert base_url("::1", 8080) == "http://[::1]:8080/"
    assert base_url("::", 9000) == "http://[::]:9000/"
