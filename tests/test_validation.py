import pytest

from hunterio.errors import ConfigError, ParameterError
from hunterio.validation import (
    flatten_params,
    is_supported_base_url,
    require_domain_or_company,
    validate_api_key,
    validate_client_settings,
)


def test_validate_api_key() -> None:
    assert validate_api_key("abcd") == "abcd"
    assert validate_api_key("  ") == "  "
    for value in (None, "", 123):
        with pytest.raises(ConfigError):
            validate_api_key(value)


def test_is_supported_base_url() -> None:
    assert is_supported_base_url("https://api.hunter.io/v2") is True
    assert is_supported_base_url("ftp://api.hunter.io") is False
    assert is_supported_base_url("/v2") is False


def test_validate_client_settings_rejects_bad_timeout() -> None:
    with pytest.raises(ConfigError):
        validate_client_settings(api_key="k", base_url="https://api.hunter.io/v2", timeout=0)
    validate_client_settings(api_key="k", base_url="https://api.hunter.io/v2", timeout=None)


def test_flatten_params_drops_none_and_renders_booleans() -> None:
    params = flatten_params({"domain": "x.com", "limit": 10, "company": None, "flag": True})
    assert params == {"domain": "x.com", "limit": 10, "flag": "true"}


@pytest.mark.parametrize("value", [{"a": 1}, ["a"], ("a",), {"a"}])
def test_flatten_params_rejects_nested_values(value: object) -> None:
    with pytest.raises(ParameterError, match="must be a scalar"):
        flatten_params({"domain": value})


def test_require_domain_or_company() -> None:
    require_domain_or_company("x.com", None)
    require_domain_or_company(None, "Acme")
    with pytest.raises(ParameterError, match="domain or company"):
        require_domain_or_company(None, "")
