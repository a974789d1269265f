import logging

import pytest

from hunterio.logging_utils import (
    ApiKeyRedactingFilter,
    configure_logging,
    get_logger,
    redact_api_key,
)


def test_redact_api_key_masks_query_values() -> None:
    url = "https://api.hunter.io/v2/account?api_key=secret123&domain=x.com"
    assert redact_api_key(url) == "https://api.hunter.io/v2/account?api_key=***&domain=x.com"
    assert redact_api_key("no key here") == "no key here"


def test_filter_rewrites_formatted_record() -> None:
    record = logging.LogRecord(
        "urllib3.connectionpool",
        logging.DEBUG,
        __file__,
        1,
        '%s "%s %s"',
        ("https://api.hunter.io:443", "GET", "/v2/leads?api_key=secret123"),
        None,
    )
    assert ApiKeyRedactingFilter().filter(record) is True
    assert "secret123" not in record.getMessage()
    assert "api_key=***" in record.getMessage()


def test_filter_leaves_clean_records_untouched() -> None:
    record = logging.LogRecord("hunterio", logging.INFO, __file__, 1, "%s", ("ok",), None)
    ApiKeyRedactingFilter().filter(record)
    assert record.args == ("ok",)


def test_configure_logging_installs_filter_once(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.StreamHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    configure_logging(verbose=True)
    configure_logging(verbose=True)
    assert sum(isinstance(item, ApiKeyRedactingFilter) for item in handler.filters) == 1


def test_get_logger_name() -> None:
    assert get_logger().name == "hunterio"
