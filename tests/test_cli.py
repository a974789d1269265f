import json
from typing import Any

import pytest
import requests

from hunterio import cli
from hunterio.models import AccountInformationResponse, DomainSearchResponse


class FakeClient:
    def __init__(self, api_key: str, **kwargs: Any) -> None:
        self.api_key = api_key
        self.kwargs = kwargs
        self.requests: list[Any] = []
        self.closed = False

    def get_account_information(self) -> AccountInformationResponse:
        return AccountInformationResponse.from_payload({"data": {"email": "me@x.com"}})

    def search_domain(self, request: Any) -> DomainSearchResponse:
        self.requests.append(request)
        return DomainSearchResponse.from_payload({"data": {"domain": request.domain}})

    def list_leads(self, limit: Any = None, offset: Any = None) -> Any:
        raise requests.HTTPError("401 Client Error")

    def close(self) -> None:
        self.closed = True


def test_parse_args_domain_search() -> None:
    args = cli.parse_args(["domain-search", "--domain", "hunter.io", "--limit", "5"])
    assert args.command == "domain-search"
    assert args.domain == "hunter.io"
    assert args.limit == 5


def test_parse_args_requires_command() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_email_count_requires_target() -> None:
    with pytest.raises(SystemExit):
        cli.parse_args(["email-count"])


def test_main_prints_raw_body(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli, "HunterClient", FakeClient)
    assert cli.main(["--api-key", "abcd", "account"]) == 0
    assert json.loads(capsys.readouterr().out) == {"data": {"email": "me@x.com"}}


def test_main_uses_env_key(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[FakeClient] = []

    def factory(api_key: str, **kwargs: Any) -> FakeClient:
        client = FakeClient(api_key, **kwargs)
        created.append(client)
        return client

    monkeypatch.setattr(cli, "HunterClient", factory)
    monkeypatch.setenv("HUNTER_API_KEY", "env-key")
    assert cli.main(["domain-search", "--company", "Hunter"]) == 0
    assert created[0].api_key == "env-key"
    assert created[0].requests[0].company == "Hunter"
    assert created[0].closed is True


def test_main_returns_two_without_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HUNTER_API_KEY", raising=False)
    assert cli.main(["account"]) == 2


def test_main_returns_two_on_parameter_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "HunterClient", lambda api_key, **kwargs: _client_without_network(api_key))
    assert cli.main(["--api-key", "abcd", "domain-search"]) == 2


def test_main_returns_one_on_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "HunterClient", FakeClient)
    assert cli.main(["--api-key", "abcd", "leads"]) == 1


def _client_without_network(api_key: str) -> Any:
    from hunterio.client import HunterClient

    class NoNetwork:
        def get(self, *_args: Any, **_kwargs: Any) -> Any:
            raise AssertionError("network should not be used")

        def close(self) -> None:
            return None

    return HunterClient(api_key, session=NoNetwork())  # type: ignore[arg-type]
