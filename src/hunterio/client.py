"""Hunter v2 API client."""

from __future__ import annotations

import logging
from typing import Any

from requests import Session
from requests.exceptions import RequestException

from .config import API_BASE, DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig
from .errors import ParameterError
from .logging_utils import get_logger
from .models import (
    AccountInformationResponse,
    DomainSearchRequest,
    DomainSearchResponse,
    EmailCountRequest,
    EmailCountResponse,
    EmailFinderRequest,
    EmailFinderResponse,
    EmailVerifierRequest,
    EmailVerifierResponse,
    LeadsListsResponse,
    LeadsResponse,
)
from .transport import make_session
from .validation import ParamValue, flatten_params, require_domain_or_company


class HunterClient:
    """Typed wrapper around the Hunter REST API.

    Each method performs one GET request and returns the decoded body as a
    typed response. Transport errors (including non-2xx statuses) are
    re-raised unchanged. The client holds no per-call state of its own, but
    the underlying ``requests.Session`` is not documented as thread-safe:
    threads issuing concurrent calls should each use a client built with
    their own ``session``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        session: Session | None = None,
        base_url: str = API_BASE,
        timeout: float | None = DEFAULT_REQUEST_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = ClientConfig(
            api_key=api_key, base_url=base_url, timeout=timeout, user_agent=user_agent
        )
        self._owns_session = session is None
        self._session = session if session is not None else make_session(user_agent)
        self._logger = logger or get_logger()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def _get(self, path: str, params: dict[str, ParamValue] | None = None) -> Any:
        query: dict[str, ParamValue] = dict(params or {})
        query["api_key"] = self._config.api_key
        url = self._config.url_for(path)
        self._logger.debug("GET %s params=%s", url, sorted(set(query) - {"api_key"}))
        try:
            response = self._session.get(url, params=query, timeout=self._config.timeout)
            response.raise_for_status()
            return response.json()
        except RequestException as exc:
            self._logger.debug("Hunter %s failed: %s", path, exc)
            raise

    def get_account_information(self) -> AccountInformationResponse:
        return AccountInformationResponse.from_payload(self._get("/account"))

    def search_domain(self, request: DomainSearchRequest | str) -> DomainSearchResponse:
        """Search addresses for a domain name or a structured domain/company query."""
        if not request:
            raise ParameterError("Missing required parameter, domain")
        if isinstance(request, str):
            request = DomainSearchRequest(domain=request)
        require_domain_or_company(request.domain, request.company)
        return DomainSearchResponse.from_payload(
            self._get("/domain-search", request.to_params())
        )

    def find_email(self, request: EmailFinderRequest) -> EmailFinderResponse:
        return EmailFinderResponse.from_payload(self._get("/email-finder", request.to_params()))

    def verify_email(self, request: EmailVerifierRequest | str) -> EmailVerifierResponse:
        if isinstance(request, str):
            request = EmailVerifierRequest(email=request)
        return EmailVerifierResponse.from_payload(
            self._get("/email-verifier", request.to_params())
        )

    def get_email_count(self, request: EmailCountRequest | str) -> EmailCountResponse:
        if isinstance(request, str):
            request = EmailCountRequest(domain=request)
        return EmailCountResponse.from_payload(self._get("/email-count", request.to_params()))

    def list_leads_lists(self) -> LeadsListsResponse:
        return LeadsListsResponse.from_payload(self._get("/leads_lists"))

    def list_leads(self, limit: int | None = None, offset: int | None = None) -> LeadsResponse:
        params = flatten_params({"limit": limit, "offset": offset})
        return LeadsResponse.from_payload(self._get("/leads", params))
