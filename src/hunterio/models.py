"""Request and response shapes for the Hunter v2 API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .errors import ResponseShapeError
from .validation import ParamValue, flatten_params


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _items(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def unwrap_envelope(payload: Any) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a decoded body into its ``data`` and ``meta`` objects."""
    if not isinstance(payload, dict):
        raise ResponseShapeError(f"Expected a JSON object, got {type(payload).__name__}.")
    data = payload.get("data")
    if not isinstance(data, dict):
        raise ResponseShapeError("Response body has no 'data' object.")
    return data, _mapping(payload.get("meta"))


# Requests


@dataclass(frozen=True)
class DomainSearchRequest:
    """Emails at a domain or company. At least one of the two is required."""

    domain: str | None = None
    company: str | None = None
    limit: int | None = None
    offset: int | None = None
    type: str | None = None  # personal or generic
    seniority: str | None = None  # junior, senior or executive
    department: str | None = None

    def to_params(self) -> dict[str, ParamValue]:
        return flatten_params(vars(self))


@dataclass(frozen=True)
class EmailFinderRequest:
    """Most likely address for one person; the provider checks the field combination."""

    domain: str | None = None
    company: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None

    def to_params(self) -> dict[str, ParamValue]:
        return flatten_params(vars(self))


@dataclass(frozen=True)
class EmailVerifierRequest:
    email: str

    def to_params(self) -> dict[str, ParamValue]:
        return flatten_params(vars(self))


@dataclass(frozen=True)
class EmailCountRequest:
    domain: str | None = None
    company: str | None = None
    type: str | None = None

    def to_params(self) -> dict[str, ParamValue]:
        return flatten_params(vars(self))


# Shared response parts


@dataclass(frozen=True)
class EmailSource:
    domain: str | None
    uri: str | None
    extracted_on: str | None
    last_seen_on: str | None
    still_on_page: bool | None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> EmailSource:
        return cls(
            domain=raw.get("domain"),
            uri=raw.get("uri"),
            extracted_on=raw.get("extracted_on"),
            last_seen_on=raw.get("last_seen_on"),
            still_on_page=raw.get("still_on_page"),
        )


def _sources(value: Any) -> tuple[EmailSource, ...]:
    return tuple(EmailSource.from_dict(item) for item in _items(value))


@dataclass(frozen=True)
class EmailResult:
    """One address found by a domain search."""

    value: str | None
    type: str | None
    confidence: int | None
    sources: tuple[EmailSource, ...]
    first_name: str | None
    last_name: str | None
    position: str | None
    seniority: str | None
    department: str | None
    linkedin: str | None
    twitter: str | None
    phone_number: str | None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> EmailResult:
        return cls(
            value=raw.get("value"),
            type=raw.get("type"),
            confidence=raw.get("confidence"),
            sources=_sources(raw.get("sources")),
            first_name=raw.get("first_name"),
            last_name=raw.get("last_name"),
            position=raw.get("position"),
            seniority=raw.get("seniority"),
            department=raw.get("department"),
            linkedin=raw.get("linkedin"),
            twitter=raw.get("twitter"),
            phone_number=raw.get("phone_number"),
        )


@dataclass(frozen=True)
class ParamsMeta:
    """Echo of the request parameters returned by single-result endpoints."""

    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> ParamsMeta:
        return cls(params=_mapping(raw.get("params")))


# Account


@dataclass(frozen=True)
class CallUsage:
    used: int | None
    available: int | None


@dataclass(frozen=True)
class AccountInformation:
    first_name: str | None
    last_name: str | None
    email: str | None
    plan_name: str | None
    plan_level: int | None
    reset_date: str | None
    team_id: Any
    calls: CallUsage

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> AccountInformation:
        calls = _mapping(raw.get("calls"))
        return cls(
            first_name=raw.get("first_name"),
            last_name=raw.get("last_name"),
            email=raw.get("email"),
            plan_name=raw.get("plan_name"),
            plan_level=raw.get("plan_level"),
            reset_date=raw.get("reset_date"),
            team_id=raw.get("team_id"),
            calls=CallUsage(used=calls.get("used"), available=calls.get("available")),
        )


@dataclass(frozen=True)
class AccountInformationResponse:
    data: AccountInformation
    raw: dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any) -> AccountInformationResponse:
        data, _meta = unwrap_envelope(payload)
        return cls(data=AccountInformation.from_dict(data), raw=payload)


# Domain search


@dataclass(frozen=True)
class DomainSearchData:
    domain: str | None
    disposable: bool | None
    webmail: bool | None
    pattern: str | None
    organization: str | None
    emails: tuple[EmailResult, ...]


@dataclass(frozen=True)
class SearchMeta:
    results: int | None
    limit: int | None
    offset: int | None
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DomainSearchResponse:
    data: DomainSearchData
    meta: SearchMeta
    raw: dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any) -> DomainSearchResponse:
        data, meta = unwrap_envelope(payload)
        return cls(
            data=DomainSearchData(
                domain=data.get("domain"),
                disposable=data.get("disposable"),
                webmail=data.get("webmail"),
                pattern=data.get("pattern"),
                organization=data.get("organization"),
                emails=tuple(EmailResult.from_dict(item) for item in _items(data.get("emails"))),
            ),
            meta=SearchMeta(
                results=meta.get("results"),
                limit=meta.get("limit"),
                offset=meta.get("offset"),
                params=_mapping(meta.get("params")),
            ),
            raw=payload,
        )


# Email finder


@dataclass(frozen=True)
class EmailFinderData(EmailResult):
    """An email entry plus the finder's own fields."""

    email: str | None
    score: int | None
    domain: str | None
    company: str | None
    linkedin_url: str | None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> EmailFinderData:
        entry = EmailResult.from_dict(raw)
        return cls(
            **vars(entry),
            email=raw.get("email"),
            score=raw.get("score"),
            domain=raw.get("domain"),
            company=raw.get("company"),
            linkedin_url=raw.get("linkedin_url"),
        )


@dataclass(frozen=True)
class EmailFinderResponse:
    data: EmailFinderData
    meta: ParamsMeta
    raw: dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any) -> EmailFinderResponse:
        data, meta = unwrap_envelope(payload)
        return cls(
            data=EmailFinderData.from_dict(data),
            meta=ParamsMeta.from_dict(meta),
            raw=payload,
        )


# Email verifier


@dataclass(frozen=True)
class EmailVerification:
    result: str | None
    score: int | None
    email: str | None
    regexp: bool | None
    gibberish: bool | None
    disposable: bool | None
    webmail: bool | None
    mx_records: bool | None
    smtp_server: bool | None
    smtp_check: bool | None
    accept_all: bool | None
    block: bool | None
    sources: tuple[EmailSource, ...]

    @property
    def deliverable(self) -> bool:
        return self.result == "deliverable"


@dataclass(frozen=True)
class EmailVerifierResponse:
    data: EmailVerification
    meta: ParamsMeta
    raw: dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any) -> EmailVerifierResponse:
        data, meta = unwrap_envelope(payload)
        return cls(
            data=EmailVerification(
                result=data.get("result"),
                score=data.get("score"),
                email=data.get("email"),
                regexp=data.get("regexp"),
                gibberish=data.get("gibberish"),
                disposable=data.get("disposable"),
                webmail=data.get("webmail"),
                mx_records=data.get("mx_records"),
                smtp_server=data.get("smtp_server"),
                smtp_check=data.get("smtp_check"),
                accept_all=data.get("accept_all"),
                block=data.get("block"),
                sources=_sources(data.get("sources")),
            ),
            meta=ParamsMeta.from_dict(meta),
            raw=payload,
        )


# Email count

DEPARTMENTS = (
    "executive",
    "it",
    "finance",
    "management",
    "sales",
    "legal",
    "support",
    "hr",
    "marketing",
    "communication",
)
SENIORITY_LEVELS = ("junior", "senior", "executive")


@dataclass(frozen=True)
class DepartmentCounts:
    executive: int | None
    it: int | None
    finance: int | None
    management: int | None
    sales: int | None
    legal: int | None
    support: int | None
    hr: int | None
    marketing: int | None
    communication: int | None


@dataclass(frozen=True)
class SeniorityCounts:
    junior: int | None
    senior: int | None
    executive: int | None


@dataclass(frozen=True)
class EmailCount:
    total: int | None
    personal_emails: int | None
    generic_emails: int | None
    department: DepartmentCounts
    seniority: SeniorityCounts


@dataclass(frozen=True)
class EmailCountResponse:
    data: EmailCount
    meta: ParamsMeta
    raw: dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any) -> EmailCountResponse:
        data, meta = unwrap_envelope(payload)
        department = _mapping(data.get("department"))
        seniority = _mapping(data.get("seniority"))
        return cls(
            data=EmailCount(
                total=data.get("total"),
                personal_emails=data.get("personal_emails"),
                generic_emails=data.get("generic_emails"),
                department=DepartmentCounts(
                    **{name: department.get(name) for name in DEPARTMENTS}
                ),
                seniority=SeniorityCounts(
                    **{name: seniority.get(name) for name in SENIORITY_LEVELS}
                ),
            ),
            meta=ParamsMeta.from_dict(meta),
            raw=payload,
        )


# Leads


@dataclass(frozen=True)
class LeadsList:
    id: int | None
    name: str | None
    leads_count: int | None
    team_id: int | None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> LeadsList:
        return cls(
            id=raw.get("id"),
            name=raw.get("name"),
            leads_count=raw.get("leads_count"),
            team_id=raw.get("team_id"),
        )


@dataclass(frozen=True)
class LeadsListsData:
    leads_lists: tuple[LeadsList, ...]


@dataclass(frozen=True)
class LeadsListsMeta:
    total: int | None


@dataclass(frozen=True)
class LeadsListsResponse:
    data: LeadsListsData
    meta: LeadsListsMeta
    raw: dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any) -> LeadsListsResponse:
        data, meta = unwrap_envelope(payload)
        return cls(
            data=LeadsListsData(
                leads_lists=tuple(
                    LeadsList.from_dict(item) for item in _items(data.get("leads_lists"))
                )
            ),
            meta=LeadsListsMeta(total=meta.get("total")),
            raw=payload,
        )


LEAD_FIELDS = (
    "id",
    "email",
    "first_name",
    "last_name",
    "position",
    "company",
    "company_industry",
    "company_size",
    "confidence_score",
    "website",
    "country_code",
    "source",
    "linkedin_url",
    "phone_number",
    "twitter",
    "sync_status",
    "notes",
    "sending_status",
    "last_activity_at",
)


@dataclass(frozen=True)
class Lead:
    """A saved contact record."""

    id: int | None
    email: str | None
    first_name: str | None
    last_name: str | None
    position: str | None
    company: str | None
    company_industry: str | None
    company_size: Any
    confidence_score: Any
    website: str | None
    country_code: str | None
    source: str | None
    linkedin_url: str | None
    phone_number: str | None
    twitter: str | None
    sync_status: str | None
    notes: str | None
    sending_status: str | None
    last_activity_at: str | None
    leads_list: LeadsList | None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Lead:
        leads_list = raw.get("leads_list")
        return cls(
            **{name: raw.get(name) for name in LEAD_FIELDS},
            leads_list=LeadsList.from_dict(leads_list) if isinstance(leads_list, dict) else None,
        )


@dataclass(frozen=True)
class LeadsData:
    leads: tuple[Lead, ...]


@dataclass(frozen=True)
class LeadsMeta:
    count: int | None
    total: int | None
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LeadsResponse:
    data: LeadsData
    meta: LeadsMeta
    raw: dict[str, Any]

    @classmethod
    def from_payload(cls, payload: Any) -> LeadsResponse:
        data, meta = unwrap_envelope(payload)
        return cls(
            data=LeadsData(
                leads=tuple(Lead.from_dict(item) for item in _items(data.get("leads")))
            ),
            meta=LeadsMeta(
                count=meta.get("count"),
                total=meta.get("total"),
                params=_mapping(meta.get("params")),
            ),
            raw=payload,
        )
