"""HTTP session factory."""

from __future__ import annotations

from requests import Session

from .config import DEFAULT_USER_AGENT


def make_session(user_agent: str = DEFAULT_USER_AGENT) -> Session:
    """Create a requests session for API calls.

    No retry adapter is mounted: every client call maps to exactly one request.
    """
    session = Session()
    session.headers.update({"User-Agent": user_agent, "Accept": "application/json"})
    return session
