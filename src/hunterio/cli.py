"""CLI entrypoint for hunterio."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from typing import Any

from requests.exceptions import RequestException

from .client import HunterClient
from .config import API_KEY_ENV_VAR, DEFAULT_REQUEST_TIMEOUT, api_key_from_env
from .errors import ConfigError, ParameterError, ResponseShapeError
from .logging_utils import configure_logging, get_logger
from .models import (
    DomainSearchRequest,
    EmailCountRequest,
    EmailFinderRequest,
    EmailVerifierRequest,
)

EMAIL_TYPES = ("personal", "generic")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="hunterio", description="Query the Hunter email discovery API."
    )
    parser.add_argument("--api-key", help=f"Hunter key (or set {API_KEY_ENV_VAR} env var).")
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_REQUEST_TIMEOUT,
        help="Request timeout in seconds.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("account", help="Show account information.")

    domain = commands.add_parser("domain-search", help="List addresses for a domain or company.")
    domain.add_argument("--domain")
    domain.add_argument("--company")
    domain.add_argument("--limit", type=int)
    domain.add_argument("--offset", type=int)
    domain.add_argument("--type", choices=EMAIL_TYPES)
    domain.add_argument("--seniority", choices=("junior", "senior", "executive"))
    domain.add_argument("--department")

    finder = commands.add_parser("email-finder", help="Find the address of one person.")
    finder.add_argument("--domain")
    finder.add_argument("--company")
    finder.add_argument("--first-name")
    finder.add_argument("--last-name")
    finder.add_argument("--full-name")

    verifier = commands.add_parser("email-verifier", help="Verify one address.")
    verifier.add_argument("email")

    count = commands.add_parser("email-count", help="Count addresses for a domain or company.")
    target = count.add_mutually_exclusive_group(required=True)
    target.add_argument("--domain")
    target.add_argument("--company")
    count.add_argument("--type", choices=EMAIL_TYPES)

    commands.add_parser("leads-lists", help="List saved leads lists.")

    leads = commands.add_parser("leads", help="List saved leads.")
    leads.add_argument("--limit", type=int)
    leads.add_argument("--offset", type=int)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI input."""
    return build_parser().parse_args(argv)


def run_command(client: HunterClient, args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch one subcommand and return the raw response body."""
    if args.command == "account":
        return client.get_account_information().raw
    if args.command == "domain-search":
        request = DomainSearchRequest(
            domain=args.domain,
            company=args.company,
            limit=args.limit,
            offset=args.offset,
            type=args.type,
            seniority=args.seniority,
            department=args.department,
        )
        return client.search_domain(request).raw
    if args.command == "email-finder":
        finder_request = EmailFinderRequest(
            domain=args.domain,
            company=args.company,
            first_name=args.first_name,
            last_name=args.last_name,
            full_name=args.full_name,
        )
        return client.find_email(finder_request).raw
    if args.command == "email-verifier":
        return client.verify_email(EmailVerifierRequest(email=args.email)).raw
    if args.command == "email-count":
        count_request = EmailCountRequest(domain=args.domain, company=args.company, type=args.type)
        return client.get_email_count(count_request).raw
    if args.command == "leads-lists":
        return client.list_leads_lists().raw
    if args.command == "leads":
        return client.list_leads(limit=args.limit, offset=args.offset).raw
    raise ParameterError(f"Unknown command: {args.command}")


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    configure_logging(args.verbose)
    logger = get_logger()
    api_key = args.api_key or api_key_from_env()
    try:
        client = HunterClient(
            api_key, timeout=args.timeout, logger=logger  # type: ignore[arg-type]
        )
    except ConfigError as exc:
        logger.error("Invalid configuration: %s. Set %s or pass --api-key.", exc, API_KEY_ENV_VAR)
        return 2

    try:
        body = run_command(client, args)
    except ParameterError as exc:
        logger.error("Invalid parameters: %s", exc)
        return 2
    except (RequestException, ResponseShapeError) as exc:
        logger.error("Hunter request failed: %s", exc)
        return 1
    finally:
        client.close()

    json.dump(body, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
