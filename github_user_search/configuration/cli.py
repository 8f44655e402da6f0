"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import json
import sys
from typing import Any, NoReturn

import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from github_user_search.configuration.driver import get_base_config
from github_user_search.exceptions import ApiError
from github_user_search.ingress import error_payload, parse_request_body
from github_user_search.search.service import SearchUsersService, create_search_service
from github_user_search.utils.log_config import configure_logging

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Search GitHub users with structured filters.")


def _build_service(ctx: typer.Context) -> SearchUsersService:
    config = get_base_config(**ctx.obj)
    return create_search_service(config)


def _fail(error: BaseException) -> NoReturn:
    payload, _ = error_payload(error)
    typer.echo(json.dumps(payload), err=True)
    raise typer.Exit(code=1)


def _range_payload(minimum: int | None, maximum: int | None, exact: int | None) -> dict[str, int] | None:
    range_payload = {key: value for key, value in (("min", minimum), ("max", maximum), ("exact", exact)) if value is not None}
    return range_payload or None


def _date_range_payload(start: str | None, end: str | None, exact: str | None) -> dict[str, str] | None:
    date_payload = {key: value for key, value in (("from", start), ("to", end), ("exact", exact)) if value is not None}
    return date_payload or None


async def _run_search(service: SearchUsersService, filters: Any, all_pages: bool, max_pages: int | None) -> str:
    if not all_pages:
        response = await service.search(filters)
        return response.model_dump_json(by_alias=True, indent=2)

    pages = [page.model_dump(by_alias=True, mode="json") async for page in service.iter_pages(filters, max_pages=max_pages)]
    return json.dumps(pages, indent=2)


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug logging.")] = False,
    github_api_url: Annotated[str | None, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = None,
    github_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token used for API requests.")] = None,
    request_timeout_seconds: Annotated[float | None, Option(help="Per-attempt HTTP timeout in seconds.")] = None,
    max_retries: Annotated[int | None, Option(help="Retries after the first attempt.")] = None,
    base_delay_ms: Annotated[int | None, Option(help="Base backoff delay in milliseconds.")] = None,
    max_delay_ms: Annotated[int | None, Option(help="Maximum backoff delay in milliseconds.")] = None,
) -> None:
    """Store global options; configuration is reconciled when a command runs."""
    configure_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj.update(
        debug=debug,
        github_api_url=github_api_url,
        github_token=github_token,
        request_timeout_seconds=request_timeout_seconds,
        max_retries=max_retries,
        base_delay_ms=base_delay_ms,
        max_delay_ms=max_delay_ms,
    )


@typer_app.command(name="search")
def search_cli(
    ctx: typer.Context,
    query: Annotated[str, Argument(help="Free-text search term.")],
    user_type: Annotated[str | None, Option("--type", help="Restrict to 'user' or 'org' accounts.")] = None,
    search_in: Annotated[list[str] | None, Option("--in", help="Field the term must match: login, name or email. Repeatable.")] = None,
    repos_min: Annotated[int | None, Option(help="Minimum number of repositories.")] = None,
    repos_max: Annotated[int | None, Option(help="Maximum number of repositories.")] = None,
    repos_exact: Annotated[int | None, Option(help="Exact number of repositories.")] = None,
    location: Annotated[str | None, Option(help="Location, e.g. 'San Francisco'.")] = None,
    language: Annotated[str | None, Option(help="Primary language, e.g. TypeScript.")] = None,
    created_from: Annotated[str | None, Option(help="Accounts created on or after YYYY-MM-DD.")] = None,
    created_to: Annotated[str | None, Option(help="Accounts created on or before YYYY-MM-DD.")] = None,
    created_exact: Annotated[str | None, Option(help="Accounts created on YYYY-MM-DD.")] = None,
    followers_min: Annotated[int | None, Option(help="Minimum number of followers.")] = None,
    followers_max: Annotated[int | None, Option(help="Maximum number of followers.")] = None,
    followers_exact: Annotated[int | None, Option(help="Exact number of followers.")] = None,
    sponsorable: Annotated[bool, Option("--sponsorable", help="Only accounts that can be sponsored.")] = False,
    sort: Annotated[str | None, Option(help="best-match, followers, repositories or joined.")] = None,
    order: Annotated[str | None, Option(help="asc or desc.")] = None,
    page: Annotated[int | None, Option(help="Page number, starting at 1.")] = None,
    per_page: Annotated[int | None, Option(help="Results per page (1-100).")] = None,
    all_pages: Annotated[bool, Option("--all-pages", help="Keep fetching pages while more results exist.")] = False,
    max_pages: Annotated[int | None, Option(help="Stop after this many pages when --all-pages is set.")] = None,
) -> None:
    """Search GitHub users with structured filters and print the results as JSON."""
    candidates: dict[str, Any] = {
        "query": query,
        "type": user_type,
        "searchIn": search_in or None,
        "repos": _range_payload(repos_min, repos_max, repos_exact),
        "location": location,
        "language": language,
        "created": _date_range_payload(created_from, created_to, created_exact),
        "followers": _range_payload(followers_min, followers_max, followers_exact),
        "isSponsored": True if sponsorable else None,
        "sort": sort,
        "sortOrder": order,
        "page": page,
        "perPage": per_page,
    }
    filters = {key: value for key, value in candidates.items() if value is not None}

    try:
        service = _build_service(ctx)
        output = asyncio.run(_run_search(service, filters, all_pages, max_pages))
    except ApiError as e:
        _fail(e)
    typer.echo(output)


@typer_app.command(name="search-json")
def search_json_cli(
    ctx: typer.Context,
    payload: Annotated[str, Argument(help="JSON filters payload, or '-' to read it from stdin.")],
    all_pages: Annotated[bool, Option("--all-pages", help="Keep fetching pages while more results exist.")] = False,
    max_pages: Annotated[int | None, Option(help="Stop after this many pages when --all-pages is set.")] = None,
) -> None:
    """Search GitHub users with a raw JSON filters payload (camelCase keys)."""
    raw_body = sys.stdin.read() if payload == "-" else payload
    try:
        filters = parse_request_body(raw_body)
        service = _build_service(ctx)
        output = asyncio.run(_run_search(service, filters, all_pages, max_pages))
    except ApiError as e:
        _fail(e)
    typer.echo(output)


@typer_app.command(name="rate-limit")
def rate_limit_cli(ctx: typer.Context) -> None:
    """Print the current Search API rate limit as JSON."""
    try:
        service = _build_service(ctx)
        rate_limit = asyncio.run(service.get_rate_limit())
    except ApiError as e:
        _fail(e)
    typer.echo(rate_limit.model_dump_json(by_alias=True, indent=2))


def main() -> None:
    """Entry point for the github-user-search console script."""
    typer_app()


if __name__ == "__main__":
    main()
