"""
Shared fixtures: a fake GitHub served through httpx.MockTransport.
"""

import asyncio
import base64
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import httpx
import pytest

from oss_net_score.metrics.base import MetricContext
from oss_net_score.repository import RepositoryRef
from oss_net_score.vcs.github import GitHubClient

TEST_TOKEN = "test-token"
BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def readme_payload(text: str, size: int | None = None) -> dict[str, Any]:
    """README record as returned by GET /repos/{owner}/{repo}/readme."""
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    # GitHub wraps base64 content at 60 characters
    wrapped = "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60))
    return {
        "name": "README.md",
        "encoding": "base64",
        "content": wrapped,
        "size": len(text) if size is None else size,
    }


def iso(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def issue_routes(owner: str, repo: str, latencies_days: list[float]) -> dict[str, Any]:
    """Routes for a closed-issue list plus one detail record per issue."""
    listed = []
    routes: dict[str, Any] = {}
    for number, days in enumerate(latencies_days, start=1):
        created = iso(BASE_TIME)
        closed = iso(BASE_TIME + timedelta(days=days))
        # The list endpoint carries a stale close time; the detail record wins
        listed.append({"number": number, "created_at": created, "closed_at": created})
        routes[f"/repos/{owner}/{repo}/issues/{number}"] = {
            "number": number,
            "created_at": created,
            "closed_at": closed,
        }
    routes[f"/repos/{owner}/{repo}/issues"] = listed
    return routes


class FakeGitHub:
    """
    Serves canned JSON by request path and records every request.

    A route value may be a JSON payload, an ``httpx.Response`` or a callable
    taking the request and returning one of those.
    """

    def __init__(self, routes: dict[str, Any] | None = None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if callable(route):
            route = route(request)
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


def search_route(closed: int, open_: int) -> Callable[[httpx.Request], httpx.Response]:
    """Route for /search/issues answering by the state in the query."""

    def handler(request: httpx.Request) -> httpx.Response:
        query = request.url.params.get("q", "")
        count = closed if "state:closed" in query else open_
        return httpx.Response(200, json={"total_count": count, "items": []})

    return handler


@pytest.fixture
def run_github():
    """Run ``func(github, http_client)`` against a fake GitHub and return its result."""

    def runner(handler: Callable[[httpx.Request], httpx.Response], func):
        async def main():
            transport = httpx.MockTransport(handler)
            async with httpx.AsyncClient(transport=transport) as http_client:
                github = GitHubClient(http_client, TEST_TOKEN)
                return await func(github, http_client)

        return asyncio.run(main())

    return runner


@pytest.fixture
def run_metric(run_github):
    """Run a metric checker for acme/widget against a fake GitHub."""

    def runner(handler, checker, repo: RepositoryRef | None = None):
        repo = repo or RepositoryRef("acme", "widget")

        async def func(github, _http_client):
            context = MetricContext(repo=repo, github=github, repo_url=repo.url)
            return await checker(context)

        return run_github(handler, func)

    return runner
