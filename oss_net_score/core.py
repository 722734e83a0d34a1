"""
Batch orchestration: score every input URL, in order, one at a time.
"""

import logging
from pathlib import Path
from typing import AsyncIterator, Callable, NamedTuple

import httpx

from oss_net_score.config import Settings
from oss_net_score.exceptions import NetScoreError
from oss_net_score.http_client import create_http_client
from oss_net_score.metrics import (
    MetricContext,
    MetricSpec,
    evaluate_metric,
    load_metric_specs,
)
from oss_net_score.repository import is_npm_url, parse_repository_url
from oss_net_score.resolvers.npm import resolve_github_url
from oss_net_score.scoring import NetScoreResult
from oss_net_score.vcs.github import GitHubClient

logger = logging.getLogger(__name__)


class UrlOutcome(NamedTuple):
    """What happened to one input URL: a result, or why there is none."""

    url: str
    result: NetScoreResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.result is not None


def read_url_file(path: Path | str) -> list[str]:
    """Read one URL per line, skipping blank lines."""
    text = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


async def evaluate_url(
    url: str,
    github: GitHubClient,
    http_client: httpx.AsyncClient,
    specs: list[MetricSpec] | None = None,
) -> UrlOutcome:
    """
    Score a single GitHub or npm URL.

    Metrics run one after another. The first failing metric ends the
    evaluation; partial scores are never reported.
    """
    specs = specs if specs is not None else load_metric_specs()

    try:
        repo_url = await resolve_github_url(http_client, url) if is_npm_url(url) else url
        repo = parse_repository_url(repo_url)
    except NetScoreError as e:
        logger.error(f"Could not resolve {url}: {e}")
        return UrlOutcome(url, error=str(e))

    context = MetricContext(repo=repo, github=github, repo_url=repo_url)
    scores: dict[str, float] = {}
    for spec in specs:
        outcome = await evaluate_metric(spec, context)
        if not outcome.ok:
            return UrlOutcome(url, error=f"{spec.name}: {outcome.error}")
        scores[spec.key] = outcome.score

    result = NetScoreResult.from_scores(url, scores)
    logger.debug(
        f"Calculated scores for URL {url}: NET_SCORE: {result.net_score}, "
        f"RAMP_UP_SCORE: {result.ramp_up}, CORRECTNESS_SCORE: {result.correctness}, "
        f"BUS_FACTOR_SCORE: {result.bus_factor}, "
        f"RESPONSIVE_MAINTAINER_SCORE: {result.responsiveness}, "
        f"LICENSE_SCORE: {result.license}"
    )
    return UrlOutcome(url, result=result)


async def iter_url_outcomes(
    urls: list[str],
    github: GitHubClient,
    http_client: httpx.AsyncClient,
    fail_fast: bool = False,
    specs: list[MetricSpec] | None = None,
) -> AsyncIterator[UrlOutcome]:
    """
    Yield one outcome per URL in input order.

    With ``fail_fast`` the batch stops after the first failed URL and the
    remaining URLs are left unprocessed.
    """
    for index, url in enumerate(urls):
        outcome = await evaluate_url(url, github, http_client, specs)
        yield outcome
        if not outcome.ok and fail_fast:
            skipped = len(urls) - index - 1
            if skipped:
                logger.error(f"Aborting batch after failure on {url}; {skipped} URL(s) skipped")
            return


async def run_batch(
    urls: list[str],
    settings: Settings,
    emit: Callable[[UrlOutcome], None],
    http_client: httpx.AsyncClient | None = None,
) -> list[UrlOutcome]:
    """
    Score a list of URLs and pass each outcome to ``emit`` as soon as it is ready.

    Args:
        urls: Input URLs, in the order results must be reported.
        settings: Run settings; the GitHub token is required.
        emit: Called once per processed URL, in input order.
        http_client: Client to use instead of creating one (left open).

    Returns:
        The outcomes, in input order.

    Raises:
        ConfigurationError: If no GitHub token is configured.
    """
    token = settings.require_token()
    if http_client is None:
        async with create_http_client(settings) as client:
            return await run_batch(urls, settings, emit, http_client=client)

    logger.info(f"Grabbing net score for {len(urls)} URL(s)")
    github = GitHubClient(http_client, token)
    outcomes: list[UrlOutcome] = []
    async for outcome in iter_url_outcomes(
        urls, github, http_client, fail_fast=settings.fail_fast
    ):
        emit(outcome)
        outcomes.append(outcome)
    return outcomes
