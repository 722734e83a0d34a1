"""
Shared metric types and the success/failure wrapper around metric checks.
"""

import logging
from typing import Awaitable, Callable, NamedTuple

from oss_net_score.exceptions import NetScoreError
from oss_net_score.repository import RepositoryRef
from oss_net_score.vcs.github import GitHubClient

logger = logging.getLogger(__name__)


class MetricContext(NamedTuple):
    """Context provided to metric checks."""

    repo: RepositoryRef
    github: GitHubClient
    repo_url: str


class MetricSpec(NamedTuple):
    """Specification for a metric check."""

    name: str
    key: str  # NetScoreResult field the score is stored in
    checker: Callable[[MetricContext], Awaitable[float]]


class MetricOutcome(NamedTuple):
    """Score of one metric for one repository, or the reason it has none."""

    name: str
    key: str
    score: float | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def clamp_score(value: float) -> float:
    """Limit a score to [0, 1]."""
    return max(0.0, min(1.0, float(value)))


async def evaluate_metric(spec: MetricSpec, context: MetricContext) -> MetricOutcome:
    """
    Run one metric check and wrap its result.

    Known pipeline errors become a failed outcome; anything else propagates.
    """
    try:
        raw_score = await spec.checker(context)
    except NetScoreError as e:
        logger.error(f"{spec.name} failed for {context.repo_url}: {e}")
        return MetricOutcome(spec.name, spec.key, None, str(e))

    score = clamp_score(raw_score)
    if score != raw_score:
        logger.warning(
            f"{spec.name} returned {raw_score} for {context.repo_url}; clamped to {score}"
        )
    logger.debug(f"{spec.name} score for {context.repo_url}: {score}")
    return MetricOutcome(spec.name, spec.key, score)
