"""Responsive maintainer metric."""

import logging
from datetime import datetime
from typing import Any, NamedTuple

from oss_net_score.exceptions import GitHubAPIError
from oss_net_score.metrics.base import MetricContext, MetricSpec

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400

# Median close latency (days) at or below which the score is 1, and above
# which it is 0. Scores fall linearly in between.
FAST_RESOLUTION_DAYS = 1.0
SLOW_RESOLUTION_DAYS = 7.0

# Score used when there are no closed issues to sample.
EMPTY_SAMPLE_SCORE = 1.0


class IssueSample(NamedTuple):
    """Open and close times of one closed issue."""

    created_at: datetime
    closed_at: datetime

    @property
    def latency_days(self) -> float:
        return (self.closed_at - self.created_at).total_seconds() / SECONDS_PER_DAY


def parse_timestamp(value: str) -> datetime:
    """Parse a GitHub ISO-8601 timestamp such as ``2024-01-01T00:00:00Z``."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def find_median(values: list[float]) -> float | None:
    """
    Median of a sample; the mean of the two central values for even sizes.

    Returns None for an empty sample.
    """
    if not values:
        return None

    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def score_median_latency(median_days: float | None) -> float:
    """
    Map a median close latency in days to a score in [0, 1].

    Scoring:
    - No closed issues: 1 (nothing suggests slow resolution)
    - Under 1 day: 1
    - Over 7 days: 0
    - Otherwise: 1 - (median - 1) / 6
    """
    if median_days is None:
        return EMPTY_SAMPLE_SCORE
    if median_days < FAST_RESOLUTION_DAYS:
        return 1.0
    if median_days > SLOW_RESOLUTION_DAYS:
        return 0.0
    return 1 - (median_days - FAST_RESOLUTION_DAYS) / (
        SLOW_RESOLUTION_DAYS - FAST_RESOLUTION_DAYS
    )


def check_responsiveness(samples: list[IssueSample]) -> float:
    """Score a set of closed issues by their median close latency."""
    median = find_median([sample.latency_days for sample in samples])
    score = score_median_latency(median)
    logger.debug(f"Median close latency over {len(samples)} issues: {median} -> {score}")
    return score


def _sample_from(issue: dict[str, Any], issue_data: dict[str, Any]) -> IssueSample:
    created = issue.get("created_at")
    closed = issue_data.get("closed_at")
    if not created or not closed:
        raise GitHubAPIError(
            str(issue_data.get("url", issue.get("number"))),
            f"Issue #{issue.get('number')} has no created_at/closed_at timestamps",
        )
    try:
        return IssueSample(parse_timestamp(created), parse_timestamp(closed))
    except ValueError as e:
        raise GitHubAPIError(
            str(issue_data.get("url", issue.get("number"))),
            f"Issue #{issue.get('number')} has malformed timestamps: {e}",
        ) from e


async def collect_issue_samples(context: MetricContext) -> list[IssueSample]:
    """
    Fetch close latencies for the most recently closed issues.

    The close time comes from each issue's own record, so every listed issue
    costs a second request. Requests are made one after another.
    """
    issues = await context.github.list_closed_issues(context.repo)
    samples = []
    for issue in issues:
        number = issue.get("number")
        if number is None:
            raise GitHubAPIError(
                f"{context.repo.full_name} issues", "Closed issue listed without a number"
            )
        issue_data = await context.github.get_issue(context.repo, number)
        samples.append(_sample_from(issue, issue_data))
    return samples


async def _check(context: MetricContext) -> float:
    samples = await collect_issue_samples(context)
    return check_responsiveness(samples)


METRIC = MetricSpec(
    name="Responsive Maintainer",
    key="responsiveness",
    checker=_check,
)
