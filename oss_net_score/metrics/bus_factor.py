"""Bus factor metric."""

from typing import Any

from oss_net_score.metrics.base import MetricContext, MetricSpec

# Number of contributors covering half the work at which the score saturates
HEALTHY_BUS_FACTOR = 5
COVERAGE_THRESHOLD = 0.5

BOT_KEYWORDS = (
    "[bot]",
    "dependabot",
    "renovate",
    "github-actions",
    "actions-user",
)


def is_bot(login: str) -> bool:
    """Check if login appears to be a bot."""
    lower = login.lower()
    return any(keyword in lower for keyword in BOT_KEYWORDS)


def compute_bus_factor(contributors: list[dict[str, Any]]) -> int:
    """
    Smallest number of human contributors whose contributions make up at
    least half of all human contributions.
    """
    counts = sorted(
        (
            int(contributor.get("contributions") or 0)
            for contributor in contributors
            if not is_bot(str(contributor.get("login") or ""))
        ),
        reverse=True,
    )
    total = sum(counts)
    if total == 0:
        return 0

    covered = 0
    for index, count in enumerate(counts, start=1):
        covered += count
        if covered >= total * COVERAGE_THRESHOLD:
            return index
    return len(counts)


def check_bus_factor(contributors: list[dict[str, Any]]) -> float:
    """
    Scores contributor concentration.

    A project where one person wrote most of the code scores 0.2; five or
    more people sharing half the work scores 1. No human contributors: 0.
    """
    return min(1.0, compute_bus_factor(contributors) / HEALTHY_BUS_FACTOR)


async def _check(context: MetricContext) -> float:
    contributors = await context.github.list_contributors(context.repo)
    return check_bus_factor(contributors)


METRIC = MetricSpec(
    name="Bus Factor",
    key="bus_factor",
    checker=_check,
)
