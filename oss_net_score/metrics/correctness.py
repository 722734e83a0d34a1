"""Correctness metric."""

from oss_net_score.metrics.base import MetricContext, MetricSpec


def check_correctness(closed_issues: int, open_issues: int) -> float:
    """
    Share of all issues that have been closed.

    A repository without any issues scores 1.
    """
    total = closed_issues + open_issues
    if total <= 0:
        return 1.0
    return closed_issues / total


async def _check(context: MetricContext) -> float:
    closed_issues = await context.github.count_issues(context.repo, "closed")
    open_issues = await context.github.count_issues(context.repo, "open")
    return check_correctness(closed_issues, open_issues)


METRIC = MetricSpec(
    name="Correctness",
    key="correctness",
    checker=_check,
)
