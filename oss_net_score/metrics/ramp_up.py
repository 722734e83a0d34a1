"""Ramp-up metric."""

from typing import Any

from oss_net_score.exceptions import GitHubAPIError
from oss_net_score.metrics.base import MetricContext, MetricSpec

# README size in bytes treated as thorough onboarding documentation
FULL_README_BYTES = 5000

README_WEIGHT = 0.5
GUIDE_WEIGHT = 0.25
EXAMPLES_WEIGHT = 0.25

DOC_DIRECTORIES = {"docs", "doc"}
EXAMPLE_DIRECTORIES = {"examples", "example"}


def check_ramp_up(readme_size: int, root_entries: list[dict[str, Any]]) -> float:
    """
    Estimates how quickly a newcomer can get productive.

    Scoring:
    - README size, up to 5000 bytes: 0.5
    - docs/ directory or CONTRIBUTING file: 0.25
    - examples/ directory: 0.25
    """
    readme_component = min(1.0, max(0, readme_size) / FULL_README_BYTES)

    has_guide = False
    has_examples = False
    for entry in root_entries:
        name = (entry.get("name") or "").lower()
        entry_type = entry.get("type")
        if entry_type == "dir" and name in DOC_DIRECTORIES:
            has_guide = True
        elif entry_type == "file" and name.startswith("contributing"):
            has_guide = True
        elif entry_type == "dir" and name in EXAMPLE_DIRECTORIES:
            has_examples = True

    return (
        README_WEIGHT * readme_component
        + GUIDE_WEIGHT * has_guide
        + EXAMPLES_WEIGHT * has_examples
    )


async def _readme_size(context: MetricContext) -> int:
    try:
        readme = await context.github.get_readme(context.repo)
    except GitHubAPIError as e:
        if e.status_code == 404:
            return 0
        raise
    return int(readme.get("size") or 0)


async def _check(context: MetricContext) -> float:
    readme_size = await _readme_size(context)
    root_entries = await context.github.list_root_contents(context.repo)
    return check_ramp_up(readme_size, root_entries)


METRIC = MetricSpec(
    name="Ramp Up",
    key="ramp_up",
    checker=_check,
)
