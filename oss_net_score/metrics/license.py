"""License metric."""

import base64
import binascii
import logging
import re
from typing import Any

from oss_net_score.exceptions import GitHubAPIError
from oss_net_score.metrics.base import MetricContext, MetricSpec

logger = logging.getLogger(__name__)

# Matches "license" and "licence" (also "licensed", "licenses"); "licensing"
# alone does not match
LICENSE_PATTERN = re.compile(r"licen[sc]e", re.IGNORECASE)


def decode_readme(readme: dict[str, Any]) -> str:
    """Decode the base64 ``content`` field of a README record to text."""
    content = readme.get("content") or ""
    try:
        raw = base64.b64decode(content)
    except (binascii.Error, TypeError, ValueError) as e:
        raise GitHubAPIError("readme", f"README content is not valid base64: {e}") from e
    return raw.decode("utf-8", errors="replace")


def check_license(readme_text: str) -> int:
    """
    Returns 1 if the README mentions a license, else 0.

    Only the README text is inspected; repositories that ship a LICENSE file
    without mentioning it in the README score 0.
    """
    return 1 if LICENSE_PATTERN.search(readme_text) else 0


async def _check(context: MetricContext) -> float:
    readme = await context.github.get_readme(context.repo)
    has_license = check_license(decode_readme(readme))
    logger.debug(f"Checked for license keywords in README. Found: {bool(has_license)}")
    return has_license


METRIC = MetricSpec(
    name="License",
    key="license",
    checker=_check,
)
