"""
npm package page resolver.

npm pages link to their source repository somewhere in the HTML. The first
``github.com`` reference on the page is taken as the repository.
"""

import logging

import httpx

from oss_net_score.exceptions import GitHubReferenceNotFoundError, NpmPageError
from oss_net_score.repository import GITHUB_HOST, npm_package_name

logger = logging.getLogger(__name__)


def extract_github_url(html: str, package_name: str, npm_url: str = "") -> str:
    """
    Find the GitHub repository referenced by an npm package page.

    The fragment following the first ``github.com`` up to the next double
    quote is split on ``/``; its first two segments are the owner and the
    repository. When the page only names an owner, the package name is used
    as the repository.

    Args:
        html: Page body.
        package_name: Name taken from the npm URL.
        npm_url: Page URL, used in the error message.

    Returns:
        ``https://github.com/<owner>/<repo>``

    Raises:
        GitHubReferenceNotFoundError: If the page has no usable reference.
    """
    _, marker, rest = html.partition(GITHUB_HOST)
    fragment, quote, _ = rest.partition('"')
    if not marker or not quote:
        raise GitHubReferenceNotFoundError(npm_url or package_name)

    segments = fragment.lstrip("/:").split("/")
    owner = segments[0].strip()
    repo = segments[1] if len(segments) > 1 else ""
    for separator in ("#", "?"):
        repo = repo.split(separator, 1)[0]
    repo = repo.strip().removesuffix(".git") or package_name

    if not owner:
        raise GitHubReferenceNotFoundError(npm_url or package_name)

    return f"https://{GITHUB_HOST}/{owner}/{repo}"


async def resolve_github_url(http_client: httpx.AsyncClient, npm_url: str) -> str:
    """
    Convert an npm package page URL into its GitHub repository URL.

    Raises:
        InvalidRepositoryURLError: If the URL has no ``package/<name>`` part.
        NpmPageError: If the page cannot be fetched.
        GitHubReferenceNotFoundError: If the page does not link to GitHub.
    """
    logger.debug(f"Extracting GitHub URL from npm URL: {npm_url}")
    package_name = npm_package_name(npm_url)

    try:
        response = await http_client.get(npm_url)
    except httpx.HTTPError as e:
        raise NpmPageError(f"Failed to fetch npm page {npm_url}: {e}") from e
    if not response.is_success:
        raise NpmPageError(
            f"Failed to fetch npm page {npm_url}: "
            f"{response.status_code} {response.reason_phrase}"
        )

    github_url = extract_github_url(response.text, package_name, npm_url)
    logger.debug(f"Extracted GitHub URL: {github_url}")
    return github_url
