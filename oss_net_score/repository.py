"""
Repository references and input URL classification.
"""

from typing import NamedTuple
from urllib.parse import urlparse

from oss_net_score.exceptions import InvalidRepositoryURLError

GITHUB_HOST = "github.com"
NPM_HOST_MARKER = "npmjs.com"
NPM_PACKAGE_MARKER = "package/"


class RepositoryRef(NamedTuple):
    """Owner and name of a GitHub repository."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def url(self) -> str:
        return f"https://{GITHUB_HOST}/{self.owner}/{self.name}"


def parse_repository_url(url: str) -> RepositoryRef:
    """
    Derive the owner and repository name from a GitHub URL.

    The last two path segments are used, so ``https://github.com/owner/repo``
    and ``github.com/owner/repo/`` both resolve to ``owner/repo``. A trailing
    ``.git`` is dropped from the name.

    Raises:
        InvalidRepositoryURLError: If fewer than two path segments are present.
    """
    candidate = url.strip()
    if "://" not in candidate:
        candidate = f"https://{candidate}"

    path = urlparse(candidate).path
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2:
        raise InvalidRepositoryURLError(url)

    owner, name = segments[-2], segments[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not owner or not name:
        raise InvalidRepositoryURLError(url)

    return RepositoryRef(owner=owner, name=name)


def is_npm_url(url: str) -> bool:
    """Return True for npm package page URLs."""
    return NPM_HOST_MARKER in url


def npm_package_name(url: str) -> str:
    """
    Return everything after ``package/`` in an npm package page URL.

    Raises:
        InvalidRepositoryURLError: If the URL has no package segment.
    """
    _, marker, package_name = url.strip().partition(NPM_PACKAGE_MARKER)
    package_name = package_name.strip("/")
    if not marker or not package_name:
        raise InvalidRepositoryURLError(url, "expected an npm 'package/<name>' URL")
    return package_name
