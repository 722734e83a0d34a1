"""
GitHub REST API client for OSS Net Score.

Each call is a single attempt: no retries, no caching. Any failure is raised
as GitHubAPIError so the caller can decide what to do with the URL.
"""

import logging
from typing import Any

import httpx

from oss_net_score.exceptions import GitHubAPIError
from oss_net_score.repository import RepositoryRef

logger = logging.getLogger(__name__)

GITHUB_REST_API = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"

# GitHub's per-page maximum for the issues list endpoint is 100; the
# responsiveness sample uses the 50 most recently closed issues.
CLOSED_ISSUES_SAMPLE_SIZE = 50
CONTRIBUTORS_PAGE_SIZE = 100


class GitHubClient:
    """Authenticated access to the GitHub REST endpoints used by the metrics."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        token: str,
        api_base: str = GITHUB_REST_API,
    ):
        """
        Args:
            http_client: Open async client; its lifetime is managed by the caller.
            token: GitHub access token sent as a bearer credential.
            api_base: REST API root, overridable for GitHub Enterprise.
        """
        self._http = http_client
        self._token = token
        self.api_base = api_base.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET an API path and return the decoded JSON body.

        Raises:
            GitHubAPIError: On transport errors, timeouts, non-2xx statuses
                or a body that is not JSON.
        """
        url = f"{self.api_base}{path}"
        logger.info(f"Constructed API URL: {url}")

        try:
            response = await self._http.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            raise GitHubAPIError(url, f"GitHub API request to {url} failed: {e}") from e

        if not response.is_success:
            raise GitHubAPIError(
                url,
                f"GitHub API request to {url} failed: "
                f"{response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(
                url,
                f"GitHub API returned malformed JSON for {url}",
                status_code=response.status_code,
            ) from e

    async def get_object(self, path: str, what: str) -> dict[str, Any]:
        """GET an API path whose body must be a JSON object."""
        payload = await self.get_json(path)
        if not isinstance(payload, dict):
            raise GitHubAPIError(
                f"{self.api_base}{path}",
                f"GitHub API returned an unexpected {what} payload: "
                f"{type(payload).__name__}",
            )
        return payload

    async def get_readme(self, repo: RepositoryRef) -> dict[str, Any]:
        """Fetch the repository README record (base64 ``content``, ``size``)."""
        return await self.get_object(f"/repos/{repo.owner}/{repo.name}/readme", "README")

    async def list_closed_issues(
        self, repo: RepositoryRef, per_page: int = CLOSED_ISSUES_SAMPLE_SIZE
    ) -> list[dict[str, Any]]:
        """Fetch the first page of closed issues, most recent first."""
        issues = await self.get_json(
            f"/repos/{repo.owner}/{repo.name}/issues",
            params={"state": "closed", "page": 1, "per_page": per_page},
        )
        if not isinstance(issues, list):
            raise GitHubAPIError(
                f"{self.api_base}/repos/{repo.full_name}/issues",
                "GitHub API returned an unexpected issues payload",
            )
        if not all(isinstance(issue, dict) for issue in issues):
            raise GitHubAPIError(
                f"{self.api_base}/repos/{repo.full_name}/issues",
                "GitHub API returned a malformed issue entry",
            )
        return issues

    async def get_issue(self, repo: RepositoryRef, number: int) -> dict[str, Any]:
        """Fetch the full record of a single issue."""
        return await self.get_object(
            f"/repos/{repo.owner}/{repo.name}/issues/{number}", f"issue #{number}"
        )

    async def list_contributors(
        self, repo: RepositoryRef, per_page: int = CONTRIBUTORS_PAGE_SIZE
    ) -> list[dict[str, Any]]:
        """Fetch the first page of contributors ordered by contribution count."""
        contributors = await self.get_json(
            f"/repos/{repo.owner}/{repo.name}/contributors",
            params={"per_page": per_page},
        )
        # GitHub answers 204 with an empty body for empty repositories
        if not isinstance(contributors, list):
            return []
        return [entry for entry in contributors if isinstance(entry, dict)]

    async def count_issues(self, repo: RepositoryRef, state: str) -> int:
        """Return the number of issues (pull requests excluded) in a state."""
        result = await self.get_json(
            "/search/issues",
            params={
                "q": f"repo:{repo.full_name} type:issue state:{state}",
                "per_page": 1,
            },
        )
        if not isinstance(result, dict):
            raise GitHubAPIError(
                f"{self.api_base}/search/issues",
                "GitHub API returned an unexpected search payload",
            )
        return int(result.get("total_count") or 0)

    async def list_root_contents(self, repo: RepositoryRef) -> list[dict[str, Any]]:
        """List files and directories at the repository root."""
        contents = await self.get_json(f"/repos/{repo.owner}/{repo.name}/contents")
        if not isinstance(contents, list):
            return []
        return [entry for entry in contents if isinstance(entry, dict)]
