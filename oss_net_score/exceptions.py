"""
Error types raised by OSS Net Score.
"""


class NetScoreError(Exception):
    """Base class for every error the scoring pipeline knows how to report."""


class ConfigurationError(NetScoreError):
    """Required configuration is missing or unreadable."""


class InvalidRepositoryURLError(NetScoreError, ValueError):
    """A URL does not name an owner and a repository."""

    def __init__(self, url: str, reason: str = "expected <owner>/<repo> path"):
        self.url = url
        super().__init__(f"Invalid repository URL '{url}': {reason}")


class GitHubAPIError(NetScoreError):
    """A GitHub REST call failed (status, transport or payload)."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class NpmPageError(NetScoreError):
    """The npm package page could not be fetched."""


class GitHubReferenceNotFoundError(NetScoreError):
    """The npm package page does not reference a GitHub repository."""

    def __init__(self, npm_url: str):
        self.npm_url = npm_url
        super().__init__(f"GitHub reference not found on npm page {npm_url}")
