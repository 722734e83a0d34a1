"""
VCS access layer for OSS Net Score.

Only GitHub's REST API is supported; the client is created per run and
handed to each metric.
"""

from oss_net_score.vcs.github import GITHUB_REST_API, GitHubClient

__all__ = [
    "GITHUB_REST_API",
    "GitHubClient",
]
