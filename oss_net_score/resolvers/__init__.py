"""
Resolvers that turn package-registry URLs into GitHub repository URLs.
"""

from oss_net_score.resolvers.npm import extract_github_url, resolve_github_url

__all__ = [
    "extract_github_url",
    "resolve_github_url",
]
