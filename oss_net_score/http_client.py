"""Shared HTTP client construction."""

import httpx

from oss_net_score.config import Settings

USER_AGENT = "oss-net-score"


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Create the async HTTP client used for one run.

    Every request gets the configured timeout so a hung server cannot block
    the batch forever. The caller owns the client and must close it.
    """
    return httpx.AsyncClient(
        verify=settings.verify_ssl,
        timeout=settings.timeout,
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
        limits=httpx.Limits(
            max_connections=20,
            max_keepalive_connections=10,
            keepalive_expiry=30.0,
        ),
    )
