"""
HTTP client factory utilities for the Game Revenue Estimator.

Centralizes creation of the httpx.AsyncClient shared by the collaborator clients
(game catalog, developer registry, player-count provider) and a JSON GET helper
with retry logic for transient transport failures using tenacity.

Every failure the collaborators can produce surfaces as CollaboratorUnavailable,
so callers have exactly one exception type to degrade on.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from game_revenue.config import get_settings
from game_revenue.utils.logging import get_logger

log = get_logger(__name__)

USER_AGENT = "game-revenue-estimator/0.1"


class CollaboratorUnavailable(Exception):
    """An external service could not be reached or returned an unusable response."""

    def __init__(self, service: str, message: str) -> None:
        super().__init__(f"{service}: {message}")
        self.service = service


def build_async_client(
    base_url: str = "",
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create an AsyncClient configured from settings.

    Parameters
    ----------
    base_url : str
        Base URL relative request paths resolve against.
    timeout : float | None
        Per-request timeout in seconds. Defaults to settings.http_timeout_seconds.
    transport : httpx.AsyncBaseTransport | None
        Optional transport override (tests inject httpx.MockTransport).

    Returns
    -------
    httpx.AsyncClient
        A new client; callers own it and must close it.
    """
    settings = get_settings()
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=timeout if timeout is not None else settings.http_timeout_seconds,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
        transport=transport,
    )


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    service: str,
    params: Optional[Dict[str, Any]] = None,
    attempts: Optional[int] = None,
) -> Any:
    """
    GET a URL and decode its JSON body, retrying transport errors.

    Retries up to `attempts` times (default settings.http_retry_attempts) with
    exponential backoff. Non-2xx responses are not retried.

    Raises
    ------
    CollaboratorUnavailable
        On transport failure after all retries, non-2xx status, or a body that
        is not JSON.
    """
    max_attempts = attempts or get_settings().http_retry_attempts
    try:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(log, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                response = await client.get(url, params=params)
    except httpx.TransportError as exc:
        raise CollaboratorUnavailable(service, f"request to {url} failed: {exc!r}") from exc

    if response.is_error:
        raise CollaboratorUnavailable(
            service, f"GET {response.request.url} returned HTTP {response.status_code}"
        )

    try:
        return response.json()
    except ValueError as exc:
        raise CollaboratorUnavailable(service, f"GET {url} returned invalid JSON") from exc


__all__ = [
    "CollaboratorUnavailable",
    "build_async_client",
    "fetch_json",
]
