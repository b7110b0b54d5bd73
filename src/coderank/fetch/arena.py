"""Leaderboard page sources.

Example:
    source = HttpLeaderboardSource()
    html = source.fetch_html()
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Protocol, runtime_checkable

import httpx
import structlog
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..config import (
    FETCH_TIMEOUT_SECONDS,
    LEADERBOARD_URL,
    MAX_FETCH_ATTEMPTS,
    RETRY_BACKOFF_SECONDS,
    USER_AGENT,
)
from ..exceptions import SourceUnavailableError

logger = structlog.get_logger(__name__)

# tenacity's before_sleep_log requires a stdlib logger
_tenacity_logger = logging.getLogger("coderank.fetch")

HTTP_SERVER_ERROR = 500


@dataclass(frozen=True)
class FetcherConfig:
    """Configuration for the HTTP leaderboard source.

    Attributes:
        url: Leaderboard page URL.
        timeout: Per-request timeout in seconds.
        max_attempts: Attempts per fetch, including the first one.
        backoff: Exponential backoff multiplier in seconds (0 disables waiting).
        user_agent: User-Agent header for requests.
    """

    url: str = LEADERBOARD_URL
    timeout: float = FETCH_TIMEOUT_SECONDS
    max_attempts: int = MAX_FETCH_ATTEMPTS
    backoff: float = RETRY_BACKOFF_SECONDS
    user_agent: str = USER_AGENT


@runtime_checkable
class LeaderboardSource(Protocol):
    """Anything that can hand over the leaderboard page as HTML text."""

    url: str

    def fetch_html(self) -> str:
        """Return the page HTML.

        Raises:
            SourceUnavailableError: If the page could not be retrieved.
        """
        ...


class HttpLeaderboardSource:
    """Fetch the leaderboard page over HTTP.

    Transport failures (connection errors, timeouts) are retried with
    exponential backoff; a non-2xx response fails immediately. Both surface
    as SourceUnavailableError.
    """

    def __init__(
        self,
        config: FetcherConfig | None = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config or FetcherConfig()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._config.url

    def fetch_html(self) -> str:
        retrying = Retrying(
            stop=stop_after_attempt(self._config.max_attempts),
            wait=wait_exponential(multiplier=self._config.backoff, max=30),
            retry=retry_if_exception_type(httpx.TransportError),
            before_sleep=before_sleep_log(_tenacity_logger, logging.WARNING),
            reraise=True,
        )
        with httpx.Client(
            timeout=self._config.timeout,
            follow_redirects=True,
            headers={
                "User-Agent": self._config.user_agent,
                "Accept": "text/html,application/xhtml+xml",
            },
            transport=self._transport,
        ) as client:
            try:
                response = retrying(client.get, self._config.url)
            except httpx.TimeoutException as e:
                logger.error("leaderboard_fetch_timeout", url=self._config.url, timeout=self._config.timeout)
                raise SourceUnavailableError(self._config.url, f"timed out after {self._config.timeout}s") from e
            except httpx.TransportError as e:
                logger.error("leaderboard_fetch_failed", url=self._config.url, error=str(e))
                raise SourceUnavailableError(self._config.url, str(e)) from e

        if not response.is_success:
            logger.error("leaderboard_http_error", url=self._config.url, status=response.status_code)
            raise SourceUnavailableError(
                self._config.url,
                f"HTTP {response.status_code}: {response.reason_phrase}",
                status_code=response.status_code,
                retryable=response.status_code >= HTTP_SERVER_ERROR,
            )
        logger.info("leaderboard_fetched", url=self._config.url, bytes=len(response.content))
        return response.text


class StaticLeaderboardSource:
    """In-memory page, for offline runs and tests."""

    def __init__(self, html: str, url: str = "static") -> None:
        self.url = url
        self._html = html

    def fetch_html(self) -> str:
        return self._html
