"""Custom exceptions for coderank.

- CodeRankError: Base exception for all coderank errors
- SourceUnavailableError: Leaderboard could not be fetched
- ExtractionEmptyError: Leaderboard fetched but the ranking table was missing
- PersistenceError: Stored data failed post-write verification
"""

from __future__ import annotations


class CodeRankError(Exception):
    """Base exception for coderank errors."""


class SourceUnavailableError(CodeRankError):
    """The leaderboard source could not deliver usable data.

    Attributes:
        url: The URL that failed.
        status_code: HTTP status for non-2xx responses, otherwise None.
        retryable: Whether the next scheduled run may reasonably succeed.
    """

    def __init__(
        self,
        url: str,
        message: str,
        status_code: int | None = None,
        retryable: bool = True,
    ) -> None:
        self.url = url
        self.status_code = status_code
        self.retryable = retryable
        super().__init__(f"Leaderboard unavailable at {url}: {message}")


class ExtractionEmptyError(SourceUnavailableError):
    """The page was fetched but no ranking table with the target column was found."""

    def __init__(self, url: str, column: str) -> None:
        self.column = column
        super().__init__(url, f"no table with a {column!r} column")


class PersistenceError(CodeRankError):
    """Saved data did not read back as written."""
