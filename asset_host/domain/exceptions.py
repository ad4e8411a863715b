"""Domain exceptions for the asset host.

Every failure mode of the rewrite engine resolves to "leave the URL as
given": these exceptions are raised where the failure is detected and
caught inside the engine, never by callers of rewrite().
"""

from typing import Any


class AssetHostException(Exception):
    """Base exception for all asset host errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. url, table).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class NotInitializedException(AssetHostException):
    """Raised when the engine is used before the static host is configured."""

    def __init__(self) -> None:
        super().__init__("Static host is not configured", "NOT_INITIALIZED")


class DirectoryQueryFailedException(AssetHostException):
    """Raised when the tenant directory cannot be queried."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize with the directory source and failure reason.

        Args:
            source: Directory listing that failed (e.g. table name).
            reason: Human-readable reason (e.g. driver error message).
        """
        super().__init__(
            f"Tenant directory query failed: {source}",
            "DIRECTORY_QUERY_FAILED",
            {"source": source, "reason": reason},
        )


class MalformedUrlException(AssetHostException):
    """Raised when a URL's host or path cannot be parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            f"Malformed URL: {url!r}",
            "MALFORMED_URL",
            {"url": url, "reason": reason},
        )


class ConfigurationException(AssetHostException):
    """Raised when the engine is wired inconsistently (e.g. missing directory)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "CONFIGURATION_ERROR")
