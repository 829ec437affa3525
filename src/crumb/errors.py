"""Crumb exception hierarchy.

Every error raised by the package derives from ``CrumbError``. Errors about
bad input also derive from ``ValueError`` so callers can catch either.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when a ``CookieConfig`` holds inconsistent defaults."""


class InvalidCookieError(CrumbError, ValueError):
    """Raised when a setter receives input the cookie cannot hold.

    Covers an empty name or value (after trimming) and a negative or
    non-integral Max-Age. The cookie is left unchanged.
    """


class TimestampError(CrumbError, ValueError):
    """Raised when text cannot be parsed as an RFC 822 date."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid cookie date: {text!r}")
