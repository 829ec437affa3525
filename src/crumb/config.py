"""Cookie defaults.

CookieConfig is a frozen dataclass: immutable after creation, shared freely
between ovens, no string-key dict lookups.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from crumb.cookie import max_age_seconds
from crumb.errors import ConfigurationError, InvalidCookieError


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Attribute defaults applied to every baked cookie.

    All fields default to "attribute absent". Override what you need::

        config = CookieConfig(path="/", secure=True, httponly=True)
    """

    # Scope
    domain: str | None = None
    path: str | None = None

    # Lifetime
    max_age: int | timedelta = 0  # 0 = no Max-Age
    expires: datetime | None = None

    # Flags
    secure: bool = False
    httponly: bool = False

    def __post_init__(self) -> None:
        try:
            max_age_seconds(self.max_age)
        except InvalidCookieError as exc:
            msg = f"CookieConfig.max_age is invalid: {exc}"
            raise ConfigurationError(msg) from exc
