"""CookieOven: bakes cookies with configured defaults.

Usage::

    from crumb import CookieConfig, CookieOven

    oven = CookieOven(CookieConfig(path="/", secure=True, httponly=True))
    cookie = oven.bake("session", token)
    cookie.set_max_age(3600)
"""

import logging

from crumb.config import CookieConfig
from crumb.cookie import Cookie

logger = logging.getLogger("crumb.oven")


class CookieOven:
    """Creates ``Cookie`` objects pre-populated from a ``CookieConfig``."""

    __slots__ = ("_config",)

    def __init__(self, config: CookieConfig | None = None) -> None:
        self._config = config if config is not None else CookieConfig()

    @property
    def config(self) -> CookieConfig:
        return self._config

    def bake(self, name: str, value: str) -> Cookie:
        """Return a new cookie with every configured default applied."""
        cfg = self._config
        cookie = (
            Cookie(name, value)
            .set_domain(cfg.domain or "")
            .set_path(cfg.path or "")
            .set_max_age(cfg.max_age)
            .set_secure(cfg.secure)
            .set_httponly(cfg.httponly)
            .set_expires(cfg.expires)
        )
        logger.debug("Baked cookie %r", cookie.name())
        return cookie
