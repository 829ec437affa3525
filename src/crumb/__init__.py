"""Crumb: an incrementally editable ``Set-Cookie`` header value.

A ``Cookie`` keeps one canonical serialization and edits it in place.
Attributes always come out in the same order, whatever order they are set in.

Basic usage::

    from crumb import Cookie

    cookie = Cookie("session", "abc123")
    cookie.set_domain("example.com").set_path("/").set_secure(True)
    cookie.as_str()
    # 'session=abc123; Domain=example.com; Path=/; Secure'

Shared defaults::

    from crumb import CookieConfig, CookieOven

    oven = CookieOven(CookieConfig(path="/", httponly=True))
    oven.bake("theme", "dark").as_str()
    # 'theme=dark; Path=/; HttpOnly'
"""

__version__ = "0.1.0"
__all__ = [
    "EARLIEST",
    "ConfigurationError",
    "Cookie",
    "CookieConfig",
    "CookieOven",
    "CrumbError",
    "InvalidCookieError",
    "TimestampError",
    "format_timestamp",
    "parse_timestamp",
    "to_utc",
]

_LAZY_IMPORTS: dict[str, str] = {
    "Cookie": "crumb.cookie",
    "CookieConfig": "crumb.config",
    "CookieOven": "crumb.oven",
    "ConfigurationError": "crumb.errors",
    "CrumbError": "crumb.errors",
    "InvalidCookieError": "crumb.errors",
    "TimestampError": "crumb.errors",
    "EARLIEST": "crumb.timestamps",
    "format_timestamp": "crumb.timestamps",
    "parse_timestamp": "crumb.timestamps",
    "to_utc": "crumb.timestamps",
}


def __getattr__(name: str) -> object:
    """Resolve public names from ``_LAZY_IMPORTS`` on first access.

    ``crumb.cookie`` and ``crumb.timestamps`` are not loaded until a name
    that lives in them is used.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
