"""Incrementally editable ``Set-Cookie`` header value.

A ``Cookie`` keeps its serialization as one string and remembers where each
attribute ends inside it. Setters splice new text into place and shift the
offsets of whatever follows, so reads are plain slices and nothing is ever
re-parsed.

Attributes are always serialized in this order, whatever order they were
set in::

    name=value; Domain=d; Path=p; Max-Age=n; Secure; HttpOnly; Expires=date

Secure, HttpOnly and Expires go last because their lengths are fixed (or,
for Expires, nothing follows it), so their positions are derived rather
than stored.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from crumb._internal.splice import cut, remove, shift
from crumb.errors import InvalidCookieError
from crumb.timestamps import EARLIEST, format_timestamp, parse_timestamp, to_utc

logger = logging.getLogger("crumb.cookie")

DOMAIN_PREFIX = "; Domain="
PATH_PREFIX = "; Path="
MAX_AGE_PREFIX = "; Max-Age="
SECURE_ATTR = "; Secure"
HTTPONLY_ATTR = "; HttpOnly"
EXPIRES_PREFIX = "; Expires="

_ONE_SECOND = timedelta(seconds=1)

# Segments that can be followed by a stored offset, in serialization order.
VALUE = "value"
DOMAIN = "domain"
PATH = "path"
_OFFSET_SEGMENTS = (VALUE, DOMAIN, PATH)


def _required(text: str, field: str) -> str:
    text = text.strip()
    if not text:
        msg = f"Cookie {field} must not be empty."
        raise InvalidCookieError(msg)
    return text


def max_age_seconds(max_age: int | timedelta) -> int:
    """Return *max_age* as whole seconds.

    Raises ``InvalidCookieError`` for negative values and anything that is
    not an ``int`` or ``timedelta`` (``bool`` included).
    """
    if isinstance(max_age, timedelta):
        seconds = max_age // _ONE_SECOND
    elif isinstance(max_age, int) and not isinstance(max_age, bool):
        seconds = max_age
    else:
        msg = f"Max-Age must be an int or timedelta, got {type(max_age).__name__}."
        raise InvalidCookieError(msg)
    if seconds < 0:
        msg = f"Max-Age must not be negative, got {seconds}."
        raise InvalidCookieError(msg)
    return seconds


class Cookie:
    """A single cookie, serialized and editable in place.

    Usage::

        cookie = Cookie("session", "abc123")
        cookie.set_path("/").set_secure(True).set_httponly(True)
        response_headers.append(("Set-Cookie", cookie.as_str()))

    Every setter returns the cookie so calls chain. Setters trim whitespace
    and treat empty text (or a Max-Age of ``0``) as "remove the attribute".

    Name and value are mandatory: the constructor, ``set_name`` and
    ``set_value`` raise ``InvalidCookieError`` when the text trims to empty,
    and the cookie is left as it was.
    """

    __slots__ = (
        "_domain_end",
        "_expires",
        "_httponly",
        "_max_age",
        "_name_end",
        "_path_end",
        "_secure",
        "_serialization",
        "_value_end",
    )

    def __init__(self, name: str, value: str) -> None:
        name = _required(name, "name")
        value = _required(value, "value")
        self._serialization = f"{name}={value}"
        self._name_end = len(name)
        self._value_end = len(self._serialization)
        self._domain_end: int | None = None
        self._path_end: int | None = None
        self._max_age: tuple[int, int] | None = None
        self._secure = False
        self._httponly = False
        self._expires: datetime | None = None

    # -- Whole serialization --

    def as_str(self) -> str:
        """Return the full header value."""
        return self._serialization

    def into_string(self) -> str:
        """Return the final header value, for handing off to a response."""
        return self._serialization

    def __str__(self) -> str:
        return self._serialization

    def __repr__(self) -> str:
        return f"Cookie({self._serialization!r})"

    def __len__(self) -> int:
        return len(self._serialization)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self._serialization == other._serialization

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Cookie:
        """Return an independent cookie with the same state."""
        clone = Cookie.__new__(Cookie)
        for slot in Cookie.__slots__:
            setattr(clone, slot, getattr(self, slot))
        return clone

    __copy__ = copy

    # -- Name and value --

    def name(self) -> str:
        return self._serialization[: self._name_end]

    def set_name(self, name: str) -> Cookie:
        """Replace the name. Raises ``InvalidCookieError`` if it trims to empty."""
        name = _required(name, "name")
        delta = len(name) - self._name_end
        self._serialization = name + self._serialization[self._name_end :]
        self._name_end = len(name)
        self._value_end += delta
        self._shift_following(VALUE, delta)
        return self

    def value(self) -> str:
        return self._serialization[self._value_start() : self._value_end]

    def _value_start(self) -> int:
        return self._name_end + len("=")

    def set_value(self, value: str) -> Cookie:
        """Replace the value. Raises ``InvalidCookieError`` if it trims to empty."""
        value = _required(value, "value")
        old_value_end = self._value_end
        splice = cut(self._serialization, self._value_start(), old_value_end)
        self._serialization, self._value_end = splice.write(value)
        self._shift_following(VALUE, self._value_end - old_value_end)
        return self

    def cookie_pair(self) -> tuple[str, str]:
        """Return ``(name, value)``."""
        return self.name(), self.value()

    # -- Domain --

    def domain(self) -> str | None:
        if self._domain_end is None:
            return None
        return self._serialization[self._value_end + len(DOMAIN_PREFIX) : self._domain_end]

    def _domain_end_or_prior(self) -> int:
        if self._domain_end is None:
            return self._value_end
        return self._domain_end

    def set_domain(self, domain: str) -> Cookie:
        """Set the Domain attribute; empty or whitespace-only text removes it."""
        old_end = self._domain_end_or_prior()
        self._serialization, self._domain_end = self._splice_attr(
            DOMAIN_PREFIX, domain.strip(), self._domain_end, self._value_end
        )
        self._shift_following(DOMAIN, self._domain_end_or_prior() - old_end)
        return self

    # -- Path --

    def path(self) -> str | None:
        if self._path_end is None:
            return None
        return self._serialization[self._domain_end_or_prior() + len(PATH_PREFIX) : self._path_end]

    def _path_end_or_prior(self) -> int:
        if self._path_end is None:
            return self._domain_end_or_prior()
        return self._path_end

    def set_path(self, path: str) -> Cookie:
        """Set the Path attribute; empty or whitespace-only text removes it."""
        old_end = self._path_end_or_prior()
        self._serialization, self._path_end = self._splice_attr(
            PATH_PREFIX, path.strip(), self._path_end, self._domain_end_or_prior()
        )
        self._shift_following(PATH, self._path_end_or_prior() - old_end)
        return self

    # -- Max-Age --

    def max_age(self) -> int | None:
        if self._max_age is None:
            return None
        return self._max_age[0]

    def max_age_str(self) -> str | None:
        if self._max_age is None:
            return None
        start = self._path_end_or_prior() + len(MAX_AGE_PREFIX)
        return self._serialization[start : self._max_age[1]]

    def _max_age_end_or_prior(self) -> int:
        if self._max_age is None:
            return self._path_end_or_prior()
        return self._max_age[1]

    def set_max_age(self, max_age: int | timedelta) -> Cookie:
        """Set Max-Age in seconds. ``0`` removes the attribute.

        Accepts an ``int`` or a ``timedelta`` (floored to whole seconds).
        Raises ``InvalidCookieError`` for negative or non-integral input.
        """
        seconds = max_age_seconds(max_age)
        if seconds == (self.max_age() or 0):
            return self
        old_end = None if self._max_age is None else self._max_age[1]
        self._serialization, new_end = self._splice_attr(
            MAX_AGE_PREFIX, str(seconds) if seconds else "", old_end, self._path_end_or_prior()
        )
        self._max_age = None if new_end is None else (seconds, new_end)
        return self

    # -- Flags --

    def secure(self) -> bool:
        return self._secure

    def _secure_end_or_prior(self) -> int:
        return self._max_age_end_or_prior() + (len(SECURE_ATTR) if self._secure else 0)

    def set_secure(self, secure: bool) -> Cookie:
        secure = bool(secure)
        if secure != self._secure:
            self._serialization = self._toggle_flag(self._max_age_end_or_prior(), SECURE_ATTR, secure)
            self._secure = secure
        return self

    def httponly(self) -> bool:
        return self._httponly

    def _httponly_end_or_prior(self) -> int:
        return self._secure_end_or_prior() + (len(HTTPONLY_ATTR) if self._httponly else 0)

    def set_httponly(self, httponly: bool) -> Cookie:
        httponly = bool(httponly)
        if httponly != self._httponly:
            self._serialization = self._toggle_flag(self._secure_end_or_prior(), HTTPONLY_ATTR, httponly)
            self._httponly = httponly
        return self

    # -- Expires --

    def expires(self) -> datetime | None:
        """Return the Expires instant (UTC, whole seconds), if set."""
        return self._expires

    def expires_str(self) -> str | None:
        if self._expires is None:
            return None
        return self._serialization[self._httponly_end_or_prior() + len(EXPIRES_PREFIX) :]

    def set_expires(self, expires: datetime | None) -> Cookie:
        """Set or clear the Expires attribute.

        The instant is normalized to UTC and truncated to whole seconds, the
        precision of the wire format. Naive datetimes are read as UTC.
        """
        if expires is None:
            if self._expires is not None:
                self._serialization = self._serialization[: self._httponly_end_or_prior()]
                self._expires = None
            return self

        expires_utc = to_utc(expires).replace(microsecond=0)
        if expires_utc == self._expires:
            return self
        # Expires is always last, so replacing it is a plain truncate-and-append.
        head = self._serialization[: self._httponly_end_or_prior()]
        self._serialization = head + EXPIRES_PREFIX + format_timestamp(expires_utc)
        self._expires = expires_utc
        return self

    def set_expires_str(self, text: str) -> Cookie:
        """Parse an RFC 822 date and set it as Expires.

        Raises:
            TimestampError: If *text* is not a valid date. The cookie is unchanged.
        """
        return self.set_expires(parse_timestamp(text))

    def expire(self) -> Cookie:
        """Mark the cookie as already expired (``Expires`` at 1900-01-01)."""
        logger.debug("Expiring cookie %r", self.name())
        return self.set_expires(EARLIEST)

    # -- Splicing --

    def _splice_attr(
        self,
        prefix: str,
        new_value: str,
        old_value_end: int | None,
        preceding_end: int,
    ) -> tuple[str, int | None]:
        """Write, replace or remove one ``; Key=value`` segment.

        *new_value* must already be trimmed. Returns the new serialization and
        the new end of the value text (``None`` when the attribute is absent
        afterwards). Does not touch any stored offset.
        """
        buffer = self._serialization
        if old_value_end is not None:
            if not new_value:
                return remove(buffer, preceding_end, old_value_end), None
            splice = cut(buffer, preceding_end + len(prefix), old_value_end)
            return splice.write(new_value)
        if not new_value:
            return buffer, None
        return cut(buffer, preceding_end).write(prefix + new_value)

    def _toggle_flag(self, preceding_end: int, token: str, on: bool) -> str:
        take_from = preceding_end if on else preceding_end + len(token)
        buffer, _ = cut(self._serialization, preceding_end, take_from).write(token if on else "")
        return buffer

    def _shift_following(self, segment: str, delta: int) -> None:
        """Shift every stored offset that lies after *segment* by *delta*."""
        position = _OFFSET_SEGMENTS.index(segment)
        if not delta:
            return
        if position < _OFFSET_SEGMENTS.index(DOMAIN):
            self._domain_end = shift(self._domain_end, delta)
        if position < _OFFSET_SEGMENTS.index(PATH):
            self._path_end = shift(self._path_end, delta)
        if self._max_age is not None:
            seconds, end = self._max_age
            self._max_age = (seconds, end + delta)
