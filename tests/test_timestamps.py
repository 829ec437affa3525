"""Tests for crumb.timestamps — RFC 822 formatting and parsing."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from crumb.errors import CrumbError, TimestampError
from crumb.timestamps import EARLIEST, EARLIEST_TEXT, format_timestamp, parse_timestamp, to_utc


class TestToUTC:
    def test_naive_tagged_utc(self) -> None:
        dt = to_utc(datetime(2020, 1, 2, 3, 4, 5))
        assert dt == datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert dt.tzinfo is UTC

    def test_aware_converted(self) -> None:
        tz = timezone(timedelta(hours=2))
        dt = to_utc(datetime(2020, 1, 2, 3, 0, 0, tzinfo=tz))
        assert dt == datetime(2020, 1, 2, 1, 0, 0, tzinfo=UTC)
        assert dt.tzinfo is UTC


class TestFormat:
    def test_rfc822(self) -> None:
        dt = datetime(2012, 3, 22, 14, 53, 18, tzinfo=UTC)
        assert format_timestamp(dt) == "Thu, 22 Mar 2012 14:53:18 GMT"

    def test_converts_to_gmt(self) -> None:
        tz = timezone(timedelta(hours=-8))
        dt = datetime(2012, 3, 22, 6, 53, 18, tzinfo=tz)
        assert format_timestamp(dt) == "Thu, 22 Mar 2012 14:53:18 GMT"

    def test_drops_microseconds(self) -> None:
        dt = datetime(2012, 3, 22, 14, 53, 18, 123456, tzinfo=UTC)
        assert format_timestamp(dt) == "Thu, 22 Mar 2012 14:53:18 GMT"

    def test_earliest(self) -> None:
        assert format_timestamp(EARLIEST) == EARLIEST_TEXT == "Sun, 01 Jan 1900 00:00:00 GMT"


class TestParse:
    def test_gmt(self) -> None:
        dt = parse_timestamp("Thu, 22 Mar 2012 14:53:18 GMT")
        assert dt == datetime(2012, 3, 22, 14, 53, 18, tzinfo=UTC)
        assert dt.tzinfo is UTC

    def test_numeric_offset(self) -> None:
        dt = parse_timestamp("Thu, 22 Mar 2012 16:53:18 +0200")
        assert dt == datetime(2012, 3, 22, 14, 53, 18, tzinfo=UTC)

    def test_surrounding_whitespace(self) -> None:
        assert parse_timestamp("  Thu, 22 Mar 2012 14:53:18 GMT ") == datetime(
            2012, 3, 22, 14, 53, 18, tzinfo=UTC
        )

    def test_earliest_text(self) -> None:
        assert parse_timestamp(EARLIEST_TEXT) == EARLIEST

    @pytest.mark.parametrize("text", ["", "not a date", "Thu, 99 Foo 2012"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(TimestampError) as exc_info:
            parse_timestamp(text)
        assert exc_info.value.text == text
        assert isinstance(exc_info.value, CrumbError)
        assert isinstance(exc_info.value, ValueError)
