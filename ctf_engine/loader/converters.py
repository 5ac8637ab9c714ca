"""
Scalar Converters - CTF Event Engine
ctf_engine/loader/converters.py

Text <-> value adapters for scalar types the generic YAML decoder does not
handle itself: offset-aware timestamps, durations in seconds, and URIs.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Tuple
from urllib.parse import SplitResult, urlsplit

from ctf_engine.core.exceptions import MalformedScalarException

TIMESTAMP_PATTERN = "YYYY-MM-DDThh:mm:ss+hh:mm"

_TIMESTAMP_RE = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})([+-])([0-9]{2}):([0-9]{2})"
)
_SECONDS_RE = re.compile(r"[0-9]+")
_URI_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_URI_FORBIDDEN_RE = re.compile(r"[\x00-\x20\x7f]")


class ScalarConverter(ABC):
    """Converts one scalar type to and from its YAML text."""

    target_type: type

    def accepts(self, target_type: Any) -> bool:
        return target_type is self.target_type

    @abstractmethod
    def read(self, text: str) -> Any:
        ...

    @abstractmethod
    def write(self, value: Any) -> str:
        ...


class DateTimeOffsetConverter(ScalarConverter):
    """`YYYY-MM-DDThh:mm:ss±hh:mm`, parsed strictly, offset preserved."""

    target_type = datetime

    def read(self, text: str) -> datetime:
        match = _TIMESTAMP_RE.fullmatch(text)
        if match is None:
            raise MalformedScalarException(text, TIMESTAMP_PATTERN)

        year, month, day, hour, minute, second, sign, off_h, off_m = match.groups()
        if int(off_m) >= 60:
            raise MalformedScalarException(text, TIMESTAMP_PATTERN)
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        if sign == "-":
            offset = -offset

        try:
            return datetime(
                int(year), int(month), int(day),
                int(hour), int(minute), int(second),
                tzinfo=timezone(offset),
            )
        except ValueError as exc:
            raise MalformedScalarException(text, f"{TIMESTAMP_PATTERN} ({exc})") from exc

    def write(self, value: datetime) -> str:
        offset = value.utcoffset()
        if offset is None:
            raise MalformedScalarException(value.isoformat(), "an offset-aware datetime")

        sign = "-" if offset < timedelta(0) else "+"
        off_h, off_m = divmod(int(abs(offset).total_seconds()) // 60, 60)
        return (
            f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
            f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
            f"{sign}{off_h:02d}:{off_m:02d}"
        )


class TimeSpanConverter(ScalarConverter):
    """Non-negative whole seconds."""

    target_type = timedelta

    def read(self, text: str) -> timedelta:
        if _SECONDS_RE.fullmatch(text) is None:
            raise MalformedScalarException(text, "a non-negative integer number of seconds")
        try:
            return timedelta(seconds=int(text))
        except (OverflowError, ValueError) as exc:
            raise MalformedScalarException(
                text, f"a non-negative integer number of seconds ({exc})"
            ) from exc

    def write(self, value: timedelta) -> str:
        return str(int(value.total_seconds()))


class UriConverter(ScalarConverter):
    """Absolute URI, parsed with urllib and kept as-is."""

    target_type = SplitResult

    def read(self, text: str) -> SplitResult:
        expected = "an absolute URI"
        if not text or _URI_FORBIDDEN_RE.search(text):
            raise MalformedScalarException(text, expected)

        try:
            uri = urlsplit(text)
            # Raises ValueError for a non-numeric or out-of-range port.
            uri.port
        except ValueError as exc:
            raise MalformedScalarException(text, f"{expected} ({exc})") from exc

        if not _URI_SCHEME_RE.fullmatch(uri.scheme):
            raise MalformedScalarException(text, expected)
        return uri

    def write(self, value: SplitResult) -> str:
        return value.geturl()


DEFAULT_CONVERTERS: Tuple[ScalarConverter, ...] = (
    DateTimeOffsetConverter(),
    TimeSpanConverter(),
    UriConverter(),
)
