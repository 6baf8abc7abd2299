"""
Field shape parsing: raw strings to dates, times, integers and currencies.

The ``parse_*`` functions are pure and raise ``ValueError`` on a bad shape.
``FieldReader`` applies them to one record's positional fields and turns
any failure into a ``FieldParseError`` carrying the record type, field
name, raw value and line number. ZERO I/O.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date, time

from bai2_kernel.exceptions import FieldParseError

from bai2_ingestion.domain.types import ClockTime
from bai2_ingestion.scanner.records import FoldedRecord

_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
_DATE_RE = re.compile(r"^\d{6}$", re.ASCII)
_TIME_RE = re.compile(r"^\d{4}$", re.ASCII)
_CURRENCY_RE = re.compile(r"^[A-Za-z]{3}$")

UNKNOWN_TIME = "9999"
END_OF_DAY = "2400"


# -----------------------------------------------------------------------------
# Pure shape parsers
# -----------------------------------------------------------------------------


def parse_date(raw: str, century: int) -> date:
    """Parse ``YYMMDD``; the year is ``century + YY``."""
    s = raw.strip()
    if not _DATE_RE.match(s):
        raise ValueError(f"not a YYMMDD date: {raw!r}")
    return date(century + int(s[0:2]), int(s[2:4]), int(s[4:6]))


def parse_time(raw: str) -> ClockTime | None:
    """Parse ``HHMM``. Blank gives None; 9999 is unknown; 2400 is end of day."""
    s = raw.strip()
    if not s:
        return None
    if not _TIME_RE.match(s):
        raise ValueError(f"not an HHMM time: {raw!r}")
    if s == UNKNOWN_TIME:
        return ClockTime(code=s, value=None)
    if s == END_OF_DAY:
        return ClockTime(code=s, value=time.max)
    return ClockTime(code=s, value=time(int(s[0:2]), int(s[2:4])))


def parse_int(raw: str) -> int | None:
    """Parse an optionally signed decimal integer. Blank gives None."""
    s = raw.strip()
    if not s:
        return None
    if not _INTEGER_RE.match(s):
        raise ValueError(f"not an integer: {raw!r}")
    return int(s)


def parse_currency(raw: str) -> str | None:
    """Parse a 3-letter currency code, upper-cased. Blank gives None."""
    s = raw.strip()
    if not s:
        return None
    if not _CURRENCY_RE.match(s):
        raise ValueError(f"not a currency code: {raw!r}")
    return s.upper()


# -----------------------------------------------------------------------------
# Positional access
# -----------------------------------------------------------------------------


class FieldReader:
    """Positional, typed access to one record's fields.

    Indices past the end read as blank. Each field remembers the physical
    line it came from, so an error in a continuation's field reports the
    88's line number.
    """

    def __init__(
        self,
        record_type: str,
        fields: Sequence[str],
        line_numbers: Sequence[int],
    ):
        self.record_type = record_type
        self.fields = tuple(fields)
        self._line_numbers = tuple(line_numbers)
        self._default_line = self._line_numbers[0] if self._line_numbers else 0

    @classmethod
    def from_folded(cls, folded: FoldedRecord, *, include_continuations: bool = True) -> FieldReader:
        fields = list(folded.record.fields)
        lines = [folded.line_number] * len(fields)
        if include_continuations:
            for cont in folded.continuations:
                fields.extend(cont.fields)
                lines.extend([cont.line_number] * len(cont.fields))
        reader = cls(folded.record_type.value, fields, lines)
        reader._default_line = folded.line_number
        return reader

    def __len__(self) -> int:
        return len(self.fields)

    def line_number(self, index: int) -> int:
        if 0 <= index < len(self._line_numbers):
            return self._line_numbers[index]
        return self._default_line

    def raw(self, index: int) -> str:
        return self.fields[index] if 0 <= index < len(self.fields) else ""

    def text(self, index: int) -> str:
        return self.raw(index).strip()

    def error(self, index: int, field_name: str, expected: str) -> FieldParseError:
        return FieldParseError(
            self.record_type,
            field_name,
            self.raw(index),
            self.line_number(index),
            expected,
        )

    def required_text(self, index: int, field_name: str) -> str:
        value = self.text(index)
        if not value:
            raise self.error(index, field_name, "a value")
        return value

    def date(self, index: int, field_name: str, century: int) -> date:
        try:
            return parse_date(self.raw(index), century)
        except ValueError:
            raise self.error(index, field_name, "YYMMDD date") from None

    def time(self, index: int, field_name: str) -> ClockTime | None:
        try:
            return parse_time(self.raw(index))
        except ValueError:
            raise self.error(index, field_name, "HHMM time") from None

    def integer(self, index: int, field_name: str, *, required: bool = False) -> int | None:
        try:
            value = parse_int(self.raw(index))
        except ValueError:
            raise self.error(index, field_name, "signed integer") from None
        if value is None and required:
            raise self.error(index, field_name, "signed integer")
        return value

    def required_integer(self, index: int, field_name: str) -> int:
        value = self.integer(index, field_name, required=True)
        assert value is not None
        return value

    def currency(self, index: int, field_name: str) -> str | None:
        try:
            return parse_currency(self.raw(index))
        except ValueError:
            raise self.error(index, field_name, "3-letter currency code") from None
