"""
Typed Exception Hierarchy for BAI2 ingestion.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A rejected statement file has to be reported back to whoever delivered it,
with enough detail to find the bad line. Callers catch by type, read the
machine-readable ``code``, and use structured attributes (``line_number``,
``record_type``, ``field_name``) instead of parsing messages.

    try:
        statement = parse_lines(lines)
    except FieldParseError as e:
        reject(code=e.code, line=e.line_number, field=e.field_name)
    except ScanError as e:
        reject(code=e.code, line=e.line_number)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    Bai2Error (base)
    |
    +-- ScanError
    |   +-- EmptyInputError
    |   +-- UnknownRecordTypeError
    |   +-- OrphanContinuationError
    |   +-- UnexpectedRecordOrderError
    |
    +-- ResolutionError
        +-- FieldParseError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category    | Code                     | When Raised
------------|--------------------------|------------------------------------------
Scan        | EMPTY_INPUT              | No records in the input
            | UNKNOWN_RECORD_TYPE      | Line type code is not 01/02/03/16/88/49/98/99
            | ORPHAN_CONTINUATION      | 88 with no preceding header or detail record
            | UNEXPECTED_RECORD_ORDER  | File/group/account nesting rule broken
------------|--------------------------|------------------------------------------
Resolution  | FIELD_PARSE_ERROR        | Field missing or not a valid date/time/int

Unrecognized transaction, amount or funds type *codes* are not errors; they
resolve to an unclassified category. Parsing stops at the first error and no
partial file is returned.
"""


class Bai2Error(Exception):
    """
    Base exception for all BAI2 ingestion errors.

    All subclasses have a ``code`` class attribute for machine-readable
    error identification.
    """

    code: str = "BAI2_ERROR"


# Scan-phase exceptions


class ScanError(Bai2Error):
    """Base exception for errors found while scanning raw lines."""

    code: str = "SCAN_ERROR"


class EmptyInputError(ScanError):
    """Input contained no records."""

    code: str = "EMPTY_INPUT"

    def __init__(self, line_count: int = 0):
        self.line_count = line_count
        self.line_number = line_count
        super().__init__(f"No BAI2 records found in input ({line_count} line(s) read)")


class UnknownRecordTypeError(ScanError):
    """Line starts with a record type code that BAI2 does not define."""

    code: str = "UNKNOWN_RECORD_TYPE"

    def __init__(self, record_type: str, line_number: int):
        self.record_type = record_type
        self.line_number = line_number
        super().__init__(f"Unknown record type {record_type!r} at line {line_number}")


class OrphanContinuationError(ScanError):
    """Continuation record (88) with nothing to continue."""

    code: str = "ORPHAN_CONTINUATION"

    def __init__(self, line_number: int, previous_record_type: str | None = None):
        self.line_number = line_number
        self.previous_record_type = previous_record_type
        after = (
            f"after record type {previous_record_type}"
            if previous_record_type
            else "at start of input"
        )
        super().__init__(f"Continuation at line {line_number} has no record to extend ({after})")


class UnexpectedRecordOrderError(ScanError):
    """Record appears where the file/group/account nesting does not allow it."""

    code: str = "UNEXPECTED_RECORD_ORDER"

    def __init__(self, record_type: str, line_number: int, context: str, reason: str = ""):
        self.record_type = record_type
        self.line_number = line_number
        self.context = context
        self.reason = reason
        message = f"Unexpected record {record_type} at line {line_number} (open: {context or 'none'})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# Resolution-phase exceptions


class ResolutionError(Bai2Error):
    """Base exception for errors turning raw fields into typed values."""

    code: str = "RESOLUTION_ERROR"


class FieldParseError(ResolutionError):
    """A positional field is missing or does not have the expected shape."""

    code: str = "FIELD_PARSE_ERROR"

    def __init__(
        self,
        record_type: str,
        field_name: str,
        raw_value: str,
        line_number: int,
        expected: str = "",
    ):
        self.record_type = record_type
        self.field_name = field_name
        self.raw_value = raw_value
        self.line_number = line_number
        self.expected = expected
        message = (
            f"Cannot parse {field_name} of record {record_type} at line "
            f"{line_number}: {raw_value!r}"
        )
        if expected:
            message = f"{message} (expected {expected})"
        super().__init__(message)
