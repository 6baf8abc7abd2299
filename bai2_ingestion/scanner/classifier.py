"""
Line classifier: one raw line in, one ``RawRecord`` out.

A BAI2 line is ``TT,field,field,.../``. The trailing ``/`` terminator is
optional (lines that continue onto an 88 often omit it) and only one is
removed, so a ``/`` inside free text survives.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bai2_config.schema import ParserConfig
from bai2_kernel.exceptions import EmptyInputError, UnknownRecordTypeError

from bai2_ingestion.scanner.records import RawRecord, RecordType

FIELD_DELIMITER = ","
RECORD_TERMINATOR = "/"

_RECORD_TYPES = {rt.value: rt for rt in RecordType}


def classify_line(line: str, line_number: int) -> RawRecord:
    """Split one physical line into its record type and raw fields.

    Line endings and trailing blanks are removed before the terminator is
    looked for, on terminated and unterminated lines alike. Blanks at the
    end of an unterminated 16 or 88 text field are therefore not kept;
    text entries are stripped during resolution in any case.

    Raises:
        UnknownRecordTypeError: the leading code is not a BAI2 record type.
    """
    body = line.rstrip("\r\n").rstrip()
    if body.endswith(RECORD_TERMINATOR):
        body = body[: -len(RECORD_TERMINATOR)]

    code, *fields = body.split(FIELD_DELIMITER)
    record_type = _RECORD_TYPES.get(code.strip())
    if record_type is None:
        raise UnknownRecordTypeError(code.strip(), line_number)

    return RawRecord(record_type=record_type, fields=tuple(fields), line_number=line_number)


def classify_lines(
    lines: Iterable[str],
    config: ParserConfig | None = None,
) -> Iterator[RawRecord]:
    """Classify each line, numbering from 1. Lazy; errors surface in line order.

    Raises:
        EmptyInputError: no record remained after blank lines were skipped.
        UnknownRecordTypeError: see ``classify_line``.
    """
    config = config or ParserConfig()
    line_count = 0
    emitted = 0
    for line_number, line in enumerate(lines, start=1):
        line_count = line_number
        if config.skip_blank_lines and not line.strip():
            continue
        emitted += 1
        yield classify_line(line, line_number)

    if emitted == 0:
        raise EmptyInputError(line_count)
