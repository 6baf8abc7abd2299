"""
Continuation folder.

Attaches each 88 record to the header or detail record it follows. Runs as
a generator between the classifier and the hierarchy builder, holding at
most one pending record.

A pending record is released downstream before any later error is raised,
so the hierarchy builder sees every record that precedes the fault and
scan errors surface in line order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from bai2_kernel.exceptions import Bai2Error, OrphanContinuationError

from bai2_ingestion.scanner.records import (
    FOLDABLE_RECORD_TYPES,
    FoldedRecord,
    RawRecord,
    RecordType,
)


def fold_continuations(records: Iterable[RawRecord]) -> Iterator[FoldedRecord]:
    """Yield every non-88 record with its continuations attached.

    Raises:
        OrphanContinuationError: an 88 at the start of input, or directly
            after a trailer (49/98/99). The trailer itself is yielded first.
        Bai2Error: whatever the upstream iterator raises, after the
            pending record has been yielded.
    """
    pending: RawRecord | None = None
    continuations: list[RawRecord] = []

    upstream = iter(records)
    while True:
        try:
            record = next(upstream)
        except StopIteration:
            break
        except Bai2Error:
            if pending is not None:
                yield FoldedRecord(record=pending, continuations=tuple(continuations))
                pending = None
            raise

        if record.record_type == RecordType.CONTINUATION:
            if pending is None:
                raise OrphanContinuationError(record.line_number, None)
            if pending.record_type not in FOLDABLE_RECORD_TYPES:
                previous = pending.record_type.value
                yield FoldedRecord(record=pending, continuations=())
                pending = None
                raise OrphanContinuationError(record.line_number, previous)
            continuations.append(record)
            continue

        if pending is not None:
            yield FoldedRecord(record=pending, continuations=tuple(continuations))
        pending = record
        continuations = []

    if pending is not None:
        yield FoldedRecord(record=pending, continuations=tuple(continuations))
