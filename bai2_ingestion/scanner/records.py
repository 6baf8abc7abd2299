"""
Scan-level record types.

These carry raw strings only. Nothing here parses a date or an amount;
that is the resolver's job once the tree shape is known to be valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RecordType(str, Enum):
    """BAI2 record type codes."""

    FILE_HEADER = "01"
    GROUP_HEADER = "02"
    ACCOUNT_IDENTIFIER = "03"
    TRANSACTION_DETAIL = "16"
    CONTINUATION = "88"
    ACCOUNT_TRAILER = "49"
    GROUP_TRAILER = "98"
    FILE_TRAILER = "99"


# Records an 88 may extend.
FOLDABLE_RECORD_TYPES = frozenset(
    {
        RecordType.FILE_HEADER,
        RecordType.GROUP_HEADER,
        RecordType.ACCOUNT_IDENTIFIER,
        RecordType.TRANSACTION_DETAIL,
    }
)


@dataclass(frozen=True)
class RawRecord:
    """One classified physical line. ``fields`` excludes the type code."""

    record_type: RecordType
    fields: tuple[str, ...]
    line_number: int


@dataclass(frozen=True)
class FoldedRecord:
    """A record together with the 88 lines that extend it."""

    record: RawRecord
    continuations: tuple[RawRecord, ...] = ()

    @property
    def record_type(self) -> RecordType:
        return self.record.record_type

    @property
    def line_number(self) -> int:
        return self.record.line_number

    @property
    def all_fields(self) -> tuple[str, ...]:
        """Record fields followed by every continuation's fields."""
        combined = list(self.record.fields)
        for cont in self.continuations:
            combined.extend(cont.fields)
        return tuple(combined)


@dataclass(frozen=True)
class RecordNode:
    """A header record, the nodes it encloses, and its closing trailer.

    The root node is the 01 record; its children are 02 nodes, whose
    children are 03 nodes, whose children are leaf 16 nodes. ``trailer`` is
    the 49/98/99 record that closed the node (None for 16 leaves).
    """

    folded: FoldedRecord
    children: tuple[RecordNode, ...] = ()
    trailer: RawRecord | None = None

    @property
    def record_type(self) -> RecordType:
        return self.folded.record_type

    @property
    def line_number(self) -> int:
        return self.folded.line_number

    @property
    def record_count(self) -> int:
        """Physical records covered by this node, continuations and trailer included."""
        count = 1 + len(self.folded.continuations)
        count += sum(child.record_count for child in self.children)
        if self.trailer is not None:
            count += 1
        return count
