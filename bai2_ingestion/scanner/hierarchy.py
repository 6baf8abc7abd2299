"""
Hierarchy builder.

Single linear pass over folded records carrying the open file, group and
account as explicit state. Headers open a context, trailers close it, and
every record is checked against what is currently open:

    01  first record only
    02  file open, no group or account open
    03  group open, no account open
    16  account open
    49  account open; closes it
    98  group open, no account open; closes it
    99  no group open; closes the file and must be last

The result is an untyped ``RecordNode`` tree rooted at the 01 record.
"""

from __future__ import annotations

from collections.abc import Iterable

from bai2_kernel.exceptions import UnexpectedRecordOrderError
from bai2_kernel.logging_config import get_logger

from bai2_ingestion.scanner.records import FoldedRecord, RawRecord, RecordNode, RecordType

logger = get_logger("ingestion.scanner.hierarchy")

END_OF_INPUT = "EOF"


class _OpenNode:
    """Mutable stand-in for a RecordNode while its context is open."""

    __slots__ = ("folded", "children")

    def __init__(self, folded: FoldedRecord):
        self.folded = folded
        self.children: list[RecordNode] = []

    def close(self, trailer: RawRecord | None = None) -> RecordNode:
        return RecordNode(folded=self.folded, children=tuple(self.children), trailer=trailer)


class _TreeBuilder:
    """Holds the open-context state for one scan."""

    def __init__(self) -> None:
        self.file: _OpenNode | None = None
        self.group: _OpenNode | None = None
        self.account: _OpenNode | None = None
        self.root: RecordNode | None = None
        self.last_line_number = 0

    @property
    def context(self) -> str:
        parts = []
        if self.file is not None:
            parts.append("file")
        if self.group is not None:
            parts.append("group")
        if self.account is not None:
            parts.append("account")
        return ">".join(parts)

    def _reject(self, record_type: str, line_number: int, reason: str) -> UnexpectedRecordOrderError:
        return UnexpectedRecordOrderError(record_type, line_number, self.context, reason)

    def accept(self, folded: FoldedRecord) -> None:
        rt = folded.record_type
        line = folded.line_number
        self.last_line_number = line

        if self.root is not None:
            raise self._reject(rt.value, line, "record after file trailer")

        if self.file is None:
            if rt != RecordType.FILE_HEADER:
                raise self._reject(rt.value, line, "file must start with a file header")
            self.file = _OpenNode(folded)
            return

        if rt == RecordType.FILE_HEADER:
            raise self._reject(rt.value, line, "file header already seen")

        elif rt == RecordType.GROUP_HEADER:
            if self.account is not None or self.group is not None:
                raise self._reject(rt.value, line, "previous group not closed")
            self.group = _OpenNode(folded)

        elif rt == RecordType.ACCOUNT_IDENTIFIER:
            if self.group is None:
                raise self._reject(rt.value, line, "no open group")
            if self.account is not None:
                raise self._reject(rt.value, line, "previous account not closed")
            self.account = _OpenNode(folded)

        elif rt == RecordType.TRANSACTION_DETAIL:
            if self.account is None:
                raise self._reject(rt.value, line, "no open account")
            self.account.children.append(RecordNode(folded=folded))

        elif rt == RecordType.ACCOUNT_TRAILER:
            if self.account is None:
                raise self._reject(rt.value, line, "no open account")
            assert self.group is not None
            self.group.children.append(self.account.close(folded.record))
            self.account = None

        elif rt == RecordType.GROUP_TRAILER:
            if self.group is None:
                raise self._reject(rt.value, line, "no open group")
            if self.account is not None:
                raise self._reject(rt.value, line, "account not closed")
            self.file.children.append(self.group.close(folded.record))
            self.group = None

        elif rt == RecordType.FILE_TRAILER:
            if self.group is not None:
                raise self._reject(rt.value, line, "group not closed")
            self.root = self.file.close(folded.record)
            self.file = None

        else:
            raise self._reject(rt.value, line, "continuation outside folding")

    def finish(self) -> RecordNode:
        if self.root is None:
            raise self._reject(END_OF_INPUT, self.last_line_number, "missing file trailer")
        return self.root


def build_tree(folded: Iterable[FoldedRecord]) -> RecordNode:
    """Assemble the record tree from folded records.

    Raises:
        UnexpectedRecordOrderError: any nesting rule is broken, or input
            ends before the file trailer.
    """
    builder = _TreeBuilder()
    for record in folded:
        builder.accept(record)
    root = builder.finish()
    logger.debug(
        "bai2_tree_built",
        extra={"group_count": len(root.children), "record_count": root.record_count},
    )
    return root
