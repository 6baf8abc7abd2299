"""
bai2_ingestion.scanner -- Phase one: raw lines to an untyped record tree.

    classify_lines -> fold_continuations -> build_tree

The first two stages are generators, so scanning stops at the first fault
it reaches without reading the rest of the input.
"""

from bai2_ingestion.scanner.classifier import classify_line, classify_lines
from bai2_ingestion.scanner.folder import fold_continuations
from bai2_ingestion.scanner.hierarchy import build_tree
from bai2_ingestion.scanner.records import FoldedRecord, RawRecord, RecordNode, RecordType

__all__ = [
    "FoldedRecord",
    "RawRecord",
    "RecordNode",
    "RecordType",
    "build_tree",
    "classify_line",
    "classify_lines",
    "fold_continuations",
]
