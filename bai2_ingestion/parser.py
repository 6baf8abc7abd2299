"""
Parse entry points.

``parse_lines`` runs the full pipeline:

    classify_lines -> fold_continuations -> build_tree      (scan)
    resolve_file -> apply_currency_defaults                 (resolve)

Every call is independent: the only inputs are the lines and the config,
so parsing the same lines twice gives equal results. The first fault
found rejects the whole input; no partial ``FileRecord`` is returned.

Uses structured logging (LogContext, get_logger("ingestion.*")).
"""

from __future__ import annotations

from collections.abc import Iterable
from uuid import uuid4

from bai2_config.loader import config_fingerprint
from bai2_config.schema import ParserConfig
from bai2_kernel.exceptions import Bai2Error
from bai2_kernel.logging_config import LogContext, get_logger

from bai2_ingestion.domain.types import FileRecord
from bai2_ingestion.resolver.builder import resolve_file
from bai2_ingestion.resolver.defaults import apply_currency_defaults
from bai2_ingestion.scanner.classifier import classify_lines
from bai2_ingestion.scanner.folder import fold_continuations
from bai2_ingestion.scanner.hierarchy import build_tree
from bai2_ingestion.scanner.records import RecordNode
from bai2_ingestion.tracing import traced_stage

logger = get_logger("ingestion.parser")


@traced_stage("scan", "1.0")
def scan_lines(lines: Iterable[str], config: ParserConfig | None = None) -> RecordNode:
    """Run the scan phase only and return the untyped record tree.

    Raises:
        TypeError: ``lines`` is a single string; use ``parse_text``.
    """
    if isinstance(lines, str):
        raise TypeError("lines must be an iterable of lines, not a str; use parse_text for a whole document")
    config = config or ParserConfig()
    return build_tree(fold_continuations(classify_lines(lines, config)))


def parse_lines(
    lines: Iterable[str],
    *,
    config: ParserConfig | None = None,
    source_name: str | None = None,
) -> FileRecord:
    """Parse BAI2 lines into a ``FileRecord``.

    Args:
        lines: Physical lines, with or without line endings.
        config: Parser options; defaults to ``ParserConfig()``.
        source_name: Label for log lines (e.g. the file name). Not parsed.

    Raises:
        Bai2Error: one of its subclasses, for the first fault found.
        TypeError: ``lines`` is a single string.
    """
    config = config or ParserConfig()
    with LogContext.bind(parse_id=str(uuid4()), source_name=source_name):
        try:
            root = scan_lines(lines, config)
            resolved = resolve_file(root, config=config)
            parsed = apply_currency_defaults(resolved, default_currency=config.default_currency)
        except Bai2Error as exc:
            logger.warning(
                "bai2_parse_rejected",
                extra={
                    "error_code": exc.code,
                    "line_number": getattr(exc, "line_number", None),
                    "error": str(exc),
                },
            )
            raise

        logger.info(
            "bai2_parsed",
            extra={
                "group_count": len(parsed.groups),
                "account_count": len(parsed.accounts),
                "transaction_count": len(parsed.transactions),
                "record_count": root.record_count,
                "config_fingerprint": config_fingerprint(config),
            },
        )
        return parsed


def parse_text(
    text: str,
    *,
    config: ParserConfig | None = None,
    source_name: str | None = None,
) -> FileRecord:
    """Parse a whole BAI2 document held in one string."""
    return parse_lines(text.splitlines(), config=config, source_name=source_name)
