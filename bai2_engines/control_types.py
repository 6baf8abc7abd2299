"""
Control-total check domain types.

Pure frozen dataclasses and enums for comparing BAI2 trailer totals with
what the parsed file actually contains. Used by ControlTotalChecker.

Architecture: bai2_engines -- pure domain, zero I/O.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from bai2_ingestion.domain.types import Account, FileRecord, Group
from bai2_ingestion.scanner.records import RecordNode


# =============================================================================
# Enums
# =============================================================================


class CheckSeverity(str, Enum):
    """Severity level of a control finding."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CheckStatus(str, Enum):
    """Overall status of a control check."""

    PASSED = "passed"
    FAILED = "failed"       # At least one ERROR finding
    WARNING = "warning"     # Warnings only, no errors


# =============================================================================
# Input types
# =============================================================================


@dataclass(frozen=True)
class ControlContext:
    """A scan tree and the file resolved from it.

    The tree supplies trailers and physical record counts; the resolved
    file supplies amounts. Groups and accounts pair up by position.
    """

    root: RecordNode
    file: FileRecord

    def groups(self) -> Iterator[tuple[RecordNode, Group]]:
        return zip(self.root.children, self.file.groups)

    def accounts(self) -> Iterator[tuple[RecordNode, Account]]:
        for group_node, group in self.groups():
            yield from zip(group_node.children, group.accounts)

    @property
    def group_count(self) -> int:
        return len(self.file.groups)

    @property
    def account_count(self) -> int:
        return len(self.file.accounts)

    @property
    def record_count(self) -> int:
        return self.root.record_count


# =============================================================================
# Output types
# =============================================================================


@dataclass(frozen=True)
class ControlFinding:
    """One trailer value that did not check out.

    ``code`` is machine-readable (e.g., ACCOUNT_CONTROL_TOTAL_MISMATCH);
    ``line_number`` points at the trailer record.
    """

    code: str
    severity: CheckSeverity
    message: str
    line_number: int | None = None
    details: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ControlCheckResult:
    """All findings from one control-total run.

    ``status`` is derived from the highest-severity finding.
    """

    status: CheckStatus
    findings: tuple[ControlFinding, ...] = ()
    groups_checked: int = 0
    accounts_checked: int = 0
    checks_performed: tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        """True if no findings of any severity."""
        return len(self.findings) == 0

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == CheckSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == CheckSeverity.WARNING)

    @classmethod
    def from_findings(
        cls,
        findings: tuple[ControlFinding, ...],
        groups_checked: int,
        accounts_checked: int,
        checks_performed: tuple[str, ...],
    ) -> ControlCheckResult:
        """Factory that derives status from findings."""
        has_error = any(f.severity == CheckSeverity.ERROR for f in findings)
        has_warning = any(f.severity == CheckSeverity.WARNING for f in findings)

        if has_error:
            status = CheckStatus.FAILED
        elif has_warning:
            status = CheckStatus.WARNING
        else:
            status = CheckStatus.PASSED

        return cls(
            status=status,
            findings=findings,
            groups_checked=groups_checked,
            accounts_checked=accounts_checked,
            checks_performed=checks_performed,
        )
