"""
ControlTotalChecker -- Pure engine for BAI2 trailer verification.

Compares each 49/98/99 trailer with totals and counts computed from the
parsed file. A mismatch is a finding, never an exception: the parse itself
already succeeded, and the caller decides whether a failed control total
rejects the file.

Architecture: bai2_engines -- pure calculation, zero I/O.

Computed values:
    account  control total = summary amounts + transaction amounts
             record count  = 03, 16s, their 88s and the 49
    group    control total = sum of account control totals
             account count, record count = 02, its 88s, accounts, 98
    file     control total = sum of group control totals
             group count, record count = every physical record
"""

from __future__ import annotations

from collections.abc import Iterable

from bai2_config.schema import ParserConfig
from bai2_kernel.logging_config import get_logger

from bai2_engines.control_types import (
    CheckSeverity,
    ControlCheckResult,
    ControlContext,
    ControlFinding,
)
from bai2_ingestion.domain.types import Account, Group
from bai2_ingestion.parser import scan_lines
from bai2_ingestion.resolver.builder import resolve_file
from bai2_ingestion.resolver.fields import parse_int
from bai2_ingestion.scanner.records import RawRecord
from bai2_ingestion.tracing import traced_stage

logger = get_logger("engines.controls")

# Trailer field positions (after the type code).
_CONTROL_TOTAL = 0
_ACCOUNT_RECORD_COUNT = 1
_CHILD_COUNT = 1
_RECORD_COUNT = 2

# Traced checks fingerprint the context by its counts, not its contents.
_CONTEXT_FINGERPRINT = (
    "context.record_count",
    "context.group_count",
    "context.account_count",
)


def account_control_total(account: Account) -> int:
    """Algebraic sum of every amount on the account; blank amounts count as zero."""
    summaries = sum(a.value for a in account.amounts if a.value is not None)
    return summaries + sum(t.amount for t in account.transactions)


def group_control_total(group: Group) -> int:
    return sum(account_control_total(a) for a in group.accounts)


class ControlTotalChecker:
    """Pure engine for trailer control-total checks.

    Usage:
        checker = ControlTotalChecker()
        result = checker.run_all_checks(lines)
        if not result.is_clean:
            ...
    """

    def _compare(
        self,
        trailer: RawRecord,
        index: int,
        code_prefix: str,
        label: str,
        computed: int,
    ) -> list[ControlFinding]:
        raw = trailer.fields[index] if index < len(trailer.fields) else ""
        details = {
            "record_type": trailer.record_type.value,
            "field": label,
            "raw_value": raw,
            "computed": computed,
        }
        try:
            declared = parse_int(raw)
        except ValueError:
            return [ControlFinding(
                code="TRAILER_FIELD_INVALID",
                severity=CheckSeverity.ERROR,
                message=f"{label} on line {trailer.line_number} is not an integer: {raw!r}",
                line_number=trailer.line_number,
                details=details,
            )]

        if declared is None:
            return [ControlFinding(
                code="TRAILER_FIELD_MISSING",
                severity=CheckSeverity.WARNING,
                message=f"{label} on line {trailer.line_number} is blank",
                line_number=trailer.line_number,
                details=details,
            )]

        if declared != computed:
            return [ControlFinding(
                code=f"{code_prefix}_MISMATCH",
                severity=CheckSeverity.ERROR,
                message=(
                    f"{label} on line {trailer.line_number} declares {declared}, "
                    f"file contains {computed}"
                ),
                line_number=trailer.line_number,
                details={**details, "declared": declared},
            )]
        return []

    @traced_stage("control_totals", "1.0", fingerprint_fields=_CONTEXT_FINGERPRINT)
    def check_account_trailers(self, context: ControlContext) -> tuple[ControlFinding, ...]:
        """Each 49 against its account's amounts and record count."""
        findings: list[ControlFinding] = []
        for node, account in context.accounts():
            trailer = node.trailer
            assert trailer is not None
            findings.extend(self._compare(
                trailer, _CONTROL_TOTAL, "ACCOUNT_CONTROL_TOTAL",
                "account control total", account_control_total(account),
            ))
            findings.extend(self._compare(
                trailer, _ACCOUNT_RECORD_COUNT, "ACCOUNT_RECORD_COUNT",
                "account record count", node.record_count,
            ))
        return tuple(findings)

    @traced_stage("control_totals", "1.0", fingerprint_fields=_CONTEXT_FINGERPRINT)
    def check_group_trailers(self, context: ControlContext) -> tuple[ControlFinding, ...]:
        """Each 98 against its group's accounts."""
        findings: list[ControlFinding] = []
        for node, group in context.groups():
            trailer = node.trailer
            assert trailer is not None
            findings.extend(self._compare(
                trailer, _CONTROL_TOTAL, "GROUP_CONTROL_TOTAL",
                "group control total", group_control_total(group),
            ))
            findings.extend(self._compare(
                trailer, _CHILD_COUNT, "GROUP_ACCOUNT_COUNT",
                "group account count", len(group.accounts),
            ))
            findings.extend(self._compare(
                trailer, _RECORD_COUNT, "GROUP_RECORD_COUNT",
                "group record count", node.record_count,
            ))
        return tuple(findings)

    @traced_stage("control_totals", "1.0", fingerprint_fields=_CONTEXT_FINGERPRINT)
    def check_file_trailer(self, context: ControlContext) -> tuple[ControlFinding, ...]:
        """The 99 against the whole file."""
        trailer = context.root.trailer
        assert trailer is not None
        findings: list[ControlFinding] = []
        findings.extend(self._compare(
            trailer, _CONTROL_TOTAL, "FILE_CONTROL_TOTAL",
            "file control total", sum(group_control_total(g) for g in context.file.groups),
        ))
        findings.extend(self._compare(
            trailer, _CHILD_COUNT, "FILE_GROUP_COUNT",
            "file group count", context.group_count,
        ))
        findings.extend(self._compare(
            trailer, _RECORD_COUNT, "FILE_RECORD_COUNT",
            "file record count", context.root.record_count,
        ))
        return tuple(findings)

    def run_all_checks(
        self,
        lines: Iterable[str],
        config: ParserConfig | None = None,
    ) -> ControlCheckResult:
        """Parse ``lines`` and run every trailer check.

        Raises:
            Bai2Error: the input does not parse; control checks need a
                structurally valid file.
        """
        config = config or ParserConfig()
        root = scan_lines(lines, config)
        context = ControlContext(root=root, file=resolve_file(root, config=config))

        all_findings: list[ControlFinding] = []
        checks: list[str] = []

        all_findings.extend(self.check_account_trailers(context=context))
        checks.append("account_trailers")

        all_findings.extend(self.check_group_trailers(context=context))
        checks.append("group_trailers")

        all_findings.extend(self.check_file_trailer(context=context))
        checks.append("file_trailer")

        result = ControlCheckResult.from_findings(
            findings=tuple(all_findings),
            groups_checked=context.group_count,
            accounts_checked=context.account_count,
            checks_performed=tuple(checks),
        )
        logger.info(
            "bai2_control_check_completed",
            extra={
                "status": result.status,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
            },
        )
        return result
