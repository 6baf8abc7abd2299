"""
bai2_engines -- Pure checks over parsed BAI2 files.

Nothing here is run by the parser. Callers that want trailer control
totals verified invoke ``ControlTotalChecker`` themselves.
"""

from bai2_engines.control_types import (
    CheckSeverity,
    CheckStatus,
    ControlCheckResult,
    ControlContext,
    ControlFinding,
)
from bai2_engines.controls import (
    ControlTotalChecker,
    account_control_total,
    group_control_total,
)

__all__ = [
    "CheckSeverity",
    "CheckStatus",
    "ControlCheckResult",
    "ControlContext",
    "ControlFinding",
    "ControlTotalChecker",
    "account_control_total",
    "group_control_total",
]
