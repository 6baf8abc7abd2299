"""
bai2_ingestion.domain.funds_type -- Funds availability type codes.

The funds type field follows an amount on 03 and 16 records and says when
the amount becomes usable. Some codes pull extra positional fields:

    V  value date (YYMMDD) and value time (HHMM)
    S  three amounts: immediate, one day, two or more days
    D  a count n, then n (days, amount) pairs

Architecture: bai2_ingestion/domain. ZERO I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FundsCategory(str, Enum):
    """Availability class of an amount."""

    IMMEDIATE_AVAILABILITY = "immediate_availability"
    ONE_DAY_AVAILABILITY = "one_day_availability"
    TWO_OR_MORE_DAYS_AVAILABILITY = "two_or_more_days_availability"
    VALUE_DATED = "value_dated"
    DISTRIBUTED_AVAILABILITY = "distributed_availability"
    UNCLASSIFIED = "unclassified"  # Blank, Z (unknown) or bank-specific


_FUNDS_CODES: dict[str, FundsCategory] = {
    "0": FundsCategory.IMMEDIATE_AVAILABILITY,
    "1": FundsCategory.ONE_DAY_AVAILABILITY,
    "2": FundsCategory.TWO_OR_MORE_DAYS_AVAILABILITY,
    "V": FundsCategory.VALUE_DATED,
    "S": FundsCategory.DISTRIBUTED_AVAILABILITY,
    "D": FundsCategory.DISTRIBUTED_AVAILABILITY,
}

SIMPLE_DISTRIBUTION = "S"
DETAILED_DISTRIBUTION = "D"


@dataclass(frozen=True)
class FundsType:
    """Resolved funds type; ``code`` is the code as written."""

    code: str
    category: FundsCategory

    @property
    def is_value_dated(self) -> bool:
        return self.category == FundsCategory.VALUE_DATED

    @property
    def is_distributed(self) -> bool:
        return self.category == FundsCategory.DISTRIBUTED_AVAILABILITY


def resolve_funds_type(code: str) -> FundsType:
    """Resolve a funds type code. Never raises."""
    normalized = code.strip().upper()
    category = _FUNDS_CODES.get(normalized, FundsCategory.UNCLASSIFIED)
    return FundsType(code=code, category=category)
