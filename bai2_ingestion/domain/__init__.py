"""
bai2_ingestion.domain -- Pure types and code tables for parsed BAI2 files.

ZERO I/O. Imports nothing outside bai2_ingestion.domain.
"""

from bai2_ingestion.domain.amount_codes import (
    AmountCategory,
    AmountSubtype,
    AmountType,
    resolve_amount_type,
)
from bai2_ingestion.domain.funds_type import FundsCategory, FundsType, resolve_funds_type
from bai2_ingestion.domain.transaction_codes import (
    TransactionCategory,
    TransactionDirection,
    TransactionType,
    resolve_transaction_type,
)
from bai2_ingestion.domain.types import (
    Account,
    Amount,
    AsOfDateModifier,
    Availability,
    ClockTime,
    FileRecord,
    Group,
    GroupStatus,
    Transaction,
)

__all__ = [
    "Account",
    "Amount",
    "AmountCategory",
    "AmountSubtype",
    "AmountType",
    "AsOfDateModifier",
    "Availability",
    "ClockTime",
    "FileRecord",
    "FundsCategory",
    "FundsType",
    "Group",
    "GroupStatus",
    "Transaction",
    "TransactionCategory",
    "TransactionDirection",
    "TransactionType",
    "resolve_amount_type",
    "resolve_funds_type",
    "resolve_transaction_type",
]
