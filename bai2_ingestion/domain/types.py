"""
bai2_ingestion.domain.types -- Frozen dataclasses for a parsed BAI2 file.

ZERO I/O. The tree is strictly owned top-down:

    FileRecord -> Group -> Account -> Amount / Transaction -> Availability

No entity references its parent, and every ordered sequence is a tuple so
a parsed file cannot be mutated after construction. Trailer control totals
are not carried; counts and sums come from the sequences themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from enum import Enum

from bai2_ingestion.domain.amount_codes import AmountType
from bai2_ingestion.domain.funds_type import FundsType
from bai2_ingestion.domain.transaction_codes import TransactionType


# =============================================================================
# Coded header values
# =============================================================================


class GroupStatus(str, Enum):
    """Group status from the 02 record."""

    UPDATE = "update"  # 1
    DELETION = "deletion"  # 2
    CORRECTION = "correction"  # 3
    TEST_ONLY = "test_only"  # 4
    UNKNOWN = "unknown"


class AsOfDateModifier(str, Enum):
    """Qualifies the group as-of date (interim / final, previous / same day)."""

    INTERIM_PREVIOUS_DAY = "interim_previous_day"  # 1
    FINAL_PREVIOUS_DAY = "final_previous_day"  # 2
    INTERIM_SAME_DAY = "interim_same_day"  # 3
    FINAL_SAME_DAY = "final_same_day"  # 4


GROUP_STATUS_CODES: dict[str, GroupStatus] = {
    "1": GroupStatus.UPDATE,
    "2": GroupStatus.DELETION,
    "3": GroupStatus.CORRECTION,
    "4": GroupStatus.TEST_ONLY,
}

AS_OF_DATE_MODIFIER_CODES: dict[str, AsOfDateModifier] = {
    "1": AsOfDateModifier.INTERIM_PREVIOUS_DAY,
    "2": AsOfDateModifier.FINAL_PREVIOUS_DAY,
    "3": AsOfDateModifier.INTERIM_SAME_DAY,
    "4": AsOfDateModifier.FINAL_SAME_DAY,
}


@dataclass(frozen=True)
class ClockTime:
    """A BAI2 HHMM time.

    ``9999`` means the time was not stated (value is None); ``2400`` means
    end of day and maps to ``time.max``.
    """

    code: str
    value: time | None

    @property
    def is_unknown(self) -> bool:
        return self.value is None

    @property
    def is_end_of_day(self) -> bool:
        return self.code == "2400"


# =============================================================================
# Amounts and transactions
# =============================================================================


@dataclass(frozen=True)
class Availability:
    """Portion of an amount that becomes available after ``days`` days."""

    days: int
    amount: int


@dataclass(frozen=True)
class Amount:
    """One status or summary amount from an account identifier record."""

    amount_type: AmountType
    value: int | None  # Minor units; None when the field is blank
    funds_type: FundsType
    item_count: int | None = None
    availability: tuple[Availability, ...] = ()
    value_date: date | None = None
    value_time: ClockTime | None = None


@dataclass(frozen=True)
class Transaction:
    """A 16 record plus the text of its continuations."""

    transaction_type: TransactionType
    amount: int  # Minor units
    funds_type: FundsType
    bank_reference: str = ""
    customer_reference: str = ""
    text: tuple[str, ...] = ()  # Detail text first, then each 88 in file order
    availability: tuple[Availability, ...] = ()
    value_date: date | None = None
    value_time: ClockTime | None = None


# =============================================================================
# Containers
# =============================================================================


@dataclass(frozen=True)
class Account:
    """An 03 record with its summaries and transactions.

    ``currency_code`` is None only between field resolution and the
    currency default pass; a parsed file always carries a 3-letter code.
    """

    account_number: str
    currency_code: str | None
    currency_code_raw: str = ""
    amounts: tuple[Amount, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def _first_amount(self) -> Amount | None:
        return self.amounts[0] if self.amounts else None

    @property
    def type_code(self) -> str | None:
        first = self._first_amount()
        return first.amount_type.code if first else None

    @property
    def opening_amount(self) -> int | None:
        first = self._first_amount()
        return first.value if first else None

    @property
    def item_count(self) -> int | None:
        first = self._first_amount()
        return first.item_count if first else None

    @property
    def funds_type(self) -> FundsType | None:
        first = self._first_amount()
        return first.funds_type if first else None


@dataclass(frozen=True)
class Group:
    """An 02 record and the accounts it encloses."""

    receiver_id: str
    sender_id: str
    status: GroupStatus
    status_code: str
    as_of_date: date
    currency_code: str | None
    currency_code_raw: str = ""
    as_of_time: ClockTime | None = None
    as_of_date_modifier: AsOfDateModifier | None = None
    as_of_date_modifier_code: str = ""
    accounts: tuple[Account, ...] = ()


@dataclass(frozen=True)
class FileRecord:
    """Root of a parsed BAI2 file."""

    sender_id: str
    receiver_id: str
    creation_date: date
    file_id: str
    version_number: int
    creation_time: ClockTime | None = None
    physical_record_length: int | None = None
    block_size: int | None = None
    groups: tuple[Group, ...] = ()

    @property
    def accounts(self) -> tuple[Account, ...]:
        """All accounts in file order."""
        return tuple(a for g in self.groups for a in g.accounts)

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """All transactions in file order."""
        return tuple(t for a in self.accounts for t in a.transactions)
