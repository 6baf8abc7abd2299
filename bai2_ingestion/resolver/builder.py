"""
Record resolution: ``RecordNode`` tree to typed ``FileRecord``.

Positional layouts (index 0 is the first field after the type code):

    01  sender, receiver, creation date, creation time, file id,
        physical record length, block size, version number
    02  ultimate receiver, originator, group status, as-of date,
        as-of time, currency, as-of-date modifier
    03  account number, currency, then repeating summaries of
        type code, amount, item count, funds type, funds extras
    16  type code, amount, funds type, funds extras, bank reference,
        customer reference, text (rest of the line)

Continuation fields are appended to 01/02/03 records. Each continuation of
a 16 is one more text entry.

Coded fields are resolved through the domain code tables, which never
fail. Only malformed shapes raise ``FieldParseError``. Currency defaults
are NOT applied here; blank currencies stay None until
``apply_currency_defaults`` runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from bai2_config.schema import ParserConfig
from bai2_kernel.logging_config import get_logger

from bai2_ingestion.domain.amount_codes import resolve_amount_type
from bai2_ingestion.domain.funds_type import (
    DETAILED_DISTRIBUTION,
    SIMPLE_DISTRIBUTION,
    FundsCategory,
    FundsType,
    resolve_funds_type,
)
from bai2_ingestion.domain.transaction_codes import resolve_transaction_type
from bai2_ingestion.domain.types import (
    AS_OF_DATE_MODIFIER_CODES,
    GROUP_STATUS_CODES,
    Account,
    Amount,
    Availability,
    ClockTime,
    FileRecord,
    Group,
    GroupStatus,
    Transaction,
)
from bai2_ingestion.resolver.fields import FieldReader
from bai2_ingestion.scanner.records import FoldedRecord, RecordNode
from bai2_ingestion.tracing import traced_stage

logger = get_logger("ingestion.resolver")


@dataclass(frozen=True)
class _FundsFields:
    """A funds type and whatever extra fields it pulled in."""

    funds_type: FundsType
    availability: tuple[Availability, ...] = ()
    value_date: date | None = None
    value_time: ClockTime | None = None


def _read_funds(
    reader: FieldReader,
    index: int,
    config: ParserConfig,
) -> tuple[_FundsFields, int]:
    """Read a funds type at ``index`` and its extras. Returns the next index."""
    funds_type = resolve_funds_type(reader.text(index))
    code = funds_type.code.strip().upper()
    index += 1

    if funds_type.is_value_dated:
        value_date = reader.date(index, "value_date", config.century)
        value_time = reader.time(index + 1, "value_time")
        return _FundsFields(funds_type, value_date=value_date, value_time=value_time), index + 2

    if code == SIMPLE_DISTRIBUTION:
        availability = tuple(
            Availability(days=days, amount=reader.required_integer(index + days, "availability_amount"))
            for days in range(3)
        )
        return _FundsFields(funds_type, availability=availability), index + 3

    if code == DETAILED_DISTRIBUTION:
        count = reader.required_integer(index, "availability_count")
        if count < 0:
            raise reader.error(index, "availability_count", "non-negative integer")
        index += 1
        pairs = []
        for _ in range(count):
            days = reader.required_integer(index, "availability_days")
            amount = reader.required_integer(index + 1, "availability_amount")
            pairs.append(Availability(days=days, amount=amount))
            index += 2
        return _FundsFields(funds_type, availability=tuple(pairs)), index

    if funds_type.category == FundsCategory.UNCLASSIFIED and code:
        logger.debug(
            "bai2_unclassified_code",
            extra={"code_kind": "funds_type", "code": funds_type.code,
                   "line_number": reader.line_number(index - 1)},
        )
    return _FundsFields(funds_type), index


# -----------------------------------------------------------------------------
# Per-record resolution
# -----------------------------------------------------------------------------


def _resolve_amounts(reader: FieldReader, start: int, config: ParserConfig) -> tuple[Amount, ...]:
    amounts: list[Amount] = []
    index = start
    while index < len(reader):
        type_code = reader.text(index)
        if not type_code:
            if any(reader.text(i) for i in range(index, len(reader))):
                raise reader.error(index, "amount_type_code", "a value")
            break

        amount_type = resolve_amount_type(type_code)
        if amount_type.is_unclassified:
            logger.debug(
                "bai2_unclassified_code",
                extra={"code_kind": "amount_type", "code": type_code,
                       "line_number": reader.line_number(index)},
            )
        value = reader.integer(index + 1, "amount")
        item_count = reader.integer(index + 2, "item_count")
        funds, index = _read_funds(reader, index + 3, config)
        amounts.append(
            Amount(
                amount_type=amount_type,
                value=value,
                funds_type=funds.funds_type,
                item_count=item_count,
                availability=funds.availability,
                value_date=funds.value_date,
                value_time=funds.value_time,
            )
        )
    return tuple(amounts)


def resolve_transaction(folded: FoldedRecord, config: ParserConfig) -> Transaction:
    """Resolve a 16 record and its continuation text."""
    reader = FieldReader.from_folded(folded, include_continuations=False)

    type_code = reader.required_text(0, "transaction_type_code")
    transaction_type = resolve_transaction_type(type_code)
    if transaction_type.is_unclassified:
        logger.debug(
            "bai2_unclassified_code",
            extra={"code_kind": "transaction_type", "code": type_code,
                   "line_number": folded.line_number},
        )
    amount = reader.required_integer(1, "amount")
    funds, index = _read_funds(reader, 2, config)

    bank_reference = reader.text(index)
    customer_reference = reader.text(index + 1)
    text_index = index + 2

    text: list[str] = []
    if len(reader) > text_index:
        text.append(",".join(reader.fields[text_index:]).strip())
    for cont in folded.continuations:
        text.append(",".join(cont.fields).strip())

    return Transaction(
        transaction_type=transaction_type,
        amount=amount,
        funds_type=funds.funds_type,
        bank_reference=bank_reference,
        customer_reference=customer_reference,
        text=tuple(text),
        availability=funds.availability,
        value_date=funds.value_date,
        value_time=funds.value_time,
    )


def resolve_account(node: RecordNode, config: ParserConfig) -> Account:
    """Resolve an 03 node, its summaries and its transactions."""
    reader = FieldReader.from_folded(node.folded)
    currency_raw = reader.text(1)
    return Account(
        account_number=reader.required_text(0, "account_number"),
        currency_code=reader.currency(1, "currency_code"),
        currency_code_raw=currency_raw,
        amounts=_resolve_amounts(reader, 2, config),
        transactions=tuple(resolve_transaction(child.folded, config) for child in node.children),
    )


def resolve_group(node: RecordNode, config: ParserConfig) -> Group:
    """Resolve an 02 node and its accounts."""
    reader = FieldReader.from_folded(node.folded)
    status_code = reader.text(2)
    modifier_code = reader.text(6)
    return Group(
        receiver_id=reader.text(0),
        sender_id=reader.text(1),
        status=GROUP_STATUS_CODES.get(status_code, GroupStatus.UNKNOWN),
        status_code=status_code,
        as_of_date=reader.date(3, "as_of_date", config.century),
        as_of_time=reader.time(4, "as_of_time"),
        currency_code=reader.currency(5, "currency_code"),
        currency_code_raw=reader.text(5),
        as_of_date_modifier=AS_OF_DATE_MODIFIER_CODES.get(modifier_code),
        as_of_date_modifier_code=modifier_code,
        accounts=tuple(resolve_account(child, config) for child in node.children),
    )


@traced_stage("resolve", "1.0", fingerprint_fields=("config",))
def resolve_file(root: RecordNode, *, config: ParserConfig) -> FileRecord:
    """Resolve the whole scan tree into a ``FileRecord``.

    Raises:
        FieldParseError: the first field, in file order, with a bad shape.
    """
    reader = FieldReader.from_folded(root.folded)
    return FileRecord(
        sender_id=reader.text(0),
        receiver_id=reader.text(1),
        creation_date=reader.date(2, "creation_date", config.century),
        creation_time=reader.time(3, "creation_time"),
        file_id=reader.text(4),
        physical_record_length=reader.integer(5, "physical_record_length"),
        block_size=reader.integer(6, "block_size"),
        version_number=reader.required_integer(7, "version_number"),
        groups=tuple(resolve_group(child, config) for child in root.children),
    )
