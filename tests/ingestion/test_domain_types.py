"""Domain type construction, immutability, enum values."""

import dataclasses
from datetime import date, time

import pytest

from bai2_ingestion.domain import (
    Account,
    Amount,
    AsOfDateModifier,
    ClockTime,
    FileRecord,
    Group,
    GroupStatus,
    Transaction,
    resolve_amount_type,
    resolve_funds_type,
    resolve_transaction_type,
)


class TestGroupStatus:
    def test_enum_values(self):
        assert GroupStatus.UPDATE.value == "update"
        assert GroupStatus.DELETION.value == "deletion"
        assert GroupStatus.CORRECTION.value == "correction"
        assert GroupStatus.TEST_ONLY.value == "test_only"
        assert GroupStatus.UNKNOWN.value == "unknown"

    def test_from_string(self):
        assert GroupStatus("correction") == GroupStatus.CORRECTION


class TestAsOfDateModifier:
    def test_enum_values(self):
        assert AsOfDateModifier.INTERIM_PREVIOUS_DAY.value == "interim_previous_day"
        assert AsOfDateModifier.FINAL_SAME_DAY.value == "final_same_day"


class TestClockTime:
    def test_unknown(self):
        assert ClockTime("9999", None).is_unknown

    def test_end_of_day(self):
        t = ClockTime("2400", time.max)
        assert t.is_end_of_day
        assert not t.is_unknown


class TestAccount:
    def _account(self, *amounts: Amount) -> Account:
        return Account(account_number="123", currency_code="USD", amounts=amounts)

    def test_header_properties_from_first_amount(self):
        account = self._account(
            Amount(resolve_amount_type("010"), 500, resolve_funds_type("0"), item_count=3),
            Amount(resolve_amount_type("015"), 700, resolve_funds_type("")),
        )
        assert account.type_code == "010"
        assert account.opening_amount == 500
        assert account.item_count == 3
        assert account.funds_type.code == "0"

    def test_no_amounts(self):
        account = self._account()
        assert account.type_code is None
        assert account.opening_amount is None
        assert account.item_count is None
        assert account.funds_type is None

    def test_immutability(self):
        account = self._account()
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.currency_code = "EUR"


class TestFileRecord:
    def test_flattened_views_in_file_order(self):
        def txn(amount):
            return Transaction(resolve_transaction_type("399"), amount, resolve_funds_type("0"))

        def group(*accounts):
            return Group(
                receiver_id="R",
                sender_id="S",
                status=GroupStatus.UPDATE,
                status_code="1",
                as_of_date=date(2021, 6, 16),
                currency_code="USD",
                accounts=accounts,
            )

        f = FileRecord(
            sender_id="S",
            receiver_id="R",
            creation_date=date(2021, 6, 16),
            file_id="1",
            version_number=2,
            groups=(
                group(Account("1", "USD", transactions=(txn(1), txn(2)))),
                group(Account("2", "USD"), Account("3", "USD", transactions=(txn(3),))),
            ),
        )
        assert [a.account_number for a in f.accounts] == ["1", "2", "3"]
        assert [t.amount for t in f.transactions] == [1, 2, 3]

    def test_equal_values_compare_equal(self):
        kwargs = dict(sender_id="S", receiver_id="R", creation_date=date(2021, 6, 16), file_id="1", version_number=2)
        assert FileRecord(**kwargs) == FileRecord(**kwargs)
