"""Transaction, amount and funds type code tables."""

import pytest

from bai2_ingestion.domain.amount_codes import (
    AmountCategory,
    AmountSubtype,
    known_amount_codes,
    resolve_amount_type,
)
from bai2_ingestion.domain.funds_type import FundsCategory, resolve_funds_type
from bai2_ingestion.domain.transaction_codes import (
    TransactionCategory,
    TransactionDirection,
    known_transaction_codes,
    resolve_transaction_type,
)


class TestTransactionCodes:
    def test_known_credit(self):
        tt = resolve_transaction_type("399")
        assert tt.code == "399"
        assert tt.direction == TransactionDirection.CREDIT
        assert tt.category == TransactionCategory.MISCELLANEOUS_CREDIT

    def test_known_debit(self):
        tt = resolve_transaction_type("475")
        assert tt.direction == TransactionDirection.DEBIT
        assert tt.category == TransactionCategory.CHECK_PAID

    def test_informational(self):
        tt = resolve_transaction_type("890")
        assert tt.category == TransactionCategory.INFO
        assert tt.direction == TransactionDirection.UNCLASSIFIED

    @pytest.mark.parametrize("code,direction", [
        ("920", TransactionDirection.CREDIT),
        ("959", TransactionDirection.CREDIT),
        ("960", TransactionDirection.DEBIT),
        ("999", TransactionDirection.DEBIT),
    ])
    def test_custom_ranges(self, code, direction):
        tt = resolve_transaction_type(code)
        assert tt.is_custom
        assert tt.direction == direction
        assert tt.code == code

    @pytest.mark.parametrize("code", ["899", "001", "ABC", "", "99999"])
    def test_unknown_code_preserved(self, code):
        tt = resolve_transaction_type(code)
        assert tt.is_unclassified
        assert tt.direction == TransactionDirection.UNCLASSIFIED
        assert tt.code == code

    def test_table_is_large(self):
        assert len(known_transaction_codes()) > 200
        assert "890" in known_transaction_codes()


class TestAmountCodes:
    def test_opening_ledger(self):
        at = resolve_amount_type("010")
        assert at.category == AmountCategory.STATUS
        assert at.subtype == AmountSubtype.OPENING_LEDGER

    def test_credit_summary(self):
        assert resolve_amount_type("100").category == AmountCategory.CREDIT_SUMMARY

    def test_debit_summary(self):
        assert resolve_amount_type("400").category == AmountCategory.DEBIT_SUMMARY

    @pytest.mark.parametrize("code,category,subtype", [
        ("905", AmountCategory.STATUS, AmountSubtype.CUSTOM_STATUS),
        ("925", AmountCategory.CREDIT_SUMMARY, AmountSubtype.CUSTOM_CREDIT_SUMMARY),
        ("975", AmountCategory.DEBIT_SUMMARY, AmountSubtype.CUSTOM_DEBIT_SUMMARY),
    ])
    def test_custom_ranges(self, code, category, subtype):
        at = resolve_amount_type(code)
        assert at.category == category
        assert at.subtype == subtype

    def test_unknown(self):
        at = resolve_amount_type("888")
        assert at.is_unclassified
        assert at.subtype == AmountSubtype.UNCLASSIFIED
        assert at.code == "888"

    def test_table_is_large(self):
        assert len(known_amount_codes()) > 200


class TestFundsTypes:
    @pytest.mark.parametrize("code,category", [
        ("0", FundsCategory.IMMEDIATE_AVAILABILITY),
        ("1", FundsCategory.ONE_DAY_AVAILABILITY),
        ("2", FundsCategory.TWO_OR_MORE_DAYS_AVAILABILITY),
        ("V", FundsCategory.VALUE_DATED),
        ("S", FundsCategory.DISTRIBUTED_AVAILABILITY),
        ("D", FundsCategory.DISTRIBUTED_AVAILABILITY),
        ("Z", FundsCategory.UNCLASSIFIED),
        ("", FundsCategory.UNCLASSIFIED),
        ("Q", FundsCategory.UNCLASSIFIED),
    ])
    def test_categories(self, code, category):
        ft = resolve_funds_type(code)
        assert ft.category == category
        assert ft.code == code

    def test_lower_case_accepted(self):
        assert resolve_funds_type("v").is_value_dated

    def test_distributed_flags(self):
        assert resolve_funds_type("S").is_distributed
        assert resolve_funds_type("D").is_distributed
        assert not resolve_funds_type("V").is_distributed
