"""Record resolution: positional layouts, funds extras, text assembly."""

from datetime import date, time

import pytest

from bai2_kernel.exceptions import FieldParseError

from bai2_ingestion import parse_lines
from bai2_ingestion.domain import (
    AmountCategory,
    AsOfDateModifier,
    Availability,
    FundsCategory,
    GroupStatus,
    TransactionDirection,
)
from tests.samples import build_file, build_group, single_account


def _only_account(lines):
    return parse_lines(lines).groups[0].accounts[0]


def _only_transaction(detail: str, *continuations: str):
    account = _only_account(single_account("03,123,,/", detail, *continuations))
    return account.transactions[0]


class TestFileHeader:
    def test_sample_header(self, sample_lines):
        f = parse_lines(sample_lines)
        assert f.sender_id == "SENDR1"
        assert f.receiver_id == "RECVR1"
        assert f.creation_date == date(2021, 6, 16)
        assert f.creation_time.value == time(17, 0)
        assert f.file_id == "01"
        assert f.physical_record_length == 80
        assert f.block_size == 10
        assert f.version_number == 2

    def test_optional_header_fields_blank(self):
        f = parse_lines(build_file(header="01,S,R,210616,,7,,,2/"))
        assert f.creation_time is None
        assert f.physical_record_length is None
        assert f.block_size is None

    def test_missing_version(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(build_file(header="01,S,R,210616,1200,7,,/"))
        assert exc_info.value.field_name == "version_number"
        assert exc_info.value.record_type == "01"
        assert exc_info.value.line_number == 1

    def test_bad_creation_date(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(build_file(header="01,S,R,211332,1200,7,,,2/"))
        assert exc_info.value.field_name == "creation_date"
        assert exc_info.value.raw_value == "211332"

    def test_header_continued_on_88(self):
        lines = ["01,S,R,210616,1200,7/", "88,80,,2/", "99,0,0,2/"]
        f = parse_lines(lines)
        assert f.physical_record_length == 80
        assert f.version_number == 2


class TestGroupHeader:
    def test_sample_group(self, sample_lines):
        g = parse_lines(sample_lines).groups[0]
        assert g.receiver_id == "RECVR1"
        assert g.sender_id == "SENDR1"
        assert g.status == GroupStatus.UPDATE
        assert g.status_code == "1"
        assert g.as_of_date == date(2021, 6, 16)
        assert g.as_of_time.code == "1700"
        assert g.currency_code == "GBP"
        assert g.currency_code_raw == "GBP"
        assert g.as_of_date_modifier == AsOfDateModifier.FINAL_PREVIOUS_DAY
        assert g.as_of_date_modifier_code == "2"

    def test_unknown_status_kept(self):
        g = parse_lines(build_file(*build_group(header="02,R,S,7,210616,,,/"))).groups[0]
        assert g.status == GroupStatus.UNKNOWN
        assert g.status_code == "7"

    def test_blank_modifier(self):
        g = parse_lines(build_file(*build_group(header="02,R,S,1,210616/"))).groups[0]
        assert g.as_of_date_modifier is None
        assert g.as_of_date_modifier_code == ""
        assert g.as_of_time is None

    def test_unknown_as_of_time(self):
        g = parse_lines(build_file(*build_group(header="02,R,S,1,210616,9999,,/"))).groups[0]
        assert g.as_of_time.is_unknown

    def test_bad_currency(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(build_file(*build_group(header="02,R,S,1,210616,,DOLLARS,/")))
        assert exc_info.value.field_name == "currency_code"
        assert exc_info.value.line_number == 2

    def test_missing_as_of_date(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(build_file(*build_group(header="02,R,S,1,,,,/")))
        assert exc_info.value.field_name == "as_of_date"


class TestAccountSummaries:
    def test_sample_account(self, sample_lines):
        account = parse_lines(sample_lines).groups[0].accounts[0]
        assert account.account_number == "0975312468"
        assert account.type_code == "010"
        assert account.opening_amount == 500000
        assert account.item_count is None
        assert account.funds_type.category == FundsCategory.UNCLASSIFIED
        assert len(account.amounts) == 1

    def test_repeating_summaries_across_continuations(self):
        account = _only_account(single_account(
            "03,123,USD,010,500,,,015,600,,/",
            "88,100,250,3,0,400,150,2,1/",
        ))
        assert [a.amount_type.code for a in account.amounts] == ["010", "015", "100", "400"]
        assert [a.value for a in account.amounts] == [500, 600, 250, 150]
        assert account.amounts[2].item_count == 3
        assert account.amounts[2].amount_type.category == AmountCategory.CREDIT_SUMMARY
        assert account.amounts[3].funds_type.category == FundsCategory.ONE_DAY_AVAILABILITY

    def test_blank_amount_is_absent(self):
        account = _only_account(single_account("03,123,USD,010,,,/"))
        assert account.amounts[0].value is None

    def test_no_summaries(self):
        account = _only_account(single_account("03,123,USD/"))
        assert account.amounts == ()
        assert account.type_code is None
        assert account.opening_amount is None
        assert account.funds_type is None

    def test_value_dated_summary(self):
        account = _only_account(single_account("03,123,USD,010,500,,V,210617,0800,015,1,,/"))
        first, second = account.amounts
        assert first.funds_type.is_value_dated
        assert first.value_date == date(2021, 6, 17)
        assert first.value_time.value == time(8, 0)
        assert second.amount_type.code == "015"

    def test_simple_distribution_summary(self):
        account = _only_account(single_account("03,123,USD,100,600,2,S,100,200,300/"))
        assert account.amounts[0].availability == (
            Availability(0, 100),
            Availability(1, 200),
            Availability(2, 300),
        )

    def test_detailed_distribution_summary(self):
        account = _only_account(single_account("03,123,USD,100,600,2,D,2,1,400,5,200,015,9,,/"))
        first, second = account.amounts
        assert first.availability == (Availability(1, 400), Availability(5, 200))
        assert second.amount_type.code == "015"

    def test_unknown_amount_code_kept(self):
        account = _only_account(single_account("03,123,USD,888,5,,/"))
        assert account.amounts[0].amount_type.is_unclassified
        assert account.amounts[0].amount_type.code == "888"

    def test_non_numeric_amount(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(single_account("03,123,USD,010,12.50,,/"))
        assert exc_info.value.field_name == "amount"
        assert exc_info.value.line_number == 3

    def test_bad_amount_in_continuation_reports_88_line(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(single_account("03,123,USD,010,500,,/", "88,015,abc,,/"))
        assert exc_info.value.line_number == 4

    def test_values_after_blank_type_code(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(single_account("03,123,USD,,500,,/"))
        assert exc_info.value.field_name == "amount_type_code"

    def test_missing_account_number(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(single_account("03,,USD/"))
        assert exc_info.value.field_name == "account_number"


class TestTransactionDetail:
    def test_sample_transaction(self, sample_lines):
        txn = parse_lines(sample_lines).transactions[0]
        assert txn.transaction_type.code == "399"
        assert txn.transaction_type.direction == TransactionDirection.CREDIT
        assert txn.amount == 10000
        assert txn.funds_type.category == FundsCategory.IMMEDIATE_AVAILABILITY
        assert txn.bank_reference == "BANKREF1"
        assert txn.customer_reference == "CUSTREF1"
        assert txn.text == ("INVOICE 1234", "PAID IN FULL")

    def test_text_keeps_commas(self):
        txn = _only_transaction("16,475,100,0,BR,CR,CHECK 1, 2 AND 3/")
        assert txn.text == ("CHECK 1, 2 AND 3",)

    def test_two_continuations_give_three_entries(self):
        txn = _only_transaction(
            "16,399,100,0,BR,CR,FIRST",
            "88,SECOND, WITH COMMA",
            "88,THIRD/",
        )
        assert txn.text == ("FIRST", "SECOND, WITH COMMA", "THIRD")

    def test_continuation_without_detail_text(self):
        txn = _only_transaction("16,399,100,0,BR,CR", "88,ONLY CONTINUATION/")
        assert txn.text == ("ONLY CONTINUATION",)

    def test_empty_detail_text_position_kept(self):
        txn = _only_transaction("16,399,100,0,BR,CR,/", "88,MORE/")
        assert txn.text == ("", "MORE")

    def test_minimal_detail(self):
        txn = _only_transaction("16,399,100/")
        assert txn.bank_reference == ""
        assert txn.customer_reference == ""
        assert txn.text == ()
        assert txn.funds_type.code == ""

    def test_value_dated(self):
        txn = _only_transaction("16,195,100,V,210618,2400,BR,CR,WIRE/")
        assert txn.value_date == date(2021, 6, 18)
        assert txn.value_time.is_end_of_day
        assert txn.bank_reference == "BR"
        assert txn.text == ("WIRE",)

    def test_simple_distribution(self):
        txn = _only_transaction("16,108,600,S,100,200,300,BR,CR,DEP/")
        assert txn.availability == (
            Availability(0, 100),
            Availability(1, 200),
            Availability(2, 300),
        )
        assert txn.bank_reference == "BR"

    def test_detailed_distribution(self):
        txn = _only_transaction("16,108,600,D,2,0,150,3,450,BR,CR,DEP/")
        assert txn.availability == (Availability(0, 150), Availability(3, 450))
        assert txn.customer_reference == "CR"
        assert txn.text == ("DEP",)

    def test_detailed_distribution_short(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(single_account("03,123,,/", "16,108,600,D,2,0,150/"))
        assert exc_info.value.field_name == "availability_days"

    def test_negative_amount(self):
        assert _only_transaction("16,699,-250,0/").amount == -250

    def test_amount_required(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_lines(single_account("03,123,,/", "16,399,,0,BR/"))
        assert exc_info.value.field_name == "amount"
        assert exc_info.value.record_type == "16"
        assert exc_info.value.line_number == 4

    def test_unknown_transaction_code_kept(self):
        txn = _only_transaction("16,899,100,Z,BR,CR/")
        assert txn.transaction_type.is_unclassified
        assert txn.transaction_type.code == "899"
        assert txn.funds_type.category == FundsCategory.UNCLASSIFIED
        assert txn.funds_type.code == "Z"
