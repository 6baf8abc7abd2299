"""Hierarchy builder: nesting rules and the shape of the record tree."""

import pytest

from bai2_kernel.exceptions import UnexpectedRecordOrderError

from bai2_ingestion.parser import scan_lines
from bai2_ingestion.scanner.records import RecordType
from tests.samples import build_file, build_group


class TestTreeShape:
    def test_sample_tree(self, sample_lines):
        root = scan_lines(sample_lines)
        assert root.record_type == RecordType.FILE_HEADER
        assert root.trailer.record_type == RecordType.FILE_TRAILER
        (group,) = root.children
        assert group.record_type == RecordType.GROUP_HEADER
        assert group.trailer.line_number == 7
        (account,) = group.children
        assert account.record_type == RecordType.ACCOUNT_IDENTIFIER
        assert account.trailer.fields == ("510000", "4")
        (detail,) = account.children
        assert detail.record_type == RecordType.TRANSACTION_DETAIL
        assert detail.trailer is None

    def test_record_counts(self, sample_lines):
        root = scan_lines(sample_lines)
        group = root.children[0]
        account = group.children[0]
        assert account.record_count == 4
        assert group.record_count == 6
        assert root.record_count == 8

    def test_multiple_groups_and_accounts(self):
        lines = build_file(
            *build_group("03,1,,/", "49,0,1/", "03,2,,/", "49,0,1/"),
            *build_group("03,3,,/", "49,0,1/"),
        )
        root = scan_lines(lines)
        assert [len(g.children) for g in root.children] == [2, 1]

    def test_empty_group_allowed(self):
        root = scan_lines(build_file(*build_group()))
        assert root.children[0].children == ()


class TestOrderingRules:
    def _reject(self, lines) -> UnexpectedRecordOrderError:
        with pytest.raises(UnexpectedRecordOrderError) as exc_info:
            scan_lines(lines)
        return exc_info.value

    def test_detail_before_account(self):
        err = self._reject(build_file(*build_group("16,399,100,0/")))
        assert err.record_type == "16"
        assert err.line_number == 3
        assert err.context == "file>group"
        assert err.code == "UNEXPECTED_RECORD_ORDER"

    def test_first_record_must_be_file_header(self):
        err = self._reject(["02,B,A,1,210616/", "98,0,0,2/"])
        assert err.record_type == "02"
        assert err.line_number == 1

    def test_second_file_header(self):
        err = self._reject(["01,A,B,210616,,1,,,2/", "01,A,B,210616,,1,,,2/"])
        assert err.line_number == 2

    def test_record_after_file_trailer(self):
        err = self._reject(build_file() + ["01,A,B,210616,,1,,,2/"])
        assert err.line_number == 3
        assert "after file trailer" in err.reason

    def test_account_without_group(self):
        err = self._reject(build_file("03,1,,/", "49,0,2/"))
        assert err.record_type == "03"
        assert err.context == "file"

    def test_account_while_account_open(self):
        err = self._reject(build_file(*build_group("03,1,,/", "03,2,,/")))
        assert err.line_number == 4
        assert err.context == "file>group>account"

    def test_group_while_group_open(self):
        err = self._reject(build_file("02,B,A,1,210616/", "02,B,A,1,210616/"))
        assert err.line_number == 3

    def test_group_trailer_with_open_account(self):
        err = self._reject(build_file("02,B,A,1,210616/", "03,1,,/", "98,0,1,3/"))
        assert err.record_type == "98"
        assert err.context == "file>group>account"

    def test_account_trailer_without_account(self):
        err = self._reject(build_file(*build_group("49,0,2/")))
        assert err.record_type == "49"

    def test_group_trailer_without_group(self):
        err = self._reject(build_file("98,0,0,2/"))
        assert err.record_type == "98"

    def test_file_trailer_with_open_group(self):
        err = self._reject(["01,A,B,210616,,1,,,2/", "02,B,A,1,210616/", "99,0,1,3/"])
        assert err.record_type == "99"
        assert err.context == "file>group"

    def test_missing_file_trailer(self):
        err = self._reject(["01,A,B,210616,,1,,,2/", *build_group()])
        assert err.record_type == "EOF"
        assert err.line_number == 3
        assert err.context == "file"
