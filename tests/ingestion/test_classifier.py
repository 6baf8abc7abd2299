"""Line classifier: record type detection, terminator handling, line numbering."""

import pytest

from bai2_config.schema import ParserConfig
from bai2_kernel.exceptions import EmptyInputError, UnknownRecordTypeError

from bai2_ingestion.scanner.classifier import classify_line, classify_lines
from bai2_ingestion.scanner.records import RecordType


class TestClassifyLine:
    def test_all_record_types(self):
        for code, expected in [
            ("01", RecordType.FILE_HEADER),
            ("02", RecordType.GROUP_HEADER),
            ("03", RecordType.ACCOUNT_IDENTIFIER),
            ("16", RecordType.TRANSACTION_DETAIL),
            ("88", RecordType.CONTINUATION),
            ("49", RecordType.ACCOUNT_TRAILER),
            ("98", RecordType.GROUP_TRAILER),
            ("99", RecordType.FILE_TRAILER),
        ]:
            assert classify_line(f"{code},x/", 1).record_type == expected

    def test_fields_exclude_type_code(self):
        record = classify_line("49,510000,4/", 6)
        assert record.fields == ("510000", "4")
        assert record.line_number == 6

    def test_terminator_optional(self):
        assert classify_line("49,510000,4", 1).fields == ("510000", "4")

    def test_only_one_terminator_stripped(self):
        record = classify_line("88,SEE A/B//", 1)
        assert record.fields == ("SEE A/B/",)

    def test_slash_inside_text_kept(self):
        assert classify_line("88,REF 12/34 OK/", 1).fields == ("REF 12/34 OK",)

    def test_line_endings_and_trailing_blanks_removed(self):
        assert classify_line("99,0,1,2/  \r\n", 1).fields == ("0", "1", "2")

    def test_unterminated_text_loses_trailing_blanks(self):
        assert classify_line("88,PAID IN FULL   \n", 1).fields == ("PAID IN FULL",)

    def test_blanks_before_terminator_kept(self):
        assert classify_line("88,PAID IN FULL  /", 1).fields == ("PAID IN FULL  ",)

    def test_empty_fields_preserved(self):
        record = classify_line("03,123,,010,,,/", 1)
        assert record.fields == ("123", "", "010", "", "", "")

    def test_record_with_no_fields(self):
        record = classify_line("88/", 1)
        assert record.record_type == RecordType.CONTINUATION
        assert record.fields == ()

    def test_unknown_record_type(self):
        with pytest.raises(UnknownRecordTypeError) as exc_info:
            classify_line("17,foo,bar/", 12)
        assert exc_info.value.record_type == "17"
        assert exc_info.value.line_number == 12
        assert exc_info.value.code == "UNKNOWN_RECORD_TYPE"

    def test_garbage_line(self):
        with pytest.raises(UnknownRecordTypeError):
            classify_line("hello world", 1)


class TestClassifyLines:
    def test_numbers_from_one(self, sample_lines):
        records = list(classify_lines(sample_lines))
        assert [r.line_number for r in records] == list(range(1, 9))

    def test_blank_lines_skipped_but_counted(self):
        lines = ["01,A,B,210616,,1,,,2/", "", "   ", "99,0,0,1/"]
        records = list(classify_lines(lines))
        assert [r.line_number for r in records] == [1, 4]

    def test_blank_line_rejected_when_not_skipping(self):
        lines = ["01,A,B,210616,,1,,,2/", ""]
        with pytest.raises(UnknownRecordTypeError) as exc_info:
            list(classify_lines(lines, ParserConfig(skip_blank_lines=False)))
        assert exc_info.value.line_number == 2

    def test_empty_input(self):
        with pytest.raises(EmptyInputError) as exc_info:
            list(classify_lines([]))
        assert exc_info.value.code == "EMPTY_INPUT"

    def test_only_blank_lines(self):
        with pytest.raises(EmptyInputError) as exc_info:
            list(classify_lines(["", "\n", "  "]))
        assert exc_info.value.line_count == 3

    def test_lazy(self):
        """Nothing past the bad line is read."""

        def lines():
            yield "01,A,B,210616,,1,,,2/"
            yield "XX,bad/"
            raise AssertionError("read past the first error")

        with pytest.raises(UnknownRecordTypeError):
            list(classify_lines(lines()))
