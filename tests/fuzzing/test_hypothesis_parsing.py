"""
Hypothesis property tests for BAI2 parsing.

Properties fuzzed here:
- Code tables are total: any string resolves, never raises, keeps the code
- Text assembly: detail text then each continuation, in file order
- Idempotence: parsing the same generated file twice gives equal results
- Shape parsers: valid integers/dates round to the same values; anything
  else raises ValueError rather than an unexpected exception
"""

from datetime import date

from hypothesis import given, settings
from hypothesis import strategies as st

from bai2_kernel.exceptions import Bai2Error

from bai2_ingestion import parse_lines
from bai2_ingestion.domain.amount_codes import resolve_amount_type
from bai2_ingestion.domain.funds_type import resolve_funds_type
from bai2_ingestion.domain.transaction_codes import resolve_transaction_type
from bai2_ingestion.resolver.fields import parse_date, parse_int
from tests.samples import single_account

# Free text that survives a BAI2 line: no record terminator at the edges,
# no line breaks, no surrounding blanks.
_TEXT_CHARS = st.characters(
    whitelist_categories=("Lu", "Ll", "Nd"),
    whitelist_characters=" ,.-#&",
)
_text = st.text(_TEXT_CHARS, min_size=1, max_size=40).map(str.strip).filter(bool)


class TestCodeTablesTotal:
    @given(st.text(max_size=5))
    def test_transaction_type_total(self, code):
        assert resolve_transaction_type(code).code == code

    @given(st.text(max_size=5))
    def test_amount_type_total(self, code):
        assert resolve_amount_type(code).code == code

    @given(st.text(max_size=3))
    def test_funds_type_total(self, code):
        assert resolve_funds_type(code).code == code


class TestTextAssembly:
    @given(detail=_text, continuations=st.lists(_text, max_size=5))
    @settings(max_examples=50)
    def test_order_preserved(self, detail, continuations):
        lines = single_account(
            "03,123,,/",
            f"16,399,100,0,BR,CR,{detail}",
            *[f"88,{text}" for text in continuations],
        )
        txn = parse_lines(lines).transactions[0]
        assert txn.text == (detail, *continuations)


class TestIdempotence:
    @given(
        amounts=st.lists(st.integers(min_value=-10**12, max_value=10**12), min_size=1, max_size=5),
        currency=st.sampled_from(["", "USD", "EUR", "gbp"]),
    )
    @settings(max_examples=50)
    def test_parse_twice_equal(self, amounts, currency):
        details = [f"16,399,{amount},0,BR{i},,TEXT {i}/" for i, amount in enumerate(amounts)]
        lines = single_account(f"03,123,{currency},010,0,,/", *details)
        first = parse_lines(lines)
        assert parse_lines(lines) == first
        assert [t.amount for t in first.transactions] == amounts


class TestShapeParsers:
    @given(st.integers(min_value=-10**15, max_value=10**15))
    def test_int_round_trip(self, n):
        assert parse_int(str(n)) == n

    @given(st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 31)))
    def test_date_round_trip(self, d):
        assert parse_date(d.strftime("%y%m%d"), 2000) == d

    @given(st.text(max_size=8))
    def test_int_rejects_cleanly(self, raw):
        try:
            parse_int(raw)
        except ValueError:
            pass

    @given(st.lists(st.text(max_size=20), max_size=10))
    @settings(max_examples=100)
    def test_parse_never_crashes(self, lines):
        """Arbitrary input either parses or raises a Bai2Error."""
        try:
            parse_lines(lines)
        except Bai2Error:
            pass
