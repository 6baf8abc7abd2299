"""Currency default inheritance: Group from config, Account from Group."""

from datetime import date

from bai2_config.schema import ParserConfig

from bai2_ingestion import parse_lines
from bai2_ingestion.domain.types import Account, FileRecord, Group, GroupStatus
from bai2_ingestion.resolver.defaults import apply_currency_defaults
from tests.samples import build_file, build_group


def _group(currency: str | None, *accounts: Account) -> Group:
    return Group(
        receiver_id="R",
        sender_id="S",
        status=GroupStatus.UPDATE,
        status_code="1",
        as_of_date=date(2021, 6, 16),
        currency_code=currency,
        currency_code_raw=currency or "",
        accounts=accounts,
    )


def _file(*groups: Group) -> FileRecord:
    return FileRecord(
        sender_id="S",
        receiver_id="R",
        creation_date=date(2021, 6, 16),
        file_id="1",
        version_number=2,
        groups=groups,
    )


class TestApplyCurrencyDefaults:
    def test_account_inherits_group_currency(self):
        f = _file(_group("EUR", Account(account_number="1", currency_code=None)))
        result = apply_currency_defaults(f, default_currency="USD")
        assert result.groups[0].accounts[0].currency_code == "EUR"
        assert result.groups[0].accounts[0].currency_code_raw == ""

    def test_group_falls_back_to_default(self):
        f = _file(_group(None, Account(account_number="1", currency_code=None)))
        result = apply_currency_defaults(f, default_currency="USD")
        assert result.groups[0].currency_code == "USD"
        assert result.groups[0].accounts[0].currency_code == "USD"

    def test_explicit_account_currency_kept(self):
        f = _file(_group("EUR", Account(account_number="1", currency_code="CHF", currency_code_raw="CHF")))
        result = apply_currency_defaults(f, default_currency="USD")
        assert result.groups[0].accounts[0].currency_code == "CHF"

    def test_input_not_mutated(self):
        f = _file(_group(None, Account(account_number="1", currency_code=None)))
        apply_currency_defaults(f, default_currency="USD")
        assert f.groups[0].currency_code is None
        assert f.groups[0].accounts[0].currency_code is None

    def test_groups_independent(self):
        f = _file(
            _group("EUR", Account(account_number="1", currency_code=None)),
            _group(None, Account(account_number="2", currency_code=None)),
        )
        result = apply_currency_defaults(f, default_currency="JPY")
        assert [a.currency_code for a in result.accounts] == ["EUR", "JPY"]


class TestCurrencyDefaultsThroughParse:
    def test_sample_account_takes_group_currency(self, sample_lines):
        group = parse_lines(sample_lines).groups[0]
        assert group.currency_code == "GBP"
        assert group.accounts[0].currency_code == "GBP"
        assert group.accounts[0].currency_code_raw == ""

    def test_blank_group_currency_uses_standard_default(self):
        lines = build_file(*build_group("03,1,,/", "49,0,2/", header="02,R,S,1,210616,,,/"))
        group = parse_lines(lines).groups[0]
        assert group.currency_code == "USD"
        assert group.currency_code_raw == ""
        assert group.accounts[0].currency_code == "USD"

    def test_configured_default(self):
        lines = build_file(*build_group("03,1,,/", "49,0,2/", header="02,R,S,1,210616,,,/"))
        group = parse_lines(lines, config=ParserConfig(default_currency="CAD")).groups[0]
        assert group.currency_code == "CAD"
        assert group.accounts[0].currency_code == "CAD"

    def test_eur_group(self):
        lines = build_file(*build_group("03,1,,/", "49,0,2/", header="02,R,S,1,210616,,EUR,/"))
        assert parse_lines(lines).accounts[0].currency_code == "EUR"

    def test_lower_case_currency_normalized(self):
        lines = build_file(*build_group("03,1,chf,/", "49,0,2/"))
        account = parse_lines(lines).accounts[0]
        assert account.currency_code == "CHF"
        assert account.currency_code_raw == "chf"
