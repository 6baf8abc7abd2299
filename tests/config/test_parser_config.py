"""Parser config schema, YAML loader and validation."""

import pytest
import yaml

from bai2_config import (
    ParserConfig,
    config_fingerprint,
    load_parser_config,
    load_yaml_file,
    parse_parser_config,
)


class TestParserConfigDefaults:
    def test_defaults(self):
        config = ParserConfig()
        assert config.default_currency == "USD"
        assert config.century == 2000
        assert config.skip_blank_lines is True

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ParserConfig().century = 1900


class TestParseParserConfig:
    def test_empty_mapping_gives_defaults(self):
        assert parse_parser_config({}) == ParserConfig()

    def test_top_level_keys(self):
        config = parse_parser_config({"default_currency": "cad", "century": 1900})
        assert config.default_currency == "CAD"
        assert config.century == 1900

    def test_parser_section(self):
        config = parse_parser_config({"parser": {"skip_blank_lines": False}})
        assert config.skip_blank_lines is False

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match="Unknown parser config key"):
            parse_parser_config({"default_currncy": "EUR"})

    @pytest.mark.parametrize("currency", ["US", "EURO", "123", ""])
    def test_bad_currency(self, currency):
        with pytest.raises(ValueError, match="default_currency"):
            parse_parser_config({"default_currency": currency})

    @pytest.mark.parametrize("century", [2021, "2000", True, 20.0])
    def test_bad_century(self, century):
        with pytest.raises(ValueError, match="century"):
            parse_parser_config({"century": century})

    def test_bad_skip_blank_lines(self):
        with pytest.raises(ValueError, match="skip_blank_lines"):
            parse_parser_config({"skip_blank_lines": "yes"})

    def test_section_must_be_mapping(self):
        with pytest.raises(ValueError):
            parse_parser_config({"parser": ["century"]})


class TestLoadParserConfig:
    def test_load_from_yaml(self, tmp_path):
        path = tmp_path / "bai2.yaml"
        path.write_text("parser:\n  default_currency: EUR\n  century: 2000\n")
        assert load_parser_config(path) == ParserConfig(default_currency="EUR")

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_parser_config(path) == ParserConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_parser_config(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("parser: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_parser_config(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            load_yaml_file(path)


class TestConfigFingerprint:
    def test_deterministic(self):
        assert config_fingerprint(ParserConfig()) == config_fingerprint(ParserConfig())

    def test_changes_with_values(self):
        assert config_fingerprint(ParserConfig()) != config_fingerprint(ParserConfig(century=1900))

    def test_sha256_hex(self):
        fp = config_fingerprint(ParserConfig())
        assert len(fp) == 64
        int(fp, 16)
