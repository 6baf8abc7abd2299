"""
bai2_config -- parser configuration.

``ParserConfig()`` gives the BAI2 defaults (USD, 2000s dates, blank lines
skipped). ``load_parser_config(path)`` reads overrides from YAML. The
pipeline never reads files or environment variables itself; callers pass
the config they loaded.
"""

from bai2_config.loader import (
    config_fingerprint,
    load_parser_config,
    load_yaml_file,
    parse_parser_config,
)
from bai2_config.schema import DEFAULT_CENTURY, DEFAULT_CURRENCY, ParserConfig

__all__ = [
    "DEFAULT_CENTURY",
    "DEFAULT_CURRENCY",
    "ParserConfig",
    "config_fingerprint",
    "load_parser_config",
    "load_yaml_file",
    "parse_parser_config",
]
