"""
Parser configuration schema.

``ParserConfig`` is the only knob set the parsing pipeline reads. YAML
files are parsed into it by ``bai2_config.loader``; callers that do not
load a file get the defaults below, which follow the BAI2 conventions.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CURRENCY = "USD"
DEFAULT_CENTURY = 2000


@dataclass(frozen=True)
class ParserConfig:
    """Options for one parse.

    default_currency: currency for groups whose 02 record leaves it blank.
    century: added to the two-digit year of every YYMMDD date.
    skip_blank_lines: drop empty lines before classification; when False a
        blank line is rejected as an unknown record type.
    """

    default_currency: str = DEFAULT_CURRENCY
    century: int = DEFAULT_CENTURY
    skip_blank_lines: bool = True
