"""
Configuration Loader (``bai2_config.loader``).

Responsibility
--------------
Loads a YAML file and parses it into a frozen ``ParserConfig``.

Accepted shapes::

    default_currency: CAD
    century: 2000
    skip_blank_lines: true

or the same keys nested under a ``parser:`` section, so the options can
live in a larger application config file.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown keys, wrong types, bad currency or century  -> ``ValueError``.
"""

from __future__ import annotations

import hashlib
import json
import re
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any

import yaml

from bai2_config.schema import ParserConfig

_CURRENCY_RE = re.compile(r"^[A-Z]{3}$")
_KNOWN_KEYS = frozenset(f.name for f in fields(ParserConfig))


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level of {path}, got {type(data).__name__}")
    return data


def parse_parser_config(data: dict[str, Any]) -> ParserConfig:
    """
    Parse a ``ParserConfig`` from a dict.

    Missing keys take the schema defaults. The currency code is upper-cased
    before validation.

    Raises:
        ValueError: on unknown keys or invalid values.
    """
    section = data.get("parser", data)
    if not isinstance(section, dict):
        raise ValueError("'parser' section must be a mapping")

    unknown = set(section) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown parser config key(s): {sorted(unknown)}")

    kwargs: dict[str, Any] = {}

    if "default_currency" in section:
        currency = str(section["default_currency"]).strip().upper()
        if not _CURRENCY_RE.match(currency):
            raise ValueError(
                f"default_currency must be a 3-letter code, got {section['default_currency']!r}"
            )
        kwargs["default_currency"] = currency

    if "century" in section:
        century = section["century"]
        if isinstance(century, bool) or not isinstance(century, int) or century % 100 != 0:
            raise ValueError(f"century must be an integer multiple of 100, got {century!r}")
        kwargs["century"] = century

    if "skip_blank_lines" in section:
        skip = section["skip_blank_lines"]
        if not isinstance(skip, bool):
            raise ValueError(f"skip_blank_lines must be a boolean, got {skip!r}")
        kwargs["skip_blank_lines"] = skip

    return ParserConfig(**kwargs)


def load_parser_config(path: Path) -> ParserConfig:
    """Load and validate a parser config from a YAML file."""
    return parse_parser_config(load_yaml_file(path))


def config_fingerprint(config: ParserConfig) -> str:
    """Deterministic SHA-256 of the config, for tagging parse logs."""
    canonical = json.dumps(asdict(config), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
