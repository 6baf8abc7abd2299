"""
bai2_ingestion.resolver -- Phase two: record tree to typed model.

    resolve_file -> apply_currency_defaults
"""

from bai2_ingestion.resolver.builder import (
    resolve_account,
    resolve_file,
    resolve_group,
    resolve_transaction,
)
from bai2_ingestion.resolver.defaults import apply_currency_defaults
from bai2_ingestion.resolver.fields import (
    FieldReader,
    parse_currency,
    parse_date,
    parse_int,
    parse_time,
)

__all__ = [
    "FieldReader",
    "apply_currency_defaults",
    "parse_currency",
    "parse_date",
    "parse_int",
    "parse_time",
    "resolve_account",
    "resolve_file",
    "resolve_group",
    "resolve_transaction",
]
