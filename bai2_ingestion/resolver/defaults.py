"""
Currency default inheritance.

Runs after field resolution, top-down, and returns a new tree:

    Group.currency_code   = raw if given, else the configured default
    Account.currency_code = raw if given, else the owning Group's code

No other field inherits across entities.
"""

from __future__ import annotations

from dataclasses import replace

from bai2_ingestion.domain.types import Account, FileRecord, Group
from bai2_ingestion.tracing import traced_stage


def _default_account(account: Account, group_currency: str) -> Account:
    if account.currency_code:
        return account
    return replace(account, currency_code=group_currency)


def _default_group(group: Group, default_currency: str) -> Group:
    currency = group.currency_code or default_currency
    return replace(
        group,
        currency_code=currency,
        accounts=tuple(_default_account(a, currency) for a in group.accounts),
    )


@traced_stage("currency_defaults", "1.0", fingerprint_fields=("default_currency",))
def apply_currency_defaults(file: FileRecord, *, default_currency: str) -> FileRecord:
    """Fill every blank Group and Account currency code."""
    return replace(
        file,
        groups=tuple(_default_group(g, default_currency) for g in file.groups),
    )
