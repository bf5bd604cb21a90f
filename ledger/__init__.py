"""
Exact-Rational Ledger Balances

This module provides:
- A parser for integer, fraction and mixed-number amount literals
- A canonical "numerator/denominator" serializer
- Credit/debit entries folded into per-account net balances
- Pruning of accounts that net to exactly zero
"""

from .models import (
    EntryType,
    LedgerEntry,
    Transaction,
    TransactionDocument,
    AccountBalance,
    BalanceSheet,
)
from .rational import MalformedLiteral, parse_rational, format_rational
from .service import (
    LedgerService,
    LedgerServiceError,
    MalformedDocument,
    aggregate,
    load_transactions,
    load_transactions_json,
    merge_balance_sheets,
)

__all__ = [
    "EntryType",
    "LedgerEntry",
    "Transaction",
    "TransactionDocument",
    "AccountBalance",
    "BalanceSheet",
    "MalformedLiteral",
    "parse_rational",
    "format_rational",
    "LedgerService",
    "LedgerServiceError",
    "MalformedDocument",
    "aggregate",
    "load_transactions",
    "load_transactions_json",
    "merge_balance_sheets",
]
