import json
from collections.abc import Iterable, Iterator, Mapping
from fractions import Fraction
from typing import Any, Optional

from pydantic import ValidationError

from .logging_setup import get_logger
from .models import BalanceSheet, Transaction, TransactionDocument
from .rational import MalformedLiteral

logger = get_logger(__name__)


class LedgerServiceError(Exception):
    pass


class MalformedDocument(LedgerServiceError):
    def __init__(self, message: str, index: Optional[int] = None, errors: Optional[list] = None):
        self.index = index
        self.errors = errors or []
        if index is not None:
            message = f"record {index}: {message}"
        super().__init__(message)


def flatten_entries(transactions: Iterable[Transaction]) -> Iterator[tuple[str, Fraction]]:
    """Yield (account, signed amount) pairs, credits before debits per transaction."""
    for transaction in transactions:
        for entry in transaction.credits:
            yield entry.account, entry.signed_amount
        for entry in transaction.debits:
            yield entry.account, entry.signed_amount


def fold_balances(pairs: Iterable[tuple[str, Fraction]]) -> dict[str, Fraction]:
    totals: dict[str, Fraction] = {}
    for account, amount in pairs:
        totals[account] = totals.get(account, Fraction(0)) + amount
    return totals


def prune_zero_balances(totals: Mapping[str, Fraction]) -> dict[str, Fraction]:
    return {account: total for account, total in totals.items() if total != 0}


def aggregate(transactions: Iterable[Transaction]) -> BalanceSheet:
    """
    Net every account across the whole run.

    Cancellation is a whole-run property: an account is pruned only when its
    total over all transactions is exactly zero.
    """
    transactions = list(transactions)
    totals = fold_balances(flatten_entries(transactions))
    balances = prune_zero_balances(totals)
    logger.debug(
        "Folded %d transactions into %d accounts, pruned %d at zero",
        len(transactions), len(totals), len(totals) - len(balances),
    )
    return BalanceSheet.from_totals(balances)


def merge_balance_sheets(*sheets: BalanceSheet) -> BalanceSheet:
    """Combine partial sheets computed over disjoint batches of transactions."""
    pairs = ((b.account, b.balance) for sheet in sheets for b in sheet.balances)
    return BalanceSheet.from_totals(prune_zero_balances(fold_balances(pairs)))


def _classify(exc: ValidationError, index: int) -> Exception:
    # Structural errors win: a record with the wrong shape never reaches literal parsing
    literal_errors = []
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        if isinstance(cause, MalformedLiteral):
            literal_errors.append((err, cause))
    if literal_errors and len(literal_errors) == exc.error_count():
        err, cause = literal_errors[0]
        return MalformedLiteral(cause.literal, cause.reason, location=(index, *err["loc"]))
    return MalformedDocument(
        "; ".join(f"{'.'.join(str(p) for p in e['loc']) or '<root>'}: {e['msg']}" for e in exc.errors()),
        index=index,
        errors=exc.errors(include_context=False),
    )


def load_transactions(documents: Iterable[Any]) -> list[Transaction]:
    """
    Validate raw records into Transactions, all or nothing.

    Raises MalformedLiteral for a bad amount and MalformedDocument for a
    record of the wrong shape.
    """
    transactions = []
    for index, document in enumerate(documents):
        try:
            parsed = TransactionDocument.model_validate(document)
        except ValidationError as e:
            raise _classify(e, index) from e
        transactions.append(Transaction.from_document(parsed))
    logger.debug("Loaded %d transactions", len(transactions))
    return transactions


def _decode_json_lines(text: str) -> list[Any]:
    records = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except ValueError as e:
            reason = e.msg if isinstance(e, json.JSONDecodeError) else str(e)
            raise MalformedDocument(f"invalid JSON on line {lineno}: {reason}") from e
    return records


def load_transactions_json(text: str) -> list[Transaction]:
    """Accept a JSON array of records, a single record, or one record per line."""
    if not text.strip():
        return []
    try:
        payload = json.loads(text)
    except ValueError:
        payload = _decode_json_lines(text)

    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        raise MalformedDocument(f"expected a list of transactions, got {type(payload).__name__}")
    return load_transactions(payload)


class LedgerService:
    def balance_documents(self, documents: Iterable[Any]) -> BalanceSheet:
        return aggregate(load_transactions(documents))

    def balance_json(self, text: str) -> BalanceSheet:
        return aggregate(load_transactions_json(text))

    def merge(self, *sheets: BalanceSheet) -> BalanceSheet:
        return merge_balance_sheets(*sheets)
