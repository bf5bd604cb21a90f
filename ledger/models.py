from enum import Enum
from fractions import Fraction
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    WithJsonSchema,
    model_validator,
)
from pydantic_core import PydanticCustomError

from .rational import format_rational, parse_rational


def _coerce_amount(value: Any) -> Fraction:
    if isinstance(value, Fraction):
        return value
    # a nested object or array is a malformed record, not a malformed amount
    if isinstance(value, (dict, list, tuple)):
        raise PydanticCustomError("amount_type", "amount must be a number or string")
    return parse_rational(value)


RationalAmount = Annotated[
    Fraction,
    PlainValidator(_coerce_amount),
    PlainSerializer(format_rational, return_type=str),
    WithJsonSchema({
        "anyOf": [
            {"type": "integer"},
            {"type": "string", "pattern": r"^-?(\d+( \d+/\d+)?|\d+/\d+)$"},
        ],
        "examples": [100, "-15", "5/9", "3 1/2"],
    }),
]


class EntryType(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"

    @property
    def sign(self) -> int:
        return 1 if self is EntryType.CREDIT else -1


class LedgerEntry(BaseModel):
    account: str
    amount: RationalAmount
    entry_type: EntryType

    model_config = ConfigDict(frozen=True)

    @property
    def signed_amount(self) -> Fraction:
        return self.amount * self.entry_type.sign


class TransactionDocument(BaseModel):
    """Wire shape of one source record: account name -> amount literal per side."""

    credits: dict[str, RationalAmount] = Field(..., description="Credited accounts")
    debits: dict[str, RationalAmount] = Field(..., description="Debited accounts")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "credits": {"AAA": 100},
            "debits": {"BBB": "100"},
        }
    })


class Transaction(BaseModel):
    entries: tuple[LedgerEntry, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_document(cls, document: TransactionDocument) -> "Transaction":
        credits = [
            LedgerEntry(account=account, amount=amount, entry_type=EntryType.CREDIT)
            for account, amount in document.credits.items()
        ]
        debits = [
            LedgerEntry(account=account, amount=amount, entry_type=EntryType.DEBIT)
            for account, amount in document.debits.items()
        ]
        return cls(entries=tuple(credits + debits))

    @property
    def credits(self) -> list[LedgerEntry]:
        return [e for e in self.entries if e.entry_type == EntryType.CREDIT]

    @property
    def debits(self) -> list[LedgerEntry]:
        return [e for e in self.entries if e.entry_type == EntryType.DEBIT]


class AccountBalance(BaseModel):
    account: str
    balance: RationalAmount

    model_config = ConfigDict(frozen=True)


class BalanceSheet(BaseModel):
    balances: tuple[AccountBalance, ...] = ()

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "balances": [
                {"account": "AAA", "balance": "85/1"},
                {"account": "BBB", "balance": "-85/1"},
            ]
        }
    })

    @model_validator(mode="after")
    def _check_invariants(self) -> "BalanceSheet":
        accounts = [b.account for b in self.balances]
        if accounts != sorted(set(accounts)):
            raise ValueError("balances must be unique and ordered by account")
        zero = [b.account for b in self.balances if b.balance == 0]
        if zero:
            raise ValueError(f"zero balances must be pruned: {zero}")
        return self

    @classmethod
    def from_totals(cls, totals: dict[str, Fraction]) -> "BalanceSheet":
        return cls(balances=tuple(
            AccountBalance(account=account, balance=totals[account])
            for account in sorted(totals)
        ))

    def as_dict(self) -> dict[str, Fraction]:
        return {b.account: b.balance for b in self.balances}

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(indent=indent)
