from typing import Any

from fastapi import Body, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from .models import BalanceSheet
from .rational import MalformedLiteral
from .service import LedgerService, MalformedDocument

app = FastAPI(
    title="Ledger Balances API",
    description="Exact-rational per-account balances for double-entry transactions",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ledger_service = LedgerService()


@app.get("/health", tags=["System"])
def health_check():
    return {"status": "healthy", "service": "ledger-balances"}


@app.post("/balances", response_model=BalanceSheet, tags=["Balances"])
def compute_balances(
    transactions: list[Any] = Body(
        ...,
        examples=[[
            {"credits": {"AAA": 100}, "debits": {"BBB": 100}},
            {"credits": {"BBB": "15"}, "debits": {"AAA": "15"}},
        ]],
    ),
) -> BalanceSheet:
    try:
        return ledger_service.balance_documents(transactions)
    except MalformedLiteral as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except MalformedDocument as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
