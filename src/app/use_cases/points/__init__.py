"""Points ledger use cases"""
from .verify_balance import VerifyBalance
from .debit_points import DebitPoints
from .get_balance import GetBalance
from .list_transactions import ListTransactions
from .dtos import (
    VerifyBalanceCommandDTO,
    DebitCommandDTO,
    BalanceCheckResponseDTO,
    DebitResponseDTO,
    BalanceResponseDTO,
    TransactionDTO,
    ListTransactionsResponseDTO,
)

__all__ = [
    "VerifyBalance",
    "DebitPoints",
    "GetBalance",
    "ListTransactions",
    "VerifyBalanceCommandDTO",
    "DebitCommandDTO",
    "BalanceCheckResponseDTO",
    "DebitResponseDTO",
    "BalanceResponseDTO",
    "TransactionDTO",
    "ListTransactionsResponseDTO",
]
