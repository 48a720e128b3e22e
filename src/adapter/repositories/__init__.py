from .points_account_repository import SqlAlchemyPointsAccountRepository
from .points_transaction_repository import SqlAlchemyPointsTransactionRepository

__all__ = [
    "SqlAlchemyPointsAccountRepository",
    "SqlAlchemyPointsTransactionRepository",
]
