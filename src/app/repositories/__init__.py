from .points_account_repository import PointsAccountRepository
from .points_transaction_repository import PointsTransactionRepository

__all__ = [
    "PointsAccountRepository",
    "PointsTransactionRepository",
]
