from .base import BaseModel
from .errors import PointsStoreError, AccountNotFoundError, InsufficientPointsError
from .points_account import PointsAccount
from .points_transaction import PointsTransaction, TransactionType

__all__ = [
    "BaseModel",
    "PointsStoreError",
    "AccountNotFoundError",
    "InsufficientPointsError",
    "PointsAccount",
    "PointsTransaction",
    "TransactionType",
]
