"""Points Account Repository Interface

Defines the contract for the account store: balance reads and the
atomic decrement primitive.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.points_account import PointsAccount


class PointsAccountRepository(ABC):
    """
    Repository interface for PointsAccount persistence

    decrement_points must be a single atomic conditional update in the
    store. Callers perform no locking of their own.
    """

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[PointsAccount]:
        """
        Retrieve account by user ID

        Returns:
            PointsAccount if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_points(self, user_id: str) -> int:
        """
        Read the current balance

        A NULL balance is returned as 0.

        Raises:
            AccountNotFoundError: No account exists for the user
        """
        pass

    @abstractmethod
    async def decrement_points(self, user_id: str, amount: int) -> int:
        """
        Atomically reduce the balance by amount

        Args:
            user_id: User identity
            amount: Positive number of points to remove

        Returns:
            Balance after the decrement

        Raises:
            AccountNotFoundError: No account exists for the user
            InsufficientPointsError: Balance is lower than amount
        """
        pass

    @abstractmethod
    async def create(self, account: PointsAccount) -> PointsAccount:
        pass
