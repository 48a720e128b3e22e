"""Points Transaction Repository Interface

Defines the contract for the append-only points ledger.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.points_transaction import PointsTransaction


class PointsTransactionRepository(ABC):
    """
    Repository interface for PointsTransaction persistence

    Entries are immutable: there is no update or delete.
    """

    @abstractmethod
    async def create(self, transaction: PointsTransaction) -> PointsTransaction:
        """
        Append a new ledger entry

        Returns:
            Created PointsTransaction with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, transaction_id: int) -> Optional[PointsTransaction]:
        pass

    @abstractmethod
    async def get_by_user_id(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> Tuple[List[PointsTransaction], int]:
        """
        List ledger entries for a user, most recent first

        Returns:
            Tuple of (page of entries, total entry count for the user)
        """
        pass
