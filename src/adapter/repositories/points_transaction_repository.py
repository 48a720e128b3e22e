"""SQLAlchemy implementation of PointsTransactionRepository

Append-only persistence for the points ledger.
"""

from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.points_transaction_repository import PointsTransactionRepository
from src.domain.points_transaction import PointsTransaction


class SqlAlchemyPointsTransactionRepository(PointsTransactionRepository):
    """
    SQLAlchemy implementation of PointsTransactionRepository

    Features:
    - Immutable append-only entries
    - Newest-first paginated history
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, transaction: PointsTransaction) -> PointsTransaction:
        """
        Append a ledger entry

        Flushes so the ID is available; committing is left to the unit of
        work so the entry lands together with the balance change.
        """
        self.session.add(transaction)
        await self.session.flush()
        await self.session.refresh(transaction)
        return transaction

    async def get_by_id(self, transaction_id: int) -> Optional[PointsTransaction]:
        stmt = select(PointsTransaction).where(PointsTransaction.id == transaction_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> Tuple[List[PointsTransaction], int]:
        count_stmt = (
            select(func.count())
            .select_from(PointsTransaction)
            .where(PointsTransaction.user_id == user_id)
        )
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(PointsTransaction)
            .where(PointsTransaction.user_id == user_id)
            .order_by(PointsTransaction.created_at.desc(), PointsTransaction.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all()), total
