"""SQLAlchemy implementation of PointsAccountRepository

The decrement is a single conditional UPDATE, so the database serialises
concurrent debits of the same account and the balance can never go below
zero.
"""

from typing import Optional
from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.points_account_repository import PointsAccountRepository
from src.domain.base import utcnow
from src.domain.errors import AccountNotFoundError, InsufficientPointsError
from src.domain.points_account import PointsAccount


class SqlAlchemyPointsAccountRepository(PointsAccountRepository):
    """
    SQLAlchemy implementation of PointsAccountRepository

    Features:
    - Atomic conditional decrement (UPDATE ... WHERE points >= amount)
    - NULL balances read as 0
    - No commit here: the unit of work owns the transaction
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: str) -> Optional[PointsAccount]:
        stmt = (
            select(PointsAccount)
            .where(PointsAccount.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_points(self, user_id: str) -> int:
        """
        Read the stored balance directly from the database

        Selects the column rather than the entity so a cached instance in
        the session never hides a newer value.
        """
        row = await self._select_points(user_id)
        if row is None:
            raise AccountNotFoundError(user_id)
        return row[0] or 0

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
        current = func.coalesce(PointsAccount.points, 0)
        stmt = (
            update(PointsAccount)
            .where(PointsAccount.user_id == user_id)
            .where(current >= amount)
            .values(points=current - amount, updated_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)

        row = await self._select_points(user_id)
        if result.rowcount == 0:
            if row is None:
                raise AccountNotFoundError(user_id)
            raise InsufficientPointsError(user_id, required=amount, available=row[0] or 0)

        return row[0] or 0

    async def create(self, account: PointsAccount) -> PointsAccount:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def _select_points(self, user_id: str):
        stmt = select(PointsAccount.points).where(PointsAccount.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.first()
