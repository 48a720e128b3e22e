"""Get Balance Use Case

Retrieves a user's current Spark Points balance.
"""

from libs.result import Result, Return, Error
from src.app.repositories.points_account_repository import PointsAccountRepository
from src.app.use_cases.points.dtos import BalanceResponseDTO


class GetBalance:
    """
    Get Balance Use Case

    Read-only operation that retrieves the current balance and the time
    it last changed.
    """

    def __init__(self, account_repo: PointsAccountRepository):
        self.account_repo = account_repo

    async def execute(self, user_id: str) -> Result[BalanceResponseDTO]:
        """
        Execute get balance operation

        Args:
            user_id: The user identity

        Returns:
            Result[BalanceResponseDTO]: Success with balance data or error

        Errors:
            ACCOUNT_NOT_FOUND: User has no points account
        """
        account = await self.account_repo.get_by_user_id(user_id)

        if not account:
            return Return.err(
                Error(
                    code="ACCOUNT_NOT_FOUND",
                    message=f"No points account found for user {user_id}",
                )
            )

        return Return.ok(
            BalanceResponseDTO(
                user_id=account.user_id,
                balance=account.points or 0,
                last_updated=account.updated_at,
            )
        )
