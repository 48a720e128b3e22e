"""VerifyBalance Use Case

Checks that a user holds at least the points a spend requires.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.points_account_repository import PointsAccountRepository
from src.domain.errors import AccountNotFoundError
from .dtos import VerifyBalanceCommandDTO, BalanceCheckResponseDTO

logger = logging.getLogger(__name__)


class VerifyBalance:
    """
    Use Case: Verify a user can afford a spend

    Read-only. The answer is advisory: the debit re-checks the balance
    atomically in the store, so a stale answer can never overdraw.
    """

    def __init__(self, account_repo: PointsAccountRepository):
        self.account_repo = account_repo

    async def execute(self, command: VerifyBalanceCommandDTO) -> Result[BalanceCheckResponseDTO]:
        try:
            balance = await self.account_repo.get_points(command.user_id)
        except AccountNotFoundError as e:
            logger.error(f"Error verifying user balance: {e}")
            return Return.err(
                Error(
                    code="ACCOUNT_NOT_FOUND",
                    message=str(e),
                )
            )
        except Exception as e:
            logger.error(f"Error verifying user balance for {command.user_id}: {e}")
            return Return.err(
                Error(
                    code="VERIFY_BALANCE_FAILED",
                    message="Failed to read points balance",
                    reason=str(e),
                )
            )

        return Return.ok(
            BalanceCheckResponseDTO(
                user_id=command.user_id,
                balance=balance,
                required_points=command.required_points,
                sufficient=balance >= command.required_points,
            )
        )
