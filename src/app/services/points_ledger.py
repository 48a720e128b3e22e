"""PointsLedger

Boolean facade over the points use cases for in-process callers (request
handlers, service-request workflows). Neither method raises.
"""

import logging
from typing import Optional
from pydantic import ValidationError
from src.app.repositories.points_account_repository import PointsAccountRepository
from src.app.repositories.points_transaction_repository import PointsTransactionRepository
from src.app.services.notification_service import NotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.points.debit_points import DebitPoints
from src.app.use_cases.points.verify_balance import VerifyBalance
from src.app.use_cases.points.dtos import DebitCommandDTO, VerifyBalanceCommandDTO

logger = logging.getLogger(__name__)


class PointsLedger:
    """
    Verify-and-debit entry point for Spark Points

    verify_balance is advisory; debit is the authoritative check because the
    store applies the decrement as one conditional update. There is no
    locking, retry or timeout here. Wrap calls in asyncio.wait_for when a
    bounded latency is needed.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        account_repo: PointsAccountRepository,
        transaction_repo: PointsTransactionRepository,
        notification_service: Optional[NotificationService] = None,
    ):
        self.uow = uow
        self.account_repo = account_repo
        self.transaction_repo = transaction_repo
        self.notification_service = notification_service

    async def verify_balance(self, user_id: str, required_points: int) -> bool:
        """
        Return True iff the user holds at least required_points

        Missing accounts and read errors return False.
        """
        try:
            command = VerifyBalanceCommandDTO(user_id=user_id, required_points=required_points)
        except ValidationError as e:
            logger.error(f"Error verifying user balance: invalid input: {e}")
            return False

        result = await VerifyBalance(self.account_repo).execute(command)
        if result.is_err():
            return False
        return result.value.sufficient

    async def debit(self, user_id: str, amount: int, description: str) -> bool:
        """
        Remove amount points and record one spend entry

        Returns False on any failure, after notifying the user.
        """
        try:
            command = DebitCommandDTO(user_id=user_id, amount=amount, description=description)
        except ValidationError as e:
            logger.error(f"Error deducting points: invalid input: {e}")
            await self._notify(user_id, "Failed to process payment: invalid debit request")
            return False

        use_case = DebitPoints(
            uow=self.uow,
            account_repo=self.account_repo,
            transaction_repo=self.transaction_repo,
            notification_service=self.notification_service,
        )
        result = await use_case.execute(command)
        return result.is_ok()

    async def _notify(self, user_id: str, message: str) -> None:
        if self.notification_service is None:
            return
        try:
            await self.notification_service.notify_failure(user_id, message)
        except Exception as e:
            logger.error(f"Failure notification for user {user_id} not sent: {e}")
