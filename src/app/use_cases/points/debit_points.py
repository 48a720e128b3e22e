"""DebitPoints Use Case

Removes points from a user's balance and appends the matching ledger
entry inside a single unit of work.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.notification_service import NotificationService
from src.app.repositories.points_account_repository import PointsAccountRepository
from src.app.repositories.points_transaction_repository import PointsTransactionRepository
from src.domain.errors import AccountNotFoundError, InsufficientPointsError
from src.domain.points_transaction import PointsTransaction, TransactionType
from .dtos import DebitCommandDTO, DebitResponseDTO

logger = logging.getLogger(__name__)


class DebitPoints:
    """
    Use Case: Debit points from a user balance

    Business Rules:
    1. The decrement is one atomic conditional update in the store
       (balance never goes negative, concurrent debits cannot overdraw)
    2. Exactly one SPEND entry with amount = -amount per successful debit
    3. Decrement and ledger entry commit together or not at all
    4. No retries: every failure is final for the call

    Flow:
    1. Decrement balance (store rejects unknown user / insufficient points)
    2. Append ledger entry
    3. Commit
    4. On any failure: rollback, notify the user, return error
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

    async def execute(self, command: DebitCommandDTO) -> Result[DebitResponseDTO]:
        """
        Execute points debit

        Args:
            command: DebitCommandDTO with user_id, amount, description

        Returns:
            Result[DebitResponseDTO]: Ledger entry and new balance, or error
        """
        # Step 1: Decrement
        try:
            balance_after = await self.account_repo.decrement_points(
                command.user_id, command.amount
            )
        except AccountNotFoundError as e:
            return await self._fail(Error(code="ACCOUNT_NOT_FOUND", message=str(e)), command)
        except InsufficientPointsError as e:
            return await self._fail(
                Error(
                    code="INSUFFICIENT_POINTS",
                    message=str(e),
                    reason=f"balance={e.available}, required={e.required}",
                ),
                command,
            )
        except Exception as e:
            return await self._fail(
                Error(code="DEBIT_POINTS_FAILED", message="Failed to deduct points", reason=str(e)),
                command,
            )

        # Step 2: Ledger entry, Step 3: Commit
        try:
            transaction = await self.transaction_repo.create(
                PointsTransaction(
                    user_id=command.user_id,
                    amount=-command.amount,
                    description=command.description,
                    transaction_type=TransactionType.SPEND,
                )
            )
            await self.uow.commit()
        except Exception as e:
            # Rolls back the decrement as well
            return await self._fail(
                Error(
                    code="DEBIT_POINTS_FAILED",
                    message="Failed to record points transaction",
                    reason=str(e),
                ),
                command,
            )

        logger.info(
            f"Debited {command.amount} points from user {command.user_id} "
            f"({command.description}), balance_after={balance_after}"
        )

        return Return.ok(
            DebitResponseDTO(
                transaction_id=transaction.id,
                user_id=transaction.user_id,
                amount=transaction.amount,
                description=transaction.description,
                transaction_type=TransactionType(transaction.transaction_type).value,
                balance_after=balance_after,
                created_at=transaction.created_at,
            )
        )

    async def _fail(self, error: Error, command: DebitCommandDTO) -> Result[DebitResponseDTO]:
        try:
            await self.uow.rollback()
        except Exception as e:
            logger.error(f"Rollback after failed debit for user {command.user_id} failed: {e}")

        logger.error(
            f"Error deducting points for user {command.user_id} "
            f"(amount={command.amount}): {error.code} {error.message}"
            + (f" [{error.reason}]" if error.reason else "")
        )

        if self.notification_service is not None:
            try:
                await self.notification_service.notify_failure(
                    command.user_id, f"Failed to process payment: {error.message}"
                )
            except Exception as e:
                logger.error(f"Failure notification for user {command.user_id} not sent: {e}")

        return Return.err(error)
