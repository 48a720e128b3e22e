"""
List Transactions Use Case

Retrieves the points ledger history for a user with pagination.
"""
from libs.result import Result, Return
from src.app.repositories.points_transaction_repository import PointsTransactionRepository
from .dtos import ListTransactionsResponseDTO, TransactionDTO


class ListTransactions:
    """
    Use case: View points history

    Entries are ordered by created_at DESC (most recent first).
    """

    def __init__(self, transaction_repo: PointsTransactionRepository):
        self.transaction_repo = transaction_repo

    async def execute(
        self, user_id: str, limit: int = 20, offset: int = 0
    ) -> Result[ListTransactionsResponseDTO]:
        transactions, total = await self.transaction_repo.get_by_user_id(
            user_id=user_id,
            limit=limit,
            offset=offset,
        )

        transaction_dtos = [
            TransactionDTO(
                id=txn.id,
                amount=txn.amount,
                description=txn.description,
                transaction_type=txn.transaction_type.value if hasattr(txn.transaction_type, "value") else txn.transaction_type,
                created_at=txn.created_at,
            )
            for txn in transactions
        ]

        return Return.ok(
            ListTransactionsResponseDTO(
                user_id=user_id,
                transactions=transaction_dtos,
                total=total,
                limit=limit,
                offset=offset,
            )
        )
