"""Points API Routes

FastAPI routes for Spark Points balance checks and debits.
"""

from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.points_request import DebitRequestSchema, VerifyRequestSchema
from src.app.services.notification_service import NotificationService
from src.app.use_cases.points.dtos import (
    BalanceCheckResponseDTO,
    BalanceResponseDTO,
    DebitCommandDTO,
    DebitResponseDTO,
    ListTransactionsResponseDTO,
    VerifyBalanceCommandDTO,
)
from src.app.use_cases.points.debit_points import DebitPoints
from src.app.use_cases.points.get_balance import GetBalance
from src.app.use_cases.points.list_transactions import ListTransactions
from src.app.use_cases.points.verify_balance import VerifyBalance
from src.adapter.repositories.points_account_repository import SqlAlchemyPointsAccountRepository
from src.adapter.repositories.points_transaction_repository import SqlAlchemyPointsTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_notification_service, get_session
from src.api.error import ClientError

router = APIRouter(prefix="/points", tags=["Points"])

ERROR_STATUS = {
    "ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INSUFFICIENT_POINTS": status.HTTP_402_PAYMENT_REQUIRED,
}


def _raise_for(result):
    raise ClientError(
        result.error,
        status_code=ERROR_STATUS.get(result.error.code, status.HTTP_400_BAD_REQUEST),
    )


@router.post(
    "/verify",
    response_model=BalanceCheckResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Points account not found"}},
)
async def verify_balance(
    request: VerifyRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Check whether a user holds at least `required_points`.

    The answer is advisory. `/debit` re-checks atomically.

    **Returns:**
    - 200: `sufficient` tells whether the balance covers the requirement
    - 404: No points account for the user
    """
    use_case = VerifyBalance(SqlAlchemyPointsAccountRepository(session))
    result = await use_case.execute(
        VerifyBalanceCommandDTO(user_id=request.user_id, required_points=request.required_points)
    )

    if result.is_err():
        _raise_for(result)

    return result.value


@router.post(
    "/debit",
    response_model=DebitResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        402: {
            "description": "Insufficient points",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INSUFFICIENT_POINTS",
                            "message": "Insufficient points. Required: 35, Available: 10"
                        }
                    }
                }
            }
        },
        404: {"description": "Points account not found"},
        400: {"description": "Validation error"},
    }
)
async def debit_points(
    request: DebitRequestSchema,
    session: AsyncSession = Depends(get_session),
    notification_service: NotificationService = Depends(get_notification_service),
):
    """
    Debit points from a user and record one spend entry.

    The balance decrement and the ledger entry are committed together.
    On failure the user is notified and nothing is changed.

    **Example request:**
    ```json
    {
      "user_id": "5f0c1a9e-2b7d-4c1e-9a0b-3d2e1f4a5b6c",
      "amount": 35,
      "description": "Photo Editing"
    }
    ```

    **Returns:**
    - 200: Points debited
    - 402: Insufficient points
    - 404: No points account for the user
    - 400: Invalid request parameters
    """
    use_case = DebitPoints(
        uow=SqlAlchemyUnitOfWork(session),
        account_repo=SqlAlchemyPointsAccountRepository(session),
        transaction_repo=SqlAlchemyPointsTransactionRepository(session),
        notification_service=notification_service,
    )
    result = await use_case.execute(
        DebitCommandDTO(
            user_id=request.user_id,
            amount=request.amount,
            description=request.description,
        )
    )

    if result.is_err():
        _raise_for(result)

    return result.value


@router.get(
    "/balance/{user_id}",
    response_model=BalanceResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={404: {"description": "Points account not found"}},
)
async def get_balance(
    user_id: str,
    session: AsyncSession = Depends(get_session),
):
    """Get the current Spark Points balance for a user."""
    use_case = GetBalance(SqlAlchemyPointsAccountRepository(session))
    result = await use_case.execute(user_id)

    if result.is_err():
        _raise_for(result)

    return result.value


@router.get(
    "/transactions/{user_id}",
    response_model=ListTransactionsResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def list_transactions(
    user_id: str,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    """List a user's points history, most recent first."""
    use_case = ListTransactions(SqlAlchemyPointsTransactionRepository(session))
    result = await use_case.execute(user_id, limit=limit, offset=offset)

    if result.is_err():
        _raise_for(result)

    return result.value
