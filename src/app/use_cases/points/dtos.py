"""Data Transfer Objects for Points Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from typing import List
from pydantic import BaseModel, Field


class VerifyBalanceCommandDTO(BaseModel):
    """
    Command DTO for checking a user can afford a spend

    Used as input to VerifyBalance use case.
    """

    user_id: str = Field(
        ...,
        description="User identity"
    )

    required_points: int = Field(
        ...,
        ge=0,
        description="Points the user must hold (must be >= 0)"
    )


class DebitCommandDTO(BaseModel):
    """
    Command DTO for debiting points

    Used as input to DebitPoints use case.
    """

    user_id: str = Field(
        ...,
        description="User identity"
    )

    amount: int = Field(
        ...,
        gt=0,
        description="Points to remove (must be > 0)"
    )

    description: str = Field(
        ...,
        description="Free-text reason for the spend, may be empty (e.g., 'Photo Editing')"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": "5f0c1a9e-2b7d-4c1e-9a0b-3d2e1f4a5b6c",
                "amount": 35,
                "description": "Photo Editing"
            }
        }


class BalanceCheckResponseDTO(BaseModel):
    """Response DTO for VerifyBalance"""

    user_id: str
    balance: int = Field(..., description="Current balance (NULL read as 0)")
    required_points: int
    sufficient: bool = Field(..., description="balance >= required_points")


class DebitResponseDTO(BaseModel):
    """
    Response DTO for a successful debit

    amount is the signed ledger amount, so it is negative.
    """

    transaction_id: int = Field(
        ...,
        description="Ledger entry ID"
    )

    user_id: str = Field(
        ...,
        description="User identity"
    )

    amount: int = Field(
        ...,
        description="Signed ledger amount (negative for spends)"
    )

    description: str = Field(
        ...,
        description="Reason for the spend"
    )

    transaction_type: str = Field(
        ...,
        description="Type of transaction (always 'spend' for debits)"
    )

    balance_after: int = Field(
        ...,
        description="Balance after the debit"
    )

    created_at: datetime = Field(
        ...,
        description="Ledger entry timestamp"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "transaction_id": 42,
                "user_id": "5f0c1a9e-2b7d-4c1e-9a0b-3d2e1f4a5b6c",
                "amount": -35,
                "description": "Photo Editing",
                "transaction_type": "spend",
                "balance_after": 65,
                "created_at": "2024-01-01T00:00:00Z"
            }
        }


class BalanceResponseDTO(BaseModel):
    """
    Response DTO for get balance operation

    Returned by GetBalance use case.
    """

    user_id: str = Field(
        ...,
        description="User identity"
    )

    balance: int = Field(
        ...,
        description="Current Spark Points balance"
    )

    last_updated: datetime = Field(
        ...,
        description="Timestamp of last balance update"
    )


class TransactionDTO(BaseModel):
    """Single ledger entry in a history listing"""

    id: int
    amount: int
    description: str
    transaction_type: str
    created_at: datetime


class ListTransactionsResponseDTO(BaseModel):
    """Paginated ledger history for a user"""

    user_id: str
    transactions: List[TransactionDTO]
    total: int = Field(..., description="Total entries for the user")
    limit: int
    offset: int
