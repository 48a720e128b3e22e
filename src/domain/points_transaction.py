"""Points Transaction Domain Entity

Immutable append-only ledger of Spark Points balance changes.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, DateTime, Integer, Text
from src.domain.base import BaseModel, utcnow


class TransactionType(str, Enum):
    """Points transaction types"""
    SPEND = "spend"          # Points spent on a service request
    EARN = "earn"            # Points earned (referrals, rewards)
    PURCHASE = "purchase"    # Points bought by the user
    REFUND = "refund"        # Points returned for a cancelled request


class PointsTransaction(BaseModel, table=True):
    """
    Points Transaction - Immutable ledger entry

    Domain Rules:
    - Entries are never updated or deleted
    - amount is signed: negative for spends, positive for credits
    - Exactly one SPEND entry is written per successful debit

    Only SPEND entries are written by this service. The other types are
    written by external credit flows and are visible through the history.
    """

    __tablename__ = "points_transactions"
    __table_args__ = (
        Index('ix_points_transactions_created_at', 'created_at'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        description="Unique transaction identifier (auto-increment)"
    )

    user_id: str = Field(
        index=True,
        description="User whose balance changed"
    )

    amount: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Signed points amount (negative for spends)"
    )

    description: str = Field(
        sa_column=Column(Text, nullable=False),
        description="Human-readable reason (e.g., 'Photo Editing')"
    )

    transaction_type: TransactionType = Field(
        description="Type of transaction (spend, earn, purchase, refund)"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Transaction timestamp (immutable)"
    )
