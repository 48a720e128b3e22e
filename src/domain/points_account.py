"""Points Account Domain Entity

Holds the Spark Points balance of a single user. Each user has exactly one
account. The balance is only lowered through the atomic decrement performed
by the account repository.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, BigInteger, DateTime, Integer
from src.domain.base import BaseModel, utcnow


class PointsAccount(BaseModel, table=True):
    """
    Points Account - Tracks a user's Spark Points balance

    Domain Rules:
    - One account per user (user_id is unique)
    - Points must be non-negative (enforced by the database)
    - A NULL balance is read as zero
    """

    __tablename__ = "points_accounts"
    __table_args__ = (
        CheckConstraint('points IS NULL OR points >= 0', name='points_non_negative'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
        description="Unique account identifier (auto-increment)"
    )

    user_id: str = Field(
        index=True,
        unique=True,
        description="User identity (unique - one account per user)"
    )

    points: Optional[int] = Field(
        default=0,
        sa_column=Column(Integer, nullable=True),
        description="Current Spark Points balance (NULL is read as 0)"
    )

    created_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Account creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last balance update timestamp"
    )

    @property
    def balance(self) -> int:
        return self.points or 0
