"""Integration tests for the points ledger against a real database

Tests cover:
- Scenario: balance 100, debit 35 -> True, 65, one {-35, spend} entry
- Scenario: balance 10, debit 35 -> False, 10, no entry
- Ledger append failure rolls the decrement back
- Concurrent debits never overdraw the account
"""

import asyncio
import pytest
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.points_account_repository import SqlAlchemyPointsAccountRepository
from src.adapter.repositories.points_transaction_repository import SqlAlchemyPointsTransactionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.points_ledger import PointsLedger
from src.domain.errors import AccountNotFoundError, InsufficientPointsError
from src.domain.points_account import PointsAccount
from src.domain.points_transaction import PointsTransaction, TransactionType


async def create_account(session: AsyncSession, user_id: str, points) -> PointsAccount:
    account = PointsAccount(user_id=user_id, points=points)
    session.add(account)
    await session.commit()
    await session.refresh(account)
    return account


def build_ledger(session: AsyncSession, notifications=None, transaction_repo=None) -> PointsLedger:
    return PointsLedger(
        uow=SqlAlchemyUnitOfWork(session),
        account_repo=SqlAlchemyPointsAccountRepository(session),
        transaction_repo=transaction_repo or SqlAlchemyPointsTransactionRepository(session),
        notification_service=notifications,
    )


async def count_entries(session: AsyncSession, user_id: str) -> int:
    stmt = select(func.count()).select_from(PointsTransaction).where(PointsTransaction.user_id == user_id)
    return (await session.execute(stmt)).scalar_one()


@pytest.mark.asyncio
class TestPointsLedgerIntegration:

    async def test_debit_photo_editing(self, db_session, notifications):
        await create_account(db_session, "user_100", 100)
        ledger = build_ledger(db_session, notifications)

        assert await ledger.debit("user_100", 35, "Photo Editing") is True

        repo = SqlAlchemyPointsAccountRepository(db_session)
        assert await repo.get_points("user_100") == 65

        entries, total = await SqlAlchemyPointsTransactionRepository(db_session).get_by_user_id("user_100")
        assert total == 1
        assert entries[0].amount == -35
        assert entries[0].description == "Photo Editing"
        assert entries[0].transaction_type == TransactionType.SPEND
        assert notifications.sent == []

    async def test_debit_more_than_balance(self, db_session, notifications):
        await create_account(db_session, "user_10", 10)
        ledger = build_ledger(db_session, notifications)

        assert await ledger.debit("user_10", 35, "Photo Editing") is False

        assert await SqlAlchemyPointsAccountRepository(db_session).get_points("user_10") == 10
        assert await count_entries(db_session, "user_10") == 0
        assert notifications.sent == [
            ("user_10", "Failed to process payment: Insufficient points. Required: 35, Available: 10")
        ]

    async def test_debit_exact_balance_reaches_zero(self, db_session):
        await create_account(db_session, "user_exact", 35)
        ledger = build_ledger(db_session)

        assert await ledger.debit("user_exact", 35, "Photo Editing") is True
        assert await ledger.debit("user_exact", 1, "Slide") is False
        assert await SqlAlchemyPointsAccountRepository(db_session).get_points("user_exact") == 0

    async def test_debit_unknown_user(self, db_session, notifications):
        ledger = build_ledger(db_session, notifications)

        assert await ledger.debit("ghost", 5, "Poster") is False
        assert await count_entries(db_session, "ghost") == 0
        assert len(notifications.sent) == 1

    async def test_verify_balance(self, db_session):
        await create_account(db_session, "user_v", 50)
        ledger = build_ledger(db_session)

        assert await ledger.verify_balance("user_v", 50) is True
        assert await ledger.verify_balance("user_v", 51) is False
        assert await ledger.verify_balance("ghost", 0) is False

    async def test_null_balance_is_zero(self, db_session):
        await create_account(db_session, "user_null", None)
        ledger = build_ledger(db_session)

        assert await ledger.verify_balance("user_null", 0) is True
        assert await ledger.verify_balance("user_null", 1) is False
        assert await ledger.debit("user_null", 1, "Poster") is False

    async def test_ledger_failure_rolls_back_decrement(self, db_session, notifications):
        await create_account(db_session, "user_rb", 100)

        class FailingTransactionRepository(SqlAlchemyPointsTransactionRepository):
            async def create(self, transaction):
                raise RuntimeError("ledger insert rejected")

        ledger = build_ledger(
            db_session, notifications, transaction_repo=FailingTransactionRepository(db_session)
        )

        assert await ledger.debit("user_rb", 35, "Photo Editing") is False

        assert await SqlAlchemyPointsAccountRepository(db_session).get_points("user_rb") == 100
        assert await count_entries(db_session, "user_rb") == 0
        assert len(notifications.sent) == 1


@pytest.mark.asyncio
class TestAccountRepositoryIntegration:

    async def test_decrement_returns_new_balance(self, db_session):
        await create_account(db_session, "user_d", 20)
        repo = SqlAlchemyPointsAccountRepository(db_session)

        assert await repo.decrement_points("user_d", 8) == 12
        await db_session.commit()
        assert await repo.get_points("user_d") == 12

    async def test_decrement_rejects_overdraw(self, db_session):
        await create_account(db_session, "user_o", 5)
        repo = SqlAlchemyPointsAccountRepository(db_session)

        with pytest.raises(InsufficientPointsError) as exc_info:
            await repo.decrement_points("user_o", 6)

        assert exc_info.value.available == 5
        assert await repo.get_points("user_o") == 5

    async def test_decrement_unknown_user(self, db_session):
        repo = SqlAlchemyPointsAccountRepository(db_session)

        with pytest.raises(AccountNotFoundError):
            await repo.decrement_points("ghost", 1)

        with pytest.raises(AccountNotFoundError):
            await repo.get_points("ghost")


@pytest.mark.asyncio
class TestConcurrentDebits:

    async def test_concurrent_debits_never_overdraw(self, db_session, session_factory):
        """
        Given: balance 100, twelve concurrent debits of 30 on separate sessions
        When: all run at once
        Then: at most three succeed, the balance equals 100 - 30 * successes,
              and there is one ledger entry per success
        """
        await create_account(db_session, "user_c", 100)

        async def debit_once(i: int) -> bool:
            async with session_factory() as session:
                return await build_ledger(session).debit("user_c", 30, f"Request {i}")

        outcomes = await asyncio.gather(*(debit_once(i) for i in range(12)))
        successes = sum(outcomes)

        assert 1 <= successes <= 3

        async with session_factory() as session:
            balance = await SqlAlchemyPointsAccountRepository(session).get_points("user_c")
            entries = await count_entries(session, "user_c")

        assert balance == 100 - 30 * successes
        assert balance >= 0
        assert entries == successes


@pytest.mark.asyncio
class TestModelDefaultsIntegration:

    async def test_debit_account_created_from_model_defaults(self, db_session):
        """
        Given: an account whose timestamps come from the model defaults
        When: 35 points are debited with a description longer than 255 characters
        Then: the debit succeeds and the stored timestamps and description round-trip
        """
        account = PointsAccount(user_id="user_defaults", points=100)
        db_session.add(account)
        await db_session.commit()
        ledger = build_ledger(db_session)
        description = "Photo Editing " + "x" * 300

        assert await ledger.debit("user_defaults", 35, description) is True

        refreshed = await SqlAlchemyPointsAccountRepository(db_session).get_by_user_id("user_defaults")
        assert refreshed.points == 65
        assert refreshed.updated_at.replace(tzinfo=None) >= refreshed.created_at.replace(tzinfo=None)

        entries, total = await SqlAlchemyPointsTransactionRepository(db_session).get_by_user_id("user_defaults")
        assert total == 1
        assert entries[0].description == description
