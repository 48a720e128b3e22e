import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work with async commit/rollback"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_notification_service():
    """Mock notification service that always succeeds"""
    service = MagicMock()
    service.notify_failure = AsyncMock(return_value=True)
    return service
