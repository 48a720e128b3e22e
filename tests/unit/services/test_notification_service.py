"""Unit tests for notification service implementations"""

import logging
import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.notification_service import (
    CompositeNotificationService,
    LoggingNotificationService,
    WebhookNotificationService,
    create_notification_service,
)


@pytest.mark.asyncio
class TestLoggingNotificationService:

    async def test_logs_warning(self, caplog):
        service = LoggingNotificationService()

        with caplog.at_level(logging.WARNING):
            sent = await service.notify_failure("user_1", "Failed to process payment: boom")

        assert sent is True
        assert "user_1" in caplog.text
        assert "Failed to process payment: boom" in caplog.text


@pytest.mark.asyncio
class TestWebhookNotificationService:

    async def test_unreachable_webhook_returns_false(self):
        service = WebhookNotificationService("http://127.0.0.1:9/notify", timeout=1.0)

        assert await service.notify_failure("user_1", "msg") is False


@pytest.mark.asyncio
class TestCompositeNotificationService:

    async def test_true_if_any_service_succeeds(self):
        failing = MagicMock()
        failing.notify_failure = AsyncMock(side_effect=RuntimeError("down"))
        ok = MagicMock()
        ok.notify_failure = AsyncMock(return_value=True)

        service = CompositeNotificationService([failing, ok])

        assert await service.notify_failure("user_1", "msg") is True
        ok.notify_failure.assert_called_once_with("user_1", "msg")

    async def test_false_if_all_fail(self):
        failing = MagicMock()
        failing.notify_failure = AsyncMock(return_value=False)

        service = CompositeNotificationService([failing])

        assert await service.notify_failure("user_1", "msg") is False


class TestFactory:

    def test_logging_only_without_webhook(self):
        assert isinstance(create_notification_service(None), LoggingNotificationService)

    def test_composite_with_webhook(self):
        service = create_notification_service("https://hooks.example.com/points", timeout=2.0)

        assert isinstance(service, CompositeNotificationService)
        webhook = service.services[1]
        assert isinstance(webhook, WebhookNotificationService)
        assert webhook.timeout == 2.0
