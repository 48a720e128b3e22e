"""Notification Service Implementations

Provides concrete implementations for delivering failure messages to users.
"""

import logging
from typing import Optional
import httpx
from src.app.services.notification_service import NotificationService
from src.domain.base import utcnow

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """
    Notification service that logs messages

    Useful for development and testing, or as a fallback.
    """

    async def notify_failure(self, user_id: str, message: str) -> bool:
        logger.warning(f"[USER NOTIFICATION] User: {user_id}, Message: {message}")
        return True


class WebhookNotificationService(NotificationService):
    """
    Notification service that posts messages to an HTTP webhook

    The front-end notification relay turns the payload into a toast.
    """

    def __init__(self, webhook_url: str, timeout: float = 10.0):
        """
        Initialize webhook notification service

        Args:
            webhook_url: URL to POST notifications to
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def notify_failure(self, user_id: str, message: str) -> bool:
        """
        Send failure notification via webhook

        Returns:
            True if webhook call succeeded, False otherwise
        """
        payload = {
            "type": "points_failure",
            "level": "error",
            "user_id": user_id,
            "message": message,
            "sent_at": utcnow().isoformat(),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                logger.info(f"Webhook notification sent for user {user_id} to {self.webhook_url}")
                return True
        except httpx.HTTPError as e:
            logger.error(f"Failed to send webhook notification for user {user_id}: {e}")
            return False


class CompositeNotificationService(NotificationService):
    """
    Notification service that delegates to multiple services

    Useful for sending to multiple channels (e.g., log + webhook).
    """

    def __init__(self, services: list[NotificationService]):
        self.services = services

    async def notify_failure(self, user_id: str, message: str) -> bool:
        """
        Returns:
            True if at least one service succeeded, False otherwise
        """
        success = False
        for service in self.services:
            try:
                if await service.notify_failure(user_id, message):
                    success = True
            except Exception as e:
                logger.error(f"Notification service {type(service).__name__} failed: {e}")
        return success


def create_notification_service(
    webhook_url: Optional[str] = None, timeout: float = 10.0
) -> NotificationService:
    """
    Factory function to create appropriate notification service

    Args:
        webhook_url: Optional webhook URL. If provided, creates composite
                     service with logging + webhook. Otherwise, just logging.
        timeout: Webhook request timeout in seconds

    Returns:
        Configured NotificationService
    """
    services: list[NotificationService] = [LoggingNotificationService()]

    if webhook_url:
        services.append(WebhookNotificationService(webhook_url, timeout=timeout))

    if len(services) == 1:
        return services[0]

    return CompositeNotificationService(services)
