"""Notification Service Interface

Defines the contract for telling a user that a points operation failed.
"""

from abc import ABC, abstractmethod


class NotificationService(ABC):
    """
    Abstract notification service for user-facing failure messages

    Implementations can deliver through:
    - Logs
    - Webhook (HTTP POST to the front-end notification relay)
    """

    @abstractmethod
    async def notify_failure(self, user_id: str, message: str) -> bool:
        """
        Send a failure message to the user

        Args:
            user_id: User the message is for
            message: Human-readable message (e.g., "Failed to process payment: ...")

        Returns:
            True if notification sent successfully, False otherwise
        """
        pass
