from __future__ import annotations

import logging
from typing import Protocol

from ..models import Account


logger = logging.getLogger(__name__)


class NotificationService(Protocol):
    def notify_about_transfer(self, account: Account, message: str) -> None:
        ...


class LoggingNotificationService:
    """Default notifier: records transfer events on the application log."""

    def notify_about_transfer(self, account: Account, message: str) -> None:
        logger.info(
            "notification.sent",
            extra={"account_id": account.account_id, "notification": message},
        )
