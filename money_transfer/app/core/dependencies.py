from functools import lru_cache

from fastapi import Depends

from ..services import (
    AccountStore,
    LedgerService,
    LoggingNotificationService,
    NotificationService,
)


@lru_cache()
def get_account_store() -> AccountStore:
    return AccountStore()


@lru_cache()
def get_notification_service() -> NotificationService:
    return LoggingNotificationService()


def get_ledger_service(
    store: AccountStore = Depends(get_account_store),
    notification_service: NotificationService = Depends(get_notification_service),
) -> LedgerService:
    return LedgerService(store, notification_service)
