from .ledger import LedgerService
from .notifications import LoggingNotificationService, NotificationService
from .repository import AccountStore

__all__ = [
    "AccountStore",
    "LedgerService",
    "LoggingNotificationService",
    "NotificationService",
]
