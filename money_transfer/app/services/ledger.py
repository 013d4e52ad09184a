from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Tuple

from ..core.errors import (
    AccountNotFoundError,
    InvalidTransferError,
    TransferFailedError,
)
from ..models import Account
from .notifications import LoggingNotificationService, NotificationService
from .repository import AccountStore


logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(
        self,
        store: Optional[AccountStore] = None,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.store = store if store is not None else AccountStore()
        self.notification_service = notification_service or LoggingNotificationService()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _get_account(self, account_id: str) -> Account:
        account = self.store.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def _verify_transfer(self, source_id: str, target_id: str, amount: Decimal) -> None:
        if source_id == target_id:
            raise InvalidTransferError(
                "Accounts for transferring money must be different: "
                f"sourceAccountId = {source_id}, targetAccountId = {target_id}"
            )
        if amount <= 0:
            raise InvalidTransferError(f"Transfer amount must be positive: {amount}")

    def _notify(self, account: Account, message: str) -> None:
        # A failing notifier never undoes a transfer that already happened.
        try:
            self.notification_service.notify_about_transfer(account, message)
        except Exception:
            logger.exception(
                "notification.failed",
                extra={"account_id": account.account_id},
            )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, account: Account) -> Account:
        self.store.create(account)
        logger.info(
            "account.created",
            extra={"account_id": account.account_id, "balance": str(account.balance)},
        )
        return account

    def get_account(self, account_id: str) -> Optional[Account]:
        return self.store.get(account_id)

    def transfer(
        self,
        source_id: str,
        target_id: str,
        amount: Decimal,
    ) -> Tuple[Account, Account]:
        """Move ``amount`` from one account to another.

        Debit and credit are two separate per-account atomic steps, so no
        lock is ever held on both accounts and opposite-direction transfers
        cannot deadlock. If the credit does not go through, the debit is
        reversed before the error reaches the caller.
        """
        self._verify_transfer(source_id, target_id, amount)

        source = self._get_account(source_id)
        target = self._get_account(target_id)

        withdrawn = False
        deposited = False
        try:
            if not source.withdraw(amount):
                logger.info(
                    "transfer.rejected",
                    extra={
                        "source_account_id": source_id,
                        "target_account_id": target_id,
                        "amount": str(amount),
                    },
                )
                raise TransferFailedError(source_id, target_id)
            withdrawn = True

            if not target.deposit(amount):
                raise TransferFailedError(source_id, target_id)
            deposited = True
        finally:
            if withdrawn and not deposited:
                source.deposit(amount)
                logger.warning(
                    "transfer.compensated",
                    extra={
                        "source_account_id": source_id,
                        "target_account_id": target_id,
                        "amount": str(amount),
                    },
                )

        self._notify(source, f"Withdrawing {amount} from the account")
        self._notify(target, f"Depositing {amount} to the account")

        logger.info(
            "transfer.completed",
            extra={
                "source_account_id": source_id,
                "target_account_id": target_id,
                "amount": str(amount),
            },
        )
        return source, target
