from __future__ import annotations

from threading import Lock
from typing import Dict, Optional

from ..core.errors import DuplicateAccountError
from ..models import Account


class AccountStore:
    """In-memory registry of accounts keyed by id."""

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        return len(self._accounts)

    def create(self, account: Account) -> None:
        # Check and insert under one lock so only one create per id can win.
        with self._lock:
            if account.account_id in self._accounts:
                raise DuplicateAccountError(account.account_id)
            self._accounts[account.account_id] = account

    def get(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    def clear(self) -> None:
        """Drop every account (for testing)."""
        with self._lock:
            self._accounts.clear()
