class LedgerError(Exception):
    """Base class for errors raised by the account store and transfer engine."""


class DuplicateAccountError(LedgerError):
    """Raised when an account id is already registered in the store."""

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        super().__init__(f"Account id {account_id} already exists!")


class InvalidTransferError(LedgerError):
    """Raised when a transfer request is rejected before any lookup."""


class AccountNotFoundError(LedgerError):
    """Raised when an account id is missing from the store."""

    def __init__(self, account_id: str) -> None:
        self.account_id = account_id
        super().__init__(f"Account id = {account_id} not found!")


class TransferFailedError(LedgerError):
    """Raised when the debit or credit leg of a transfer cannot complete."""

    def __init__(self, source_account_id: str, target_account_id: str) -> None:
        self.source_account_id = source_account_id
        self.target_account_id = target_account_id
        super().__init__(
            "Failed to transfer money between accounts: "
            f"sourceAccountId = {source_account_id}, "
            f"targetAccountId = {target_account_id}"
        )
