from .account import Account
from .schemas import (
    AccountCreate,
    AccountResponse,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "Account",
    "AccountCreate",
    "AccountResponse",
    "TransferRequest",
    "TransferResponse",
]
