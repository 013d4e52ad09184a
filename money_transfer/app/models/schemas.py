from decimal import Decimal

from pydantic import BaseModel, Field

from .account import Account


class AccountCreate(BaseModel):
    account_id: str = Field(..., min_length=1, description="Caller-chosen account identifier")
    balance: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        max_digits=11,
        decimal_places=2,
        description="Opening balance, up to 9 integer and 2 fraction digits",
    )


class AccountResponse(BaseModel):
    account_id: str
    balance: Decimal

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(account_id=account.account_id, balance=account.balance)


class TransferRequest(BaseModel):
    source_account_id: str = Field(..., min_length=1)
    target_account_id: str = Field(..., min_length=1)
    amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=11,
        decimal_places=2,
        description="Amount to move, up to 9 integer and 2 fraction digits",
    )


class TransferResponse(BaseModel):
    source: AccountResponse
    target: AccountResponse
