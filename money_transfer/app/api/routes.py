from fastapi import APIRouter, Depends, HTTPException, status

from ..core.config import get_settings
from ..core.dependencies import get_ledger_service
from ..models import (
    Account,
    AccountCreate,
    AccountResponse,
    TransferRequest,
    TransferResponse,
)
from ..services import LedgerService


router = APIRouter(prefix=f"{get_settings().api_prefix}/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    account = service.create_account(Account(payload.account_id, payload.balance))
    return AccountResponse.from_account(account)

@router.post("/transfer", response_model=TransferResponse)
def transfer(
    payload: TransferRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> TransferResponse:
    source, target = service.transfer(
        payload.source_account_id,
        payload.target_account_id,
        payload.amount,
    )
    return TransferResponse(
        source=AccountResponse.from_account(source),
        target=AccountResponse.from_account(target),
    )

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    account = service.get_account(account_id)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Account id = {account_id} not found!",
        )
    return AccountResponse.from_account(account)

__all__ = ["router"]
