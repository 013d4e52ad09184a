from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidTransferError,
    TransferFailedError,
)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(DuplicateAccountError)
    async def duplicate_account_handler(
        request: Request, exc: DuplicateAccountError
    ) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(InvalidTransferError)
    async def invalid_transfer_handler(
        request: Request, exc: InvalidTransferError
    ) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_406_NOT_ACCEPTABLE, content={"detail": str(exc)})

    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(
        request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_406_NOT_ACCEPTABLE, content={"detail": str(exc)})

    @app.exception_handler(TransferFailedError)
    async def transfer_failed_handler(
        request: Request, exc: TransferFailedError
    ) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_406_NOT_ACCEPTABLE, content={"detail": str(exc)})
