import logging

from fastapi import Depends, FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import router as accounts_router
from .core.config import get_settings
from .core.dependencies import get_account_store
from .services import AccountStore

settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI(title=settings.app_name)

app.include_router(accounts_router)
register_exception_handlers(app)

@app.get("/health")
def read_health(store: AccountStore = Depends(get_account_store)) -> dict:
    return {"status": "ok", "accounts": len(store)}
