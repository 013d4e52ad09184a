from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from ..core.dependencies import get_account_store, get_notification_service
from ..main import app
from ..models import Account
from ..services import AccountStore, LedgerService

SOURCE_ACCOUNT_ID = "ID-1"
SOURCE_ACCOUNT_BALANCE = Decimal("550.55")

TARGET_ACCOUNT_ID = "ID-2"
TARGET_ACCOUNT_BALANCE = Decimal("400.25")


class RecordingNotifier:
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def notify_about_transfer(self, account: Account, message: str) -> None:
        self.events.append((account.account_id, message))


@pytest.fixture
def store() -> AccountStore:
    return AccountStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def service(store: AccountStore, notifier: RecordingNotifier) -> LedgerService:
    return LedgerService(store, notifier)


@pytest.fixture
def funded_accounts(service: LedgerService) -> tuple[Account, Account]:
    source = service.create_account(Account(SOURCE_ACCOUNT_ID, SOURCE_ACCOUNT_BALANCE))
    target = service.create_account(Account(TARGET_ACCOUNT_ID, TARGET_ACCOUNT_BALANCE))
    return source, target


@pytest.fixture
def client(store: AccountStore, notifier: RecordingNotifier) -> TestClient:
    app.dependency_overrides[get_account_store] = lambda: store
    app.dependency_overrides[get_notification_service] = lambda: notifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
