import pytest
from fastapi.testclient import TestClient

from eduledger.api.rest_api import EduLedgerRestAPI
from eduledger.services import MockLedger


@pytest.fixture
def ledger():
    return MockLedger()


@pytest.fixture
def api(ledger):
    return EduLedgerRestAPI(ledger)


@pytest.fixture
def client(api):
    return TestClient(api.app)
