"""Shared test fixtures."""

import pytest

from repositories.ledger_repo import LedgerRepository
from services.ledger_service import LedgerService


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "userdata.json"


@pytest.fixture
def ledger(ledger_path) -> LedgerService:
    """An empty ledger backed by a temporary JSON file."""
    service = LedgerService(LedgerRepository(ledger_path))
    service.load()
    return service
