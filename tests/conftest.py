# FoodBazar Test Suite - Shared Configuration and Fixtures
#
# This module provides:
# - Flask app per test with an in-memory SQLite storage table
# - Test client and CLI runner
# - Stand-alone stores over in-memory key-value storage

from datetime import datetime

import pytest

from foodbazar import create_app
from foodbazar.config import TestConfig
from foodbazar.extensions import db
from foodbazar.models import TransactionItem, Transaction
from foodbazar.services.seed_data import seed_customers, seed_products, seed_transactions
from foodbazar.services.storage_service import MemoryStorage
from foodbazar.services.store_service import DataStore


@pytest.fixture()
def app():
    """Create application for testing; a fresh database per test."""
    app = create_app(TestConfig)

    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture()
def cli_runner(app):
    return app.test_cli_runner()


@pytest.fixture()
def storage():
    return MemoryStorage()


@pytest.fixture()
def store(storage):
    """A store loaded with the demo dataset, independent of Flask."""
    store = DataStore(storage)
    store.load()
    return store


@pytest.fixture()
def customers():
    return seed_customers()


@pytest.fixture()
def products():
    return seed_products()


@pytest.fixture()
def transactions():
    return seed_transactions()


def make_transaction(
    transaction_id: str,
    customer_id: str,
    lines: list[tuple[str, int, float]],
    *,
    customer_name: str = "Walk-in",
    payment_method: str = "cash",
    date: datetime | None = None,
) -> Transaction:
    """Helper to build a transaction from (product_id, quantity, price) lines."""
    items = [
        TransactionItem(
            product_id=product_id,
            product_name=f"Item {product_id}",
            quantity=quantity,
            price=price,
            subtotal=quantity * price,
        )
        for product_id, quantity, price in lines
    ]
    return Transaction(
        id=transaction_id,
        customer_id=customer_id,
        customer_name=customer_name,
        date=date or datetime(2024, 7, 1, 9, 0, 0),
        items=items,
        total_amount=sum(item.subtotal for item in items),
        payment_method=payment_method,
        status="completed",
    )
