# Overview: In-memory data store for customers, products and transactions.

"""
Data store

Owns the three entity collections and writes each one to key-value storage
as a single JSON blob whenever it changes. Reads never touch storage after
the first load.

WHY: The dashboard is single-user and the data set is small, so the whole
state lives in memory and every read pattern (filters, joins by id,
aggregates) works on plain lists. The only cross-entity invariants are the
customer counters and product stock, and both move exclusively through
commit_transaction().

Missing ids are not errors: get_* returns None, update_*/delete_* return
False and change nothing. The store performs no validation of its own.
"""
from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass, field

from ..models import Customer, Product, Transaction
from ..models.entities import field_names
from .seed_data import seed_customers, seed_products, seed_transactions
from .storage_service import KeyValueStorage, SqlKeyValueStorage

logger = logging.getLogger(__name__)

ID_WIDTH = 3


class EntityCollection:
    """
    One ordered, id-keyed list of entities bound to a storage key.

    Loaded lazily on first access. A missing key is seeded and written back
    immediately so the collection is never left undefined.
    """

    def __init__(self, storage: KeyValueStorage, key: str, entity_cls, prefix: str, seed, seed_on_empty: bool = True):
        self.storage = storage
        self.key = key
        self.entity_cls = entity_cls
        self.prefix = prefix
        self.seed = seed
        self.seed_on_empty = seed_on_empty
        self.mutable_fields = field_names(entity_cls) - {"id"}
        self._items: list | None = None

    @property
    def items(self) -> list:
        if self._items is None:
            self.load()
        return self._items

    def load(self) -> None:
        raw = self.storage.get_item(self.key)
        if raw is not None:
            self._items = [self.entity_cls.from_dict(row) for row in json.loads(raw)]
            return

        self._items = self.seed() if self.seed_on_empty else []
        self.persist()

    def persist(self, *, commit: bool = True) -> None:
        payload = json.dumps([entity.to_dict() for entity in self.items])
        self.storage.set_item(self.key, payload, commit=commit)

    def reset(self) -> None:
        self.storage.remove_item(self.key, commit=False)
        self._items = self.seed()
        self.persist(commit=False)

    def restore(self, items: list) -> None:
        self._items = items

    def get(self, entity_id: str):
        for entity in self.items:
            if entity.id == entity_id:
                return entity
        return None

    def add(self, entity) -> None:
        self.items.append(entity)
        self.persist()

    def apply_patch(self, entity, patch: dict) -> None:
        for k, v in patch.items():
            if k not in self.mutable_fields:
                continue
            setattr(entity, k, v)

    def update(self, entity_id: str, patch: dict) -> bool:
        entity = self.get(entity_id)
        if entity is None:
            return False
        self.apply_patch(entity, patch)
        self.persist()
        return True

    def delete(self, entity_id: str) -> bool:
        for i, entity in enumerate(self.items):
            if entity.id == entity_id:
                del self.items[i]
                self.persist()
                return True
        return False

    def next_id(self) -> str:
        """
        Next "<prefix><zero-padded n>" id, n = largest numeric suffix + 1.

        Ids released by deletes are never handed out again while a higher id
        exists, unlike deriving n from the collection length.
        """
        highest = 0
        for entity in self.items:
            suffix = entity.id[len(self.prefix):]
            if entity.id.startswith(self.prefix) and suffix.isdigit():
                highest = max(highest, int(suffix))
        return f"{self.prefix}{highest + 1:0{ID_WIDTH}d}"


@dataclass
class CommitResult:
    """Outcome of commit_transaction: which side effects applied and which were skipped."""
    transaction: Transaction
    customer_applied: bool
    skipped_product_ids: list[str] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        return self.customer_applied and not self.skipped_product_ids

    def to_dict(self) -> dict:
        return {
            "transaction": self.transaction.to_dict(),
            "customer_applied": self.customer_applied,
            "skipped_product_ids": list(self.skipped_product_ids),
            "applied": self.applied,
        }


class DataStore:
    """Single owner of customer, product and transaction state."""

    def __init__(self, storage: KeyValueStorage, *, key_prefix: str = "foodbazar", seed_on_empty: bool = True):
        self.storage = storage
        self.customers = EntityCollection(
            storage, f"{key_prefix}_customers", Customer, "C", seed_customers, seed_on_empty
        )
        self.products = EntityCollection(
            storage, f"{key_prefix}_products", Product, "P", seed_products, seed_on_empty
        )
        self.transactions = EntityCollection(
            storage, f"{key_prefix}_transactions", Transaction, "T", seed_transactions, seed_on_empty
        )

    def _collections(self) -> tuple[EntityCollection, ...]:
        return (self.customers, self.products, self.transactions)

    def load(self) -> None:
        """Force the first load of all collections."""
        for collection in self._collections():
            collection.items

    # Customers

    def list_customers(self) -> list[Customer]:
        return self.customers.items

    def get_customer(self, customer_id: str) -> Customer | None:
        return self.customers.get(customer_id)

    def add_customer(self, customer: Customer) -> None:
        self.customers.add(customer)

    def update_customer(self, customer_id: str, fields: dict) -> bool:
        return self.customers.update(customer_id, fields)

    def delete_customer(self, customer_id: str) -> bool:
        return self.customers.delete(customer_id)

    def next_customer_id(self) -> str:
        return self.customers.next_id()

    # Products

    def list_products(self) -> list[Product]:
        return self.products.items

    def get_product(self, product_id: str) -> Product | None:
        return self.products.get(product_id)

    def add_product(self, product: Product) -> None:
        self.products.add(product)

    def update_product(self, product_id: str, fields: dict) -> bool:
        return self.products.update(product_id, fields)

    def delete_product(self, product_id: str) -> bool:
        return self.products.delete(product_id)

    def next_product_id(self) -> str:
        return self.products.next_id()

    # Transactions

    def list_transactions(self) -> list[Transaction]:
        return self.transactions.items

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        return self.transactions.get(transaction_id)

    def delete_transaction(self, transaction_id: str) -> bool:
        """Remove a transaction record. Counters and stock are left as they are."""
        return self.transactions.delete(transaction_id)

    def next_transaction_id(self) -> str:
        return self.transactions.next_id()

    def query_transactions_by_customer(self, customer_id: str) -> list[Transaction]:
        return [t for t in self.transactions.items if t.customer_id == customer_id]

    def commit_transaction(self, transaction: Transaction) -> CommitResult:
        """
        Record a transaction and apply its side effects.

        - append the transaction
        - customer: total_purchases += 1, total_spent += total_amount
        - each item's product: stock -= quantity

        A customer or product that no longer exists is skipped and reported
        in the result; the transaction is still recorded. All touched
        collections are written in one storage commit. If anything fails,
        in-memory state is restored, the storage write is rolled back and
        the error propagates.
        """
        collections = self._collections()
        snapshot = [copy.deepcopy(c.items) for c in collections]

        try:
            self.transactions.items.append(transaction)

            customer = self.customers.get(transaction.customer_id)
            if customer is not None:
                self.customers.apply_patch(customer, {
                    "total_purchases": customer.total_purchases + 1,
                    "total_spent": customer.total_spent + transaction.total_amount,
                })

            skipped: list[str] = []
            for item in transaction.items:
                product = self.products.get(item.product_id)
                if product is None:
                    skipped.append(item.product_id)
                    continue
                self.products.apply_patch(product, {"stock": product.stock - item.quantity})

            self.transactions.persist(commit=False)
            if customer is not None:
                self.customers.persist(commit=False)
            if len(skipped) < len(transaction.items):
                self.products.persist(commit=False)
            self.storage.commit()
        except Exception:
            for collection, items in zip(collections, snapshot):
                collection.items[:] = items
            self.storage.rollback()
            raise

        if customer is None:
            logger.warning("Transaction %s references unknown customer %s", transaction.id, transaction.customer_id)
        if skipped:
            logger.warning("Transaction %s references unknown products %s", transaction.id, ", ".join(skipped))

        return CommitResult(
            transaction=transaction,
            customer_applied=customer is not None,
            skipped_product_ids=skipped,
        )

    def reset_to_seed_data(self) -> None:
        """
        Discard persisted state and reseed all three collections from the demo dataset.

        Written in one storage commit. On failure the previous in-memory state
        is restored, the storage write is rolled back and the error propagates.
        """
        collections = self._collections()
        # reset() swaps in a new list, leaving the current ones untouched
        previous = [c.items for c in collections]

        try:
            for collection in collections:
                collection.reset()
            self.storage.commit()
        except Exception:
            for collection, items in zip(collections, previous):
                collection.restore(items)
            self.storage.rollback()
            raise

        logger.info("Store reset to seed data")

    def counts(self) -> dict:
        return {
            "customers": len(self.customers.items),
            "products": len(self.products.items),
            "transactions": len(self.transactions.items),
        }


STORE_EXTENSION_KEY = "foodbazar_store"


def init_app(app) -> None:
    """Reserve the per-application store slot; the store itself is built on first use."""
    app.extensions[STORE_EXTENSION_KEY] = None


def get_store() -> DataStore:
    """
    The store bound to the current Flask application.

    Created and loaded on first call, backed by the storage_entries table.
    Collaborators receive it through this accessor instead of a module
    global, so each app (and each test app) has its own state.
    """
    from flask import current_app

    store = current_app.extensions.get(STORE_EXTENSION_KEY)
    if store is None:
        store = DataStore(
            SqlKeyValueStorage(),
            key_prefix=current_app.config["FOODBAZAR_STORAGE_PREFIX"],
            seed_on_empty=current_app.config["FOODBAZAR_SEED_ON_EMPTY"],
        )
        store.load()
        current_app.extensions[STORE_EXTENSION_KEY] = store
    return store
