# Overview: Search and filter helpers over store snapshots.

from __future__ import annotations

from typing import Iterable

from ..models import Customer, Product, Transaction

ALL = "all"


def search_customers(customers: Iterable[Customer], query: str | None = None) -> list[Customer]:
    """
    Case-insensitive substring match on name, email and id.

    Phone numbers are matched as typed.
    """
    if not query:
        return list(customers)
    q = query.lower()
    return [
        c for c in customers
        if q in c.name.lower()
        or q in c.email.lower()
        or query in c.phone
        or q in c.id.lower()
    ]


def filter_products(
    products: Iterable[Product],
    query: str | None = None,
    category: str | None = None,
) -> list[Product]:
    filtered = list(products)

    if query:
        q = query.lower()
        filtered = [
            p for p in filtered
            if q in p.name.lower()
            or q in p.category.lower()
            or q in p.id.lower()
            or q in p.supplier.lower()
        ]

    if category and category != ALL:
        filtered = [p for p in filtered if p.category == category]

    return filtered


def list_categories(products: Iterable[Product]) -> list[str]:
    return sorted({p.category for p in products if p.category})


def filter_transactions(
    transactions: Iterable[Transaction],
    query: str | None = None,
    payment_method: str | None = None,
) -> list[Transaction]:
    """Search on id, customer name and customer id; newest first."""
    filtered = list(transactions)

    if query:
        q = query.lower()
        filtered = [
            t for t in filtered
            if q in t.id.lower()
            or q in t.customer_name.lower()
            or q in t.customer_id.lower()
        ]

    if payment_method and payment_method != ALL:
        filtered = [t for t in filtered if t.payment_method == payment_method]

    return sorted(filtered, key=lambda t: t.date, reverse=True)
