# Overview: Aggregations for the dashboard and reports; pure functions over store snapshots.

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Sequence

from ..models import Customer, Product, Transaction, PAYMENT_METHODS
from foodbazar.time_utils import utcnow, to_utc_z

DEFAULT_LOW_STOCK_THRESHOLD = 100
DEFAULT_TOP_N = 5

TIME_RANGES = {
    "7days": 7,
    "30days": 30,
    "90days": 90,
    "all": None,
}


class ReportError(Exception):
    """Raised when report generation fails."""
    pass


def filter_by_range(
    transactions: Iterable[Transaction],
    time_range: str = "all",
    now: datetime | None = None,
) -> list[Transaction]:
    """Transactions on or after now - N days; "all" keeps everything."""
    if time_range not in TIME_RANGES:
        raise ReportError(f"range must be one of: {', '.join(TIME_RANGES)}")

    days = TIME_RANGES[time_range]
    if days is None:
        return list(transactions)

    cutoff = (now or utcnow()) - timedelta(days=days)
    return [t for t in transactions if t.date >= cutoff]


def total_revenue(transactions: Iterable[Transaction]) -> float:
    return sum((t.total_amount for t in transactions), 0.0)


def average_transaction_value(transactions: Sequence[Transaction]) -> float:
    if not transactions:
        return 0.0
    return total_revenue(transactions) / len(transactions)


def total_customer_spend(customers: Iterable[Customer]) -> float:
    return sum((c.total_spent for c in customers), 0.0)


def average_spend_per_customer(customers: Sequence[Customer], transactions: Iterable[Transaction]) -> float:
    if not customers:
        return 0.0
    return total_revenue(transactions) / len(customers)


def inventory_value(products: Iterable[Product]) -> float:
    return sum((p.price * p.stock for p in products), 0.0)


def top_products(transactions: Iterable[Transaction], limit: int = DEFAULT_TOP_N) -> list[dict]:
    """
    Units and revenue per product id, highest revenue first.

    The display name is the first snapshot seen, so deleted products still
    appear under the name they were sold as.
    """
    sales: dict[str, dict] = {}
    for t in transactions:
        for item in t.items:
            row = sales.get(item.product_id)
            if row is None:
                sales[item.product_id] = {
                    "product_id": item.product_id,
                    "name": item.product_name,
                    "units": item.quantity,
                    "revenue": item.subtotal,
                }
            else:
                row["units"] += item.quantity
                row["revenue"] += item.subtotal

    rows = sorted(sales.values(), key=lambda r: r["revenue"], reverse=True)
    return rows[:limit]


def top_customers(customers: Iterable[Customer], limit: int = DEFAULT_TOP_N) -> list[dict]:
    """Ranked by the stored total_spent counter."""
    rows = [
        {
            "id": c.id,
            "name": c.name,
            "purchases": c.total_purchases,
            "spent": c.total_spent,
        }
        for c in customers
    ]
    rows.sort(key=lambda r: r["spent"], reverse=True)
    return rows[:limit]


def category_sales(transactions: Iterable[Transaction], products: Iterable[Product]) -> list[dict]:
    """
    Revenue and units per product category, highest revenue first.

    Items are joined to the current catalog by product id; items whose
    product has been deleted are left out.
    """
    category_by_product = {p.id: p.category for p in products}
    totals: dict[str, dict] = {}
    for t in transactions:
        for item in t.items:
            category = category_by_product.get(item.product_id)
            if category is None:
                continue
            row = totals.setdefault(category, {"category": category, "revenue": 0.0, "units": 0})
            row["revenue"] += item.subtotal
            row["units"] += item.quantity

    return sorted(totals.values(), key=lambda r: r["revenue"], reverse=True)


def daily_sales(transactions: Iterable[Transaction], days: int = 7) -> list[dict]:
    """Revenue and transaction count per UTC day, oldest first, last `days` buckets."""
    buckets: dict[str, dict] = {}
    for t in transactions:
        period = t.date.date().isoformat()
        row = buckets.setdefault(period, {"date": period, "revenue": 0.0, "transactions": 0})
        row["revenue"] += t.total_amount
        row["transactions"] += 1

    rows = sorted(buckets.values(), key=lambda r: r["date"])
    if days <= 0:
        return []
    return rows[-days:]


def low_stock(
    products: Iterable[Product],
    threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    limit: int | None = None,
) -> list[Product]:
    rows = [p for p in products if p.stock < threshold]
    if limit is not None:
        return rows[:limit]
    return rows


def payment_breakdown(transactions: Iterable[Transaction]) -> dict[str, int]:
    counts = {method: 0 for method in PAYMENT_METHODS}
    for t in transactions:
        counts[t.payment_method] = counts.get(t.payment_method, 0) + 1
    return counts


def recent_transactions(transactions: Iterable[Transaction], limit: int = DEFAULT_TOP_N) -> list[Transaction]:
    return sorted(transactions, key=lambda t: t.date, reverse=True)[:limit]


def dashboard_summary(
    *,
    customers: Sequence[Customer],
    products: Sequence[Product],
    transactions: Sequence[Transaction],
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
) -> dict:
    return {
        "total_customers": len(customers),
        "total_products": len(products),
        "total_transactions": len(transactions),
        "total_revenue": total_revenue(transactions),
        "recent_transactions": [t.to_dict() for t in recent_transactions(transactions)],
        "top_products": top_products(transactions),
        "low_stock": [p.to_dict() for p in low_stock(products, low_stock_threshold, limit=DEFAULT_TOP_N)],
    }


def analytics_report(
    *,
    customers: Sequence[Customer],
    products: Sequence[Product],
    transactions: Sequence[Transaction],
    time_range: str = "all",
    now: datetime | None = None,
) -> dict:
    """
    Reports page bundle.

    Category, daily and product figures honour time_range; customer
    rankings and the headline totals cover all time.
    """
    now = now or utcnow()
    in_range = filter_by_range(transactions, time_range, now)
    revenue = total_revenue(transactions)

    return {
        "range": time_range,
        "generated_at": to_utc_z(now),
        "total_revenue": revenue,
        "average_transaction_value": round(average_transaction_value(transactions), 2),
        "average_spend_per_customer": round(average_spend_per_customer(customers, transactions), 2),
        "inventory_value": inventory_value(products),
        "payment_breakdown": payment_breakdown(transactions),
        "category_sales": category_sales(in_range, products),
        "daily_sales": daily_sales(in_range),
        "top_customers": top_customers(customers),
        "top_products": top_products(in_range),
    }
