from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime

from foodbazar.time_utils import parse_iso_date, parse_iso_datetime, to_utc_naive, to_utc_z

PAYMENT_METHODS = ("cash", "card", "mobile")


@dataclass
class Customer:
    """
    Customer master data.

    total_purchases and total_spent are denormalized aggregates of the
    customer's committed transactions. They start at zero and only the
    transaction commit path moves them.
    """
    id: str
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""
    join_date: date | None = None
    total_purchases: int = 0
    total_spent: float = 0.0

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "joinDate": self.join_date.isoformat() if self.join_date else None,
            "totalPurchases": self.total_purchases,
            "totalSpent": self.total_spent,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            email=data.get("email", ""),
            phone=data.get("phone", ""),
            address=data.get("address", ""),
            join_date=parse_iso_date(data.get("joinDate")),
            total_purchases=int(data.get("totalPurchases", 0)),
            total_spent=float(data.get("totalSpent", 0)),
        )


@dataclass
class Product:
    """Catalog entry. Stock may go negative; sales never block on it."""
    id: str
    name: str
    category: str = ""
    price: float = 0.0
    stock: int = 0
    unit: str = ""
    supplier: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "stock": self.stock,
            "unit": self.unit,
            "supplier": self.supplier,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            category=data.get("category", ""),
            price=float(data.get("price", 0)),
            stock=int(data.get("stock", 0)),
            unit=data.get("unit", ""),
            supplier=data.get("supplier", ""),
            description=data.get("description", ""),
        )


@dataclass
class TransactionItem:
    """
    One line of a transaction.

    product_name and price are snapshots taken when the line was built, so a
    later edit or delete of the product does not change history.
    """
    product_id: str
    product_name: str
    quantity: int
    price: float
    subtotal: float

    def to_dict(self) -> dict:
        return {
            "productId": self.product_id,
            "productName": self.product_name,
            "quantity": self.quantity,
            "price": self.price,
            "subtotal": self.subtotal,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TransactionItem":
        return cls(
            product_id=data["productId"],
            product_name=data.get("productName", ""),
            quantity=int(data["quantity"]),
            price=float(data["price"]),
            subtotal=float(data["subtotal"]),
        )


@dataclass
class Transaction:
    """
    Point-of-sale transaction document.

    Created whole by the commit path. customer_name is a snapshot, like the
    item names and prices. date is held as whole-second naive UTC.
    """
    id: str
    customer_id: str
    customer_name: str
    date: datetime
    items: list[TransactionItem] = field(default_factory=list)
    total_amount: float = 0.0
    payment_method: str = "cash"
    status: str = "completed"

    def __post_init__(self):
        self.date = to_utc_naive(self.date)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "customerId": self.customer_id,
            "customerName": self.customer_name,
            "date": to_utc_z(self.date),
            "items": [item.to_dict() for item in self.items],
            "totalAmount": self.total_amount,
            "paymentMethod": self.payment_method,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        return cls(
            id=data["id"],
            customer_id=data.get("customerId", ""),
            customer_name=data.get("customerName", ""),
            date=parse_iso_datetime(data.get("date")),
            items=[TransactionItem.from_dict(item) for item in data.get("items", [])],
            total_amount=float(data.get("totalAmount", 0)),
            payment_method=data.get("paymentMethod", "cash"),
            status=data.get("status", "completed"),
        )


def field_names(entity_cls) -> set[str]:
    return {f.name for f in fields(entity_cls)}
