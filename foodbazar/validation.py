from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from foodbazar.models import Customer, Product, Transaction, TransactionItem, PAYMENT_METHODS
from foodbazar.time_utils import utcnow


# Maximum unit price accepted from collaborators
MAX_PRICE = 9_999_999.99


class ValidationError(ValueError):
    """400-level input problem."""


@dataclass(frozen=True)
class FieldSpec:
    attr: str
    kind: str  # "str", "float", "int"
    blank_ok: bool = True


@dataclass(frozen=True)
class EntityValidationPolicy:
    """
    Central policy layer:
    - fields: wire name -> attribute name and type, for every field clients may set
    - required_on_create: wire names required for POST
    """
    fields: dict[str, FieldSpec]
    required_on_create: frozenset[str] = frozenset()


CUSTOMER_POLICY = EntityValidationPolicy(
    fields={
        "name": FieldSpec("name", "str", blank_ok=False),
        "email": FieldSpec("email", "str", blank_ok=False),
        "phone": FieldSpec("phone", "str", blank_ok=False),
        "address": FieldSpec("address", "str"),
    },
    required_on_create=frozenset({"name", "email", "phone"}),
)

PRODUCT_POLICY = EntityValidationPolicy(
    fields={
        "name": FieldSpec("name", "str", blank_ok=False),
        "category": FieldSpec("category", "str", blank_ok=False),
        "price": FieldSpec("price", "float"),
        "stock": FieldSpec("stock", "int"),
        "unit": FieldSpec("unit", "str"),
        "supplier": FieldSpec("supplier", "str"),
        "description": FieldSpec("description", "str"),
    },
    required_on_create=frozenset({"name", "category", "price", "stock"}),
)


def _coerce_value(key: str, kind: str, value: Any):
    if kind == "int":
        # Reject bools, floats and decimal strings
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            stripped = value.strip()
            if stripped.lstrip("-").isdigit():
                return int(stripped)
        raise ValidationError(f"{key} must be an integer")

    if kind == "float":
        if isinstance(value, bool):
            raise ValidationError(f"{key} must be a number")
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                raise ValidationError(f"{key} must be a number")
        else:
            raise ValidationError(f"{key} must be a number")
        # Reject NaN and infinity
        if not math.isfinite(number):
            raise ValidationError(f"{key} must be a finite number")
        return number

    if value is None:
        raise ValidationError(f"{key} cannot be null")
    return str(value).strip()


def validate_payload(*, payload: Any, policy: EntityValidationPolicy, partial: bool) -> dict:
    """
    Validates + normalizes incoming JSON against a policy.

    Returns a patch dict keyed by entity attribute names, ready for the
    store's update_* methods or an entity constructor.

    partial=False: create semantics (enforce required_on_create)
    partial=True: patch semantics (validate only provided keys)
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValidationError("Invalid JSON payload")

    if not partial:
        missing = sorted(f for f in policy.required_on_create if f not in payload)
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    for k in payload.keys():
        if k not in policy.fields:
            raise ValidationError(f"Field not allowed: {k}")

    patch: dict = {}
    for k, raw in payload.items():
        spec = policy.fields[k]
        val = _coerce_value(k, spec.kind, raw)
        if spec.kind == "str" and not spec.blank_ok and val == "":
            raise ValidationError(f"{k} cannot be blank")
        patch[spec.attr] = val

    return patch


def enforce_rules_product(patch: dict) -> None:
    """Business rules beyond field types."""
    if "price" in patch:
        price = patch["price"]
        if price < 0:
            raise ValidationError("price must be >= 0")
        if price > MAX_PRICE:
            raise ValidationError(f"price cannot exceed {MAX_PRICE:,.2f}")


def build_customer(customer_id: str, patch: dict, join_date: date | None = None) -> Customer:
    """New customer from a validated create patch; counters start at zero."""
    return Customer(
        id=customer_id,
        name=patch["name"],
        email=patch.get("email", ""),
        phone=patch.get("phone", ""),
        address=patch.get("address", ""),
        join_date=join_date or utcnow().date(),
        total_purchases=0,
        total_spent=0.0,
    )


def build_product(product_id: str, patch: dict) -> Product:
    return Product(id=product_id, **patch)


def parse_quantity(value: Any) -> int:
    quantity = _coerce_value("quantity", "int", value)
    if quantity <= 0:
        raise ValidationError("quantity must be > 0")
    return quantity


def build_transaction_item(product: Product, quantity: int) -> TransactionItem:
    """Line item with the product's current name and price snapshotted."""
    quantity = parse_quantity(quantity)
    return TransactionItem(
        product_id=product.id,
        product_name=product.name,
        quantity=quantity,
        price=product.price,
        subtotal=product.price * quantity,
    )


def build_transaction(
    transaction_id: str,
    customer: Customer,
    items: list[TransactionItem],
    payment_method: str,
    now: datetime | None = None,
) -> Transaction:
    """
    Assemble a completed transaction ready for commit.

    total_amount is the sum of the item subtotals; customer_name is a
    snapshot. Requires at least one item and a known payment method.
    """
    if not items:
        raise ValidationError("At least one item is required")
    if payment_method not in PAYMENT_METHODS:
        raise ValidationError(f"payment_method must be one of: {', '.join(PAYMENT_METHODS)}")

    return Transaction(
        id=transaction_id,
        customer_id=customer.id,
        customer_name=customer.name,
        date=now or utcnow(),
        items=list(items),
        total_amount=sum(item.subtotal for item in items),
        payment_method=payment_method,
        status="completed",
    )
