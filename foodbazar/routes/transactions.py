# foodbazar/routes/transactions.py
"""Point-of-sale transaction routes"""

from flask import Blueprint, current_app, jsonify, request

from ..services.store_service import get_store
from ..services.query_service import filter_transactions
from ..validation import ValidationError, build_transaction, build_transaction_item

transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")


@transactions_bp.get("")
def list_transactions():
    """
    List transactions, newest first.

    Query params:
    - q: str (optional) - search on transaction id, customer name or customer id
    - payment_method: str (optional) - cash, card, mobile or "all"
    """
    transactions = filter_transactions(
        get_store().list_transactions(),
        query=request.args.get("q"),
        payment_method=request.args.get("payment_method"),
    )
    return jsonify({"items": [t.to_dict() for t in transactions], "count": len(transactions)}), 200


@transactions_bp.post("")
def create_transaction():
    """
    Build and commit a sale.

    Body:
    - customer_id: str
    - payment_method: "cash" | "card" | "mobile" (default "cash")
    - items: [{"product_id": str, "quantity": int}, ...]

    Prices and names are taken from the current catalog at this moment.
    """
    data = request.get_json(silent=True) or {}
    store = get_store()

    customer_id = data.get("customer_id")
    raw_items = data.get("items") or []
    if not customer_id or not raw_items:
        return jsonify({"error": "customer_id and at least one item required"}), 400
    if not isinstance(raw_items, list):
        return jsonify({"error": "items must be a list"}), 400

    customer = store.get_customer(customer_id)
    if customer is None:
        return jsonify({"error": "Customer not found"}), 400

    try:
        items = []
        for raw in raw_items:
            product_id = raw.get("product_id") if isinstance(raw, dict) else None
            if not product_id:
                return jsonify({"error": "Every item needs a product_id"}), 400
            product = store.get_product(product_id)
            if product is None:
                return jsonify({"error": f"Product not found: {product_id}"}), 400
            items.append(build_transaction_item(product, raw.get("quantity", 1)))

        transaction = build_transaction(
            store.next_transaction_id(),
            customer,
            items,
            data.get("payment_method", "cash"),
        )
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        result = store.commit_transaction(transaction)
    except Exception:
        current_app.logger.exception("Failed to commit transaction")
        return jsonify({"error": "Internal server error"}), 500

    return jsonify(result.to_dict()), 201


@transactions_bp.get("/<transaction_id>")
def get_transaction(transaction_id: str):
    transaction = get_store().get_transaction(transaction_id)
    if transaction is None:
        return jsonify({"error": "Transaction not found"}), 404
    return jsonify(transaction.to_dict()), 200


@transactions_bp.delete("/<transaction_id>")
def delete_transaction(transaction_id: str):
    """Removes the record only; customer counters and stock are not reversed."""
    if not get_store().delete_transaction(transaction_id):
        return jsonify({"error": "Transaction not found"}), 404
    return jsonify({"ok": True}), 200
