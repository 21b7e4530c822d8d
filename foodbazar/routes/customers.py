# foodbazar/routes/customers.py
"""
Customer routes.

Input is validated here; the store accepts whatever it is given.
"""
from flask import Blueprint, current_app, jsonify, request

from ..services.store_service import get_store
from ..services.query_service import search_customers
from ..validation import CUSTOMER_POLICY, ValidationError, build_customer, validate_payload

customers_bp = Blueprint("customers", __name__, url_prefix="/api/customers")


@customers_bp.get("")
def list_customers():
    """
    List customers.

    Query params:
    - q: str (optional) - search on name, email, phone or id
    """
    customers = search_customers(get_store().list_customers(), request.args.get("q"))
    return jsonify({"items": [c.to_dict() for c in customers], "count": len(customers)}), 200


@customers_bp.post("")
def create_customer():
    payload = request.get_json(silent=True) or {}

    try:
        patch = validate_payload(payload=payload, policy=CUSTOMER_POLICY, partial=False)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        store = get_store()
        customer = build_customer(store.next_customer_id(), patch)
        store.add_customer(customer)
    except Exception:
        current_app.logger.exception("Failed to create customer")
        return jsonify({"error": "Internal server error"}), 500

    return jsonify(customer.to_dict()), 201


@customers_bp.get("/<customer_id>")
def get_customer(customer_id: str):
    """Customer with their purchase history."""
    store = get_store()
    customer = store.get_customer(customer_id)
    if customer is None:
        return jsonify({"error": "Customer not found"}), 404

    transactions = store.query_transactions_by_customer(customer_id)
    body = customer.to_dict()
    body["transactions"] = [t.to_dict() for t in transactions]
    return jsonify(body), 200


@customers_bp.put("/<customer_id>")
def update_customer(customer_id: str):
    payload = request.get_json(silent=True) or {}

    try:
        patch = validate_payload(payload=payload, policy=CUSTOMER_POLICY, partial=True)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    store = get_store()
    if not store.update_customer(customer_id, patch):
        return jsonify({"error": "Customer not found"}), 404

    return jsonify(store.get_customer(customer_id).to_dict()), 200


@customers_bp.delete("/<customer_id>")
def delete_customer(customer_id: str):
    """Past transactions keep their customer id and name snapshot."""
    if not get_store().delete_customer(customer_id):
        return jsonify({"error": "Customer not found"}), 404
    return jsonify({"ok": True}), 200
