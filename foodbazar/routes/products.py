# foodbazar/routes/products.py
"""
Product catalog routes.
"""
from flask import Blueprint, current_app, jsonify, request

from ..services.store_service import get_store
from ..services.query_service import filter_products, list_categories
from ..validation import (
    PRODUCT_POLICY,
    ValidationError,
    build_product,
    enforce_rules_product,
    validate_payload,
)

products_bp = Blueprint("products", __name__, url_prefix="/api/products")


@products_bp.get("")
def list_products():
    """
    List products.

    Query params:
    - q: str (optional) - search on name, category, id or supplier
    - category: str (optional) - exact category, "all" for no filter
    """
    products = filter_products(
        get_store().list_products(),
        query=request.args.get("q"),
        category=request.args.get("category"),
    )
    return jsonify({"items": [p.to_dict() for p in products], "count": len(products)}), 200


@products_bp.get("/categories")
def categories():
    return jsonify({"items": list_categories(get_store().list_products())}), 200


@products_bp.post("")
def create_product():
    payload = request.get_json(silent=True) or {}

    try:
        patch = validate_payload(payload=payload, policy=PRODUCT_POLICY, partial=False)
        enforce_rules_product(patch)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    try:
        store = get_store()
        product = build_product(store.next_product_id(), patch)
        store.add_product(product)
    except Exception:
        current_app.logger.exception("Failed to create product")
        return jsonify({"error": "Internal server error"}), 500

    return jsonify(product.to_dict()), 201


@products_bp.get("/<product_id>")
def get_product(product_id: str):
    product = get_store().get_product(product_id)
    if product is None:
        return jsonify({"error": "Product not found"}), 404
    return jsonify(product.to_dict()), 200


@products_bp.put("/<product_id>")
def update_product(product_id: str):
    payload = request.get_json(silent=True) or {}

    try:
        patch = validate_payload(payload=payload, policy=PRODUCT_POLICY, partial=True)
        enforce_rules_product(patch)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400

    store = get_store()
    if not store.update_product(product_id, patch):
        return jsonify({"error": "Product not found"}), 404

    return jsonify(store.get_product(product_id).to_dict()), 200


@products_bp.delete("/<product_id>")
def delete_product(product_id: str):
    """Transaction items keep their product name and price snapshots."""
    if not get_store().delete_product(product_id):
        return jsonify({"error": "Product not found"}), 404
    return jsonify({"ok": True}), 200
