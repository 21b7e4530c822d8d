from flask import Blueprint, current_app, jsonify, request

from foodbazar.services import reporting_service
from foodbazar.services.store_service import get_store


reports_bp = Blueprint("reports", __name__, url_prefix="/api/reports")


@reports_bp.get("/dashboard")
def dashboard():
    store = get_store()
    report = reporting_service.dashboard_summary(
        customers=store.list_customers(),
        products=store.list_products(),
        transactions=store.list_transactions(),
        low_stock_threshold=current_app.config["FOODBAZAR_LOW_STOCK_THRESHOLD"],
    )
    return jsonify(report), 200


@reports_bp.get("/analytics")
def analytics():
    time_range = request.args.get("range", "all")
    store = get_store()

    try:
        report = reporting_service.analytics_report(
            customers=store.list_customers(),
            products=store.list_products(),
            transactions=store.list_transactions(),
            time_range=time_range,
        )
        return jsonify(report), 200
    except reporting_service.ReportError as exc:
        return jsonify({"error": str(exc)}), 400


@reports_bp.get("/low-stock")
def low_stock():
    threshold = request.args.get("threshold", type=int)
    if threshold is None:
        threshold = current_app.config["FOODBAZAR_LOW_STOCK_THRESHOLD"]

    products = reporting_service.low_stock(get_store().list_products(), threshold)
    return jsonify({
        "threshold": threshold,
        "items": [p.to_dict() for p in products],
        "count": len(products),
    }), 200
