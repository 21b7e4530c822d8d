# foodbazar/routes/system.py
"""
System health and maintenance endpoints.
"""

import time
from flask import Blueprint, current_app, jsonify

from ..services.store_service import get_store
from ..services.storage_service import SqlKeyValueStorage
from foodbazar.time_utils import utcnow, to_utc_z

system_bp = Blueprint("system", __name__)


def check_storage_health() -> dict:
    """
    Check storage connectivity and report the persisted collections.

    Returns dict with status and details.
    """
    start_time = time.time()
    try:
        entries = SqlKeyValueStorage().entries()
        elapsed_ms = (time.time() - start_time) * 1000
        return {
            "status": "healthy",
            "latency_ms": round(elapsed_ms, 2),
            "details": {"entries": entries},
        }
    except Exception:
        elapsed_ms = (time.time() - start_time) * 1000
        current_app.logger.exception("Storage health check failed")
        return {
            "status": "unhealthy",
            "latency_ms": round(elapsed_ms, 2),
            "error": "Storage error",
        }


@system_bp.get("/api/health")
def health():
    storage = check_storage_health()
    body = {
        "status": storage["status"],
        "timestamp": to_utc_z(utcnow()),
        "storage": storage,
    }
    if storage["status"] != "healthy":
        return jsonify(body), 503

    body["counts"] = get_store().counts()
    return jsonify(body), 200


@system_bp.post("/api/system/reset")
def reset_data():
    """Factory reset: discard persisted data and reseed the demo dataset."""
    try:
        store = get_store()
        store.reset_to_seed_data()
        return jsonify({"ok": True, "counts": store.counts()}), 200
    except Exception:
        current_app.logger.exception("Failed to reset data")
        return jsonify({"error": "Internal server error"}), 500
