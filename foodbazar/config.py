# foodbazar/config.py
from __future__ import annotations
import os


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # SQLite DB stored in instance/foodbazar.sqlite3
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",  # optional alternative location
        "sqlite:///foodbazar.sqlite3",  # default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Storage keys are "<prefix>_customers", "<prefix>_products", "<prefix>_transactions"
    FOODBAZAR_STORAGE_PREFIX = os.environ.get("FOODBAZAR_STORAGE_PREFIX", "foodbazar")

    # Products with stock strictly below this are reported as low stock
    FOODBAZAR_LOW_STOCK_THRESHOLD = int(os.environ.get("FOODBAZAR_LOW_STOCK_THRESHOLD", "100"))

    # Seed missing collections with the demo dataset on first load
    FOODBAZAR_SEED_ON_EMPTY = os.environ.get("FOODBAZAR_SEED_ON_EMPTY", "true").lower() == "true"


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
