# FoodBazar API Tests
#
# Tests for:
# - Customer, product and transaction routes
# - Sale commit through the HTTP surface
# - Reports, health and factory reset

import pytest


class TestCustomersApi:

    @pytest.mark.smoke
    def test_list_customers_seeded(self, client):
        response = client.get("/api/customers")

        assert response.status_code == 200
        assert response.json["count"] == 5

    def test_create_customer(self, client):
        response = client.post("/api/customers", json={
            "name": "A", "email": "a@x.com", "phone": "1", "address": "x",
        })

        assert response.status_code == 201
        data = response.json
        assert data["id"] == "C006"
        assert data["totalPurchases"] == 0
        assert data["totalSpent"] == 0
        assert data["joinDate"] is not None

    def test_create_customer_missing_fields(self, client):
        response = client.post("/api/customers", json={"name": "A"})

        assert response.status_code == 400
        assert "Missing required fields" in response.json["error"]

    def test_update_missing_customer(self, client):
        response = client.put("/api/customers/C999", json={"name": "X"})

        assert response.status_code == 404
        assert client.get("/api/customers").json["count"] == 5

    def test_update_customer(self, client):
        response = client.put("/api/customers/C003", json={"address": "1 Ashram Road, Ahmedabad"})

        assert response.status_code == 200
        assert response.json["address"] == "1 Ashram Road, Ahmedabad"
        assert response.json["totalSpent"] == 530.0

    def test_customer_detail_includes_history(self, client):
        response = client.get("/api/customers/C002")

        assert response.status_code == 200
        assert [t["id"] for t in response.json["transactions"]] == ["T002", "T006"]

    def test_search_customers(self, client):
        response = client.get("/api/customers?q=reddy")

        assert [c["id"] for c in response.json["items"]] == ["C004"]

    def test_delete_customer(self, client):
        assert client.delete("/api/customers/C005").status_code == 200
        assert client.get("/api/customers/C005").status_code == 404
        assert client.delete("/api/customers/C005").status_code == 404


class TestProductsApi:

    def test_create_product(self, client):
        response = client.post("/api/products", json={
            "name": "Ghee", "category": "Dairy", "price": "550", "stock": 20, "unit": "litre",
        })

        assert response.status_code == 201
        assert response.json["id"] == "P011"
        assert response.json["price"] == 550.0

    def test_create_product_bad_stock(self, client):
        response = client.post("/api/products", json={
            "name": "Ghee", "category": "Dairy", "price": 550, "stock": "lots",
        })

        assert response.status_code == 400

    def test_create_product_nan_price(self, client):
        response = client.post("/api/products", json={
            "name": "X", "category": "Dairy", "price": "NaN", "stock": 1,
        })

        assert response.status_code == 400
        assert client.get("/api/products/P011").status_code == 404

    def test_filter_by_category_and_unmatched_search(self, client):
        response = client.get("/api/products?category=Dairy&q=zzz")

        assert response.status_code == 200
        assert response.json["items"] == []
        assert response.json["count"] == 0

    def test_categories(self, client):
        response = client.get("/api/products/categories")

        assert "Dairy" in response.json["items"]

    def test_update_product(self, client):
        response = client.put("/api/products/P008", json={"price": 45})

        assert response.status_code == 200
        assert response.json["price"] == 45.0

    def test_deleted_product_history_keeps_snapshot(self, client):
        assert client.delete("/api/products/P001").status_code == 200
        assert client.get("/api/products/P001").status_code == 404

        transaction = client.get("/api/transactions/T001").json
        assert transaction["items"][0]["productName"] == "Basmati Rice"
        assert transaction["items"][0]["price"] == 120.0


class TestTransactionsApi:

    @pytest.mark.smoke
    def test_commit_sale(self, client):
        response = client.post("/api/transactions", json={
            "customer_id": "C001",
            "payment_method": "card",
            "items": [{"product_id": "P001", "quantity": 3}],
        })

        assert response.status_code == 201
        data = response.json
        assert data["applied"] is True
        assert data["transaction"]["id"] == "T007"
        assert data["transaction"]["totalAmount"] == 360.0
        assert data["transaction"]["customerName"] == "Rajesh Kumar"
        assert data["transaction"]["items"][0]["subtotal"] == 360.0

        customer = client.get("/api/customers/C001").json
        assert customer["totalPurchases"] == 3
        assert customer["totalSpent"] == 825.0 + 360.0
        assert client.get("/api/products/P001").json["stock"] == 247

    def test_commit_requires_known_customer(self, client):
        response = client.post("/api/transactions", json={
            "customer_id": "C999",
            "items": [{"product_id": "P001", "quantity": 1}],
        })

        assert response.status_code == 400
        assert client.get("/api/transactions").json["count"] == 6

    def test_commit_requires_items(self, client):
        response = client.post("/api/transactions", json={"customer_id": "C001", "items": []})

        assert response.status_code == 400

    def test_commit_rejects_unknown_product(self, client):
        response = client.post("/api/transactions", json={
            "customer_id": "C001",
            "items": [{"product_id": "P404", "quantity": 1}],
        })

        assert response.status_code == 400
        assert "P404" in response.json["error"]

    def test_commit_rejects_bad_quantity(self, client):
        response = client.post("/api/transactions", json={
            "customer_id": "C001",
            "items": [{"product_id": "P001", "quantity": 0}],
        })

        assert response.status_code == 400

    def test_list_filters(self, client):
        response = client.get("/api/transactions?payment_method=mobile")

        assert [t["id"] for t in response.json["items"]] == ["T006", "T003"]

    def test_delete_transaction(self, client):
        assert client.delete("/api/transactions/T006").status_code == 200
        assert client.get("/api/transactions/T006").status_code == 404
        # Side effects are not reversed
        assert client.get("/api/customers/C002").json["totalPurchases"] == 2


class TestReportsApi:

    def test_dashboard(self, client):
        response = client.get("/api/reports/dashboard")

        assert response.status_code == 200
        assert response.json["total_revenue"] == 2505.0
        assert len(response.json["low_stock"]) == 4

    def test_analytics(self, client):
        response = client.get("/api/reports/analytics?range=all")

        assert response.status_code == 200
        assert response.json["category_sales"][0]["category"] == "Fruits"

    def test_analytics_bad_range(self, client):
        response = client.get("/api/reports/analytics?range=forever")

        assert response.status_code == 400

    def test_low_stock_threshold(self, client):
        response = client.get("/api/reports/low-stock?threshold=50")

        assert response.json["threshold"] == 50
        assert [p["id"] for p in response.json["items"]] == ["P009"]


class TestSystemApi:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json["status"] == "healthy"
        assert response.json["counts"] == {"customers": 5, "products": 10, "transactions": 6}

    def test_reset(self, client):
        client.post("/api/customers", json={"name": "A", "email": "a@x.com", "phone": "1"})

        response = client.post("/api/system/reset")

        assert response.status_code == 200
        assert response.json["counts"]["customers"] == 5
        assert client.get("/api/customers/C006").status_code == 404
