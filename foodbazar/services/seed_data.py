# Overview: Canned demo dataset used to seed empty storage and for factory reset.

from __future__ import annotations

from ..models import Customer, Product, Transaction

# Customer counters agree with SEED_TRANSACTIONS below.
SEED_CUSTOMERS = [
    {
        "id": "C001", "name": "Rajesh Kumar", "email": "rajesh.kumar@email.com",
        "phone": "+91 98765 43210", "address": "12 MG Road, Bengaluru",
        "joinDate": "2024-01-15", "totalPurchases": 2, "totalSpent": 825.0,
    },
    {
        "id": "C002", "name": "Priya Sharma", "email": "priya.sharma@email.com",
        "phone": "+91 98765 43211", "address": "45 Park Street, Kolkata",
        "joinDate": "2024-02-20", "totalPurchases": 2, "totalSpent": 550.0,
    },
    {
        "id": "C003", "name": "Amit Patel", "email": "amit.patel@email.com",
        "phone": "+91 98765 43212", "address": "78 CG Road, Ahmedabad",
        "joinDate": "2024-03-10", "totalPurchases": 1, "totalSpent": 530.0,
    },
    {
        "id": "C004", "name": "Sneha Reddy", "email": "sneha.reddy@email.com",
        "phone": "+91 98765 43213", "address": "23 Banjara Hills, Hyderabad",
        "joinDate": "2024-04-05", "totalPurchases": 1, "totalSpent": 600.0,
    },
    {
        "id": "C005", "name": "Vikram Singh", "email": "vikram.singh@email.com",
        "phone": "+91 98765 43214", "address": "9 Civil Lines, Jaipur",
        "joinDate": "2024-05-12", "totalPurchases": 0, "totalSpent": 0.0,
    },
]

SEED_PRODUCTS = [
    {
        "id": "P001", "name": "Basmati Rice", "category": "Grains", "price": 120.0,
        "stock": 250, "unit": "kg", "supplier": "India Gate Traders",
        "description": "Premium aged long-grain basmati rice",
    },
    {
        "id": "P002", "name": "Toor Dal", "category": "Pulses", "price": 140.0,
        "stock": 180, "unit": "kg", "supplier": "Sharma Pulses",
        "description": "Unpolished split pigeon peas",
    },
    {
        "id": "P003", "name": "Amul Milk", "category": "Dairy", "price": 60.0,
        "stock": 90, "unit": "litre", "supplier": "Amul Dairy Co-op",
        "description": "Full cream pasteurised milk",
    },
    {
        "id": "P004", "name": "Paneer", "category": "Dairy", "price": 85.0,
        "stock": 60, "unit": "200g pack", "supplier": "Amul Dairy Co-op",
        "description": "Fresh cottage cheese",
    },
    {
        "id": "P005", "name": "Sunflower Oil", "category": "Oils", "price": 180.0,
        "stock": 120, "unit": "litre", "supplier": "Fortune Foods",
        "description": "Refined sunflower cooking oil",
    },
    {
        "id": "P006", "name": "Whole Wheat Atta", "category": "Grains", "price": 45.0,
        "stock": 300, "unit": "kg", "supplier": "Aashirvaad Mills",
        "description": "Stone-ground whole wheat flour",
    },
    {
        "id": "P007", "name": "Masala Chai", "category": "Beverages", "price": 250.0,
        "stock": 75, "unit": "500g pack", "supplier": "Tata Consumer",
        "description": "Assam tea blended with spices",
    },
    {
        "id": "P008", "name": "Fresh Tomatoes", "category": "Vegetables", "price": 40.0,
        "stock": 140, "unit": "kg", "supplier": "Local Farms Co.",
        "description": "Farm fresh red tomatoes",
    },
    {
        "id": "P009", "name": "Alphonso Mangoes", "category": "Fruits", "price": 600.0,
        "stock": 40, "unit": "dozen", "supplier": "Ratnagiri Orchards",
        "description": "Seasonal Ratnagiri Alphonso mangoes",
    },
    {
        "id": "P010", "name": "Curd", "category": "Dairy", "price": 50.0,
        "stock": 110, "unit": "500g cup", "supplier": "Mother Dairy",
        "description": "Set curd made from toned milk",
    },
]


def _item(product_id: str, name: str, quantity: int, price: float) -> dict:
    return {
        "productId": product_id,
        "productName": name,
        "quantity": quantity,
        "price": price,
        "subtotal": quantity * price,
    }


SEED_TRANSACTIONS = [
    {
        "id": "T001", "customerId": "C001", "customerName": "Rajesh Kumar",
        "date": "2024-06-01T10:15:00Z",
        "items": [_item("P001", "Basmati Rice", 2, 120.0), _item("P003", "Amul Milk", 3, 60.0)],
        "totalAmount": 420.0, "paymentMethod": "cash", "status": "completed",
    },
    {
        "id": "T002", "customerId": "C002", "customerName": "Priya Sharma",
        "date": "2024-06-02T11:30:00Z",
        "items": [
            _item("P004", "Paneer", 2, 85.0),
            _item("P010", "Curd", 2, 50.0),
            _item("P008", "Fresh Tomatoes", 1, 40.0),
        ],
        "totalAmount": 310.0, "paymentMethod": "card", "status": "completed",
    },
    {
        "id": "T003", "customerId": "C001", "customerName": "Rajesh Kumar",
        "date": "2024-06-03T16:45:00Z",
        "items": [_item("P005", "Sunflower Oil", 1, 180.0), _item("P006", "Whole Wheat Atta", 5, 45.0)],
        "totalAmount": 405.0, "paymentMethod": "mobile", "status": "completed",
    },
    {
        "id": "T004", "customerId": "C003", "customerName": "Amit Patel",
        "date": "2024-06-04T09:20:00Z",
        "items": [_item("P007", "Masala Chai", 1, 250.0), _item("P002", "Toor Dal", 2, 140.0)],
        "totalAmount": 530.0, "paymentMethod": "card", "status": "completed",
    },
    {
        "id": "T005", "customerId": "C004", "customerName": "Sneha Reddy",
        "date": "2024-06-05T18:05:00Z",
        "items": [_item("P009", "Alphonso Mangoes", 1, 600.0)],
        "totalAmount": 600.0, "paymentMethod": "cash", "status": "completed",
    },
    {
        "id": "T006", "customerId": "C002", "customerName": "Priya Sharma",
        "date": "2024-06-06T12:00:00Z",
        "items": [_item("P003", "Amul Milk", 2, 60.0), _item("P001", "Basmati Rice", 1, 120.0)],
        "totalAmount": 240.0, "paymentMethod": "mobile", "status": "completed",
    },
]


def seed_customers() -> list[Customer]:
    """Fresh Customer objects; callers may mutate them freely."""
    return [Customer.from_dict(row) for row in SEED_CUSTOMERS]


def seed_products() -> list[Product]:
    return [Product.from_dict(row) for row in SEED_PRODUCTS]


def seed_transactions() -> list[Transaction]:
    return [Transaction.from_dict(row) for row in SEED_TRANSACTIONS]
