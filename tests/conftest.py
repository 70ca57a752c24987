"""Shared receipt fixtures."""

from decimal import Decimal

import pytest

from receipt_points.models import Item, Receipt


@pytest.fixture
def target_receipt():
    return Receipt(
        retailer="Target",
        purchase_date="2022-01-01",
        purchase_time="13:01",
        total=Decimal("35.35"),
        items=(
            Item("Mountain Dew 12PK", Decimal("6.49")),
            Item("Emils Cheese Pizza", Decimal("12.25")),
            Item("Knorr Creamy Chicken", Decimal("1.26")),
            Item("Doritos Nacho Cheese", Decimal("3.35")),
            Item("   Klarbrunn 12-PK 12 FL OZ  ", Decimal("12.00")),
        ),
    )


@pytest.fixture
def corner_market_receipt():
    return Receipt(
        retailer="M&M Corner Market",
        purchase_date="2022-03-20",
        purchase_time="14:33",
        total=Decimal("9.00"),
        items=tuple(Item("Gatorade", Decimal("2.25")) for _ in range(4)),
    )


@pytest.fixture
def target_payload():
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-01",
        "purchaseTime": "13:01",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
        "total": "35.35",
    }
