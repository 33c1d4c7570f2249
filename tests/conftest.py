"""Shared payload fixtures modelled on the dashboard's API responses."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def wire_booking() -> dict[str, Any]:
    """A nested booking record as the backend returns it."""
    return {
        "id": "bk_1",
        "equipment_type_id": 7,
        "start_date": "2024-03-01",
        "end_date": "2024-03-05",
        "total_amount": 1250.5,
        "is_paid": False,
        "cancelled_at": None,
        "renter": {"full_name": "Sara Ali", "phone_number": "+966500000000"},
        "line_items": [
            {"item_id": 1, "unit_price": 100},
            {"item_id": 2, "unit_price": 150},
        ],
        "tags": ["heavy_equipment", "with_operator"],
    }


@pytest.fixture
def client_booking() -> dict[str, Any]:
    """The same booking record in client notation."""
    return {
        "id": "bk_1",
        "equipmentTypeId": 7,
        "startDate": "2024-03-01",
        "endDate": "2024-03-05",
        "totalAmount": 1250.5,
        "isPaid": False,
        "cancelledAt": None,
        "renter": {"fullName": "Sara Ali", "phoneNumber": "+966500000000"},
        "lineItems": [
            {"itemId": 1, "unitPrice": 100},
            {"itemId": 2, "unitPrice": 150},
        ],
        "tags": ["heavy_equipment", "with_operator"],
    }
