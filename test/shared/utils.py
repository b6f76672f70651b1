from datetime import date
from typing import Any

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import DESK_BASE, DESK_BOOKING_BASE
from test.util_constant import TEST_EMAIL, TEST_FIRST_NAME, TEST_LAST_NAME


def create_desk(client: TestClient, description: str) -> dict[str, Any]:
    response = client.post(DESK_BASE, json={'description': description})
    assert response.status_code == 201, response.text
    return response.json()


def book_desk(
    client: TestClient,
    *,
    booking_date: date,
    first_name: str = TEST_FIRST_NAME,
    last_name: str = TEST_LAST_NAME,
    email: str = TEST_EMAIL,
) -> dict[str, Any]:
    response = client.post(
        DESK_BOOKING_BASE,
        json={
            'first_name': first_name,
            'last_name': last_name,
            'email': email,
            'date': booking_date.isoformat(),
        },
    )
    assert response.status_code == 200, response.text
    return response.json()
