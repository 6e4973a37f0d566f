"""
Tests for the /revenues endpoints
"""
from datetime import datetime
from decimal import Decimal

import pytest

from app.models.costs import TaskCost
from app.models.revenue import Revenue
from tests.conftest import API


@pytest.fixture
def romaine_data(db_session):
    db_session.add_all([
        Revenue(vegetable="CŒUR DE ROMAINE", total_revenue="1,000.00", year_from=2024),
        Revenue(vegetable="LAITUE ROMAINE", total_revenue="3,000", year_from=2024),
        Revenue(vegetable="CAROTTE", total_revenue="5,500.50", year_from=2025),
        Revenue(vegetable="CAROTTE", total_revenue="500", year_from=2023),
        TaskCost(vegetable="CŒUR DE ROMAINE", category="Récolte", total_hours=Decimal("4"),
                 total_cost=Decimal("100"), created_at=datetime(2024, 6, 1)),
        TaskCost(vegetable="LAITUE ROMAINE", category="Récolte", total_hours=Decimal("10"),
                 total_cost=Decimal("300"), created_at=datetime(2024, 6, 1)),
        TaskCost(vegetable="CAROTTE", category="Récolte", total_hours=Decimal("10"),
                 total_cost=Decimal("999"), created_at=datetime(2024, 6, 1)),
    ])
    db_session.commit()


def test_romaine_redistribution(client, auth_headers, romaine_data):
    response = client.get(f"{API}/revenues/romaine-redistribution", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [
        {"vegetable": "CŒUR DE ROMAINE", "redistributed_cost": 100.0},
        {"vegetable": "LAITUE ROMAINE", "redistributed_cost": 300.0},
    ]


def test_romaine_redistribution_without_data(client, auth_headers):
    response = client.get(f"{API}/revenues/romaine-redistribution", headers=auth_headers)
    assert response.json() == []


def test_revenues_by_year(client, auth_headers, romaine_data):
    response = client.get(f"{API}/revenues/by-year", params={"year_from": 2024}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [
        {"vegetable": "CAROTTE", "total_revenue": 5500.5},
        {"vegetable": "LAITUE ROMAINE", "total_revenue": 3000.0},
        {"vegetable": "CŒUR DE ROMAINE", "total_revenue": 1000.0},
    ]


def test_revenues_by_year_requires_parameter(client, auth_headers):
    response = client.get(f"{API}/revenues/by-year", headers=auth_headers)
    assert response.status_code == 400
