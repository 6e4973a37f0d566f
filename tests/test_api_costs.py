"""
Tests for task cost entry and the /data cost summaries
"""
from datetime import date, datetime
from decimal import Decimal

import pytest

from app.models.costs import (
    OtherCost,
    OtherCostYearly,
    PackagingCost,
    SeedCost,
    SoilProduct,
    TaskCost,
)
from app.models.salary_period import SalaryPeriod
from tests.conftest import API

DATA = f"{API}/data"


@pytest.fixture
def task_costs(db_session):
    rows = [
        TaskCost(vegetable="CAROTTE", category="Récolte", sub_category="Arrachage", total_hours=Decimal("10"),
                 supervisor="Marie", total_cost=Decimal("200"), created_at=datetime(2025, 1, 15, 9, 0)),
        TaskCost(vegetable="CAROTTE", category="Désherbage", sub_category="Manuel", total_hours=Decimal("5"),
                 supervisor="Paul", total_cost=Decimal("100"), created_at=datetime(2025, 1, 31, 16, 30)),
        TaskCost(vegetable="CHOU", category="Récolte", sub_category="Coupe", total_hours=Decimal("2"),
                 supervisor="Marie", total_cost=Decimal("40"), created_at=datetime(2025, 2, 15, 8, 0)),
    ]
    db_session.add_all(rows)
    db_session.commit()
    return rows


def test_create_task_cost(client, auth_headers):
    response = client.post(
        f"{DATA}/costs",
        json={
            "vegetable": "CAROTTE",
            "category": "Récolte",
            "sub_category": "Arrachage",
            "total_hours": 12.5,
            "supervisor": "Marie",
            "total_cost": 250,
            "created_at": "2025-06-01T08:00:00",
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["id"] > 0
    assert body["total_hours"] == 12.5
    assert body["created_at"].startswith("2025-06-01T08:00:00")


def test_create_task_cost_defaults_created_at(client, auth_headers):
    response = client.post(
        f"{DATA}/costs",
        json={"vegetable": "CHOU", "category": "Plantation", "total_hours": 1, "total_cost": 20},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["created_at"][:4] == str(date.today().year)


def test_create_task_cost_missing_fields(client, auth_headers):
    response = client.post(f"{DATA}/costs", json={"vegetable": "CHOU"}, headers=auth_headers)
    assert response.status_code == 400


def test_summary_by_vegetable(client, auth_headers, task_costs):
    response = client.get(f"{DATA}/costs/summary", params={"groupBy": "vegetable"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [
        {"vegetable": "CAROTTE", "total_hours": 15.0, "total_cost": 300.0},
        {"vegetable": "CHOU", "total_hours": 2.0, "total_cost": 40.0},
    ]


def test_summary_by_sub_category_includes_category(client, auth_headers, task_costs):
    response = client.get(f"{DATA}/costs/summary", params={"groupBy": "sub_category"}, headers=auth_headers)
    assert response.status_code == 200
    rows = response.json()
    assert [(r["category"], r["sub_category"]) for r in rows] == [
        ("Désherbage", "Manuel"),
        ("Récolte", "Arrachage"),
        ("Récolte", "Coupe"),
    ]


def test_summary_date_range_is_inclusive(client, auth_headers, task_costs):
    response = client.get(
        f"{DATA}/costs/summary",
        params={"groupBy": "supervisor", "start": "2025-01-01", "end": "2025-01-31"},
        headers=auth_headers,
    )
    assert response.json() == [
        {"supervisor": "Marie", "total_hours": 10.0, "total_cost": 200.0},
        {"supervisor": "Paul", "total_hours": 5.0, "total_cost": 100.0},
    ]


def test_summary_start_only(client, auth_headers, task_costs):
    response = client.get(
        f"{DATA}/costs/summary",
        params={"groupBy": "vegetable", "start": "2025-02-01"},
        headers=auth_headers,
    )
    assert response.json() == [{"vegetable": "CHOU", "total_hours": 2.0, "total_cost": 40.0}]


@pytest.mark.parametrize("group_by", [None, "price", "vegetable; DROP TABLE task_costs"])
def test_summary_rejects_invalid_group_by(client, auth_headers, group_by):
    params = {"groupBy": group_by} if group_by else {}
    response = client.get(f"{DATA}/costs/summary", params=params, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid or missing groupBy field"


def test_latest_and_delete(client, auth_headers, task_costs):
    latest = client.get(f"{DATA}/costs/latest", headers=auth_headers).json()
    assert [c["vegetable"] for c in latest] == ["CHOU", "CAROTTE", "CAROTTE"]

    response = client.delete(f"{DATA}/costs/{latest[0]['id']}", headers=auth_headers)
    assert response.json() == {"success": True}
    assert len(client.get(f"{DATA}/costs/latest", headers=auth_headers).json()) == 2


def test_other_costs_current_year_includes_salaries(client, db_session, auth_headers):
    db_session.add_all([
        SalaryPeriod(employee_name="Alice", yearly_amount=Decimal("365000"),
                     start_date=date(2025, 1, 1), days_in_year=365),
        OtherCostYearly(category="location_terre", total=Decimal("500"), year=2025),
        OtherCostYearly(category="férié_tet", total=Decimal("200"), year=2025),
        OtherCostYearly(category="férié_tet", total=Decimal("25"), year=2025),
        OtherCostYearly(category="location_terre", total=Decimal("999"), year=2024),
    ])
    db_session.commit()

    response = client.get(
        f"{DATA}/costs/other_costs",
        params={"start": "2025-01-01", "end": "2025-01-10"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json() == [
        {"category": "salaire", "total_cost": 10000.0},
        {"category": "férié_tet", "total_cost": 225.0},
        {"category": "location_terre", "total_cost": 500.0},
    ]


def test_other_costs_legacy_year(client, db_session, auth_headers):
    db_session.add_all([
        OtherCost(category="carburant", cost=Decimal("100"), created_at=datetime(2024, 3, 1)),
        OtherCost(category="carburant", cost=Decimal("50"), created_at=datetime(2024, 5, 1)),
        OtherCost(category="assurance", cost=Decimal("70"), created_at=datetime(2024, 6, 1)),
        OtherCost(category="carburant", cost=Decimal("999"), created_at=datetime(2023, 12, 31)),
    ])
    db_session.commit()

    response = client.get(
        f"{DATA}/costs/other_costs",
        params={"start": "2024-01-01", "end": "2024-12-31"},
        headers=auth_headers,
    )
    assert response.json() == [
        {"category": "assurance", "total_cost": 70.0},
        {"category": "carburant", "total_cost": 150.0},
    ]


def test_other_costs_requires_a_date(client, auth_headers):
    response = client.get(f"{DATA}/costs/other_costs", headers=auth_headers)
    assert response.status_code == 400


def test_seed_costs(client, db_session, auth_headers):
    db_session.add_all([
        SeedCost(seed="carrot", cost=Decimal("30"), created_at=datetime(2025, 3, 1)),
        SeedCost(seed="carrot", cost=Decimal("20"), created_at=datetime(2025, 4, 1)),
        SeedCost(seed="cabbage", cost=Decimal("15"), created_at=datetime(2025, 4, 2)),
    ])
    db_session.commit()

    response = client.get(f"{DATA}/costs/seed_costs", params={"start": "2025-01-01"}, headers=auth_headers)
    assert response.json() == [
        {"seed": "cabbage", "total_cost": 15.0},
        {"seed": "carrot", "total_cost": 50.0},
    ]

    filtered = client.get(
        f"{DATA}/costs/seed_costs",
        params={"start": "2025-01-01", "seed": "carrot"},
        headers=auth_headers,
    )
    assert filtered.json() == [{"seed": "carrot", "total_cost": 50.0}]

    assert client.get(f"{DATA}/costs/seed_costs", headers=auth_headers).status_code == 400


def test_packaging_per_vegetable(client, db_session, auth_headers):
    db_session.add_all([
        PackagingCost(vegetable="CHOU", cost=Decimal("12"), created_at=datetime(2025, 5, 1)),
        PackagingCost(vegetable="CHOU", cost=Decimal("8"), created_at=datetime(2025, 5, 2)),
        PackagingCost(vegetable="BETTE", cost=Decimal("5"), created_at=datetime(2025, 5, 3)),
    ])
    db_session.commit()

    response = client.get(f"{DATA}/packaging_costs/per_vegetable", headers=auth_headers)
    assert response.json() == [
        {"vegetable": "BETTE", "total_cost": 5.0},
        {"vegetable": "CHOU", "total_cost": 20.0},
    ]


def test_soil_products_grouping(client, db_session, auth_headers):
    db_session.add_all([
        SoilProduct(vegetable="CHOU", category="engrais", cost=Decimal("40"), created_at=datetime(2025, 4, 1)),
        SoilProduct(vegetable="CHOU", category="chaux", cost=Decimal("10"), created_at=datetime(2025, 4, 1)),
        SoilProduct(vegetable="LAITUE", category="engrais", cost=Decimal("25"), created_at=datetime(2025, 6, 1)),
    ])
    db_session.commit()

    by_vegetable = client.get(f"{DATA}/costs/soil_products/vegetable", headers=auth_headers).json()
    assert by_vegetable == [
        {"vegetable": "CHOU", "total_cost": 50.0},
        {"vegetable": "LAITUE", "total_cost": 25.0},
    ]

    by_category = client.get(
        f"{DATA}/costs/soil_products/category",
        params={"end": "2025-05-01"},
        headers=auth_headers,
    ).json()
    assert by_category == [
        {"category": "chaux", "total_cost": 10.0},
        {"category": "engrais", "total_cost": 40.0},
    ]
