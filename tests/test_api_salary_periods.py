"""
Tests for the /salary-periods and /employees endpoints
"""
from app.models.employee import Employee
from tests.conftest import API

URL = f"{API}/salary-periods/"


def test_create_period(client, auth_headers):
    response = client.post(
        URL,
        json={"employee_name": "Alice", "yearly_amount": 42000, "year": 2024},
        headers=auth_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["employee_name"] == "Alice"
    assert body["yearly_amount"] == 42000.0
    assert body["start_date"] == "2024-01-01"
    assert body["end_date"] is None
    assert body["days_in_year"] == 366


def test_create_period_missing_fields(client, auth_headers):
    response = client.post(URL, json={"employee_name": "Alice", "year": 2025}, headers=auth_headers)
    assert response.status_code == 400


def test_create_period_rejects_non_positive_amount(client, auth_headers):
    response = client.post(
        URL,
        json={"employee_name": "Alice", "yearly_amount": 0, "year": 2025},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_create_period_rejects_sub_cent_amount(client, auth_headers):
    response = client.post(
        URL,
        json={"employee_name": "Alice", "yearly_amount": "0.004", "year": 2025},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert client.get(f"{URL}employee/Alice", headers=auth_headers).json() == []


def test_replace_then_accrued_total(client, auth_headers):
    client.post(
        URL,
        json={"employee_name": "Alice", "yearly_amount": 365000, "year": 2025},
        headers=auth_headers,
    )
    response = client.put(
        URL,
        json={
            "employee_name": "Alice",
            "year": 2025,
            "start_date": "2025-07-01",
            "yearly_amount": 730000,
        },
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["start_date"] == "2025-07-01"

    history = client.get(f"{URL}employee/Alice", headers=auth_headers).json()
    assert [p["end_date"] for p in history] == ["2025-06-30", None]

    accrued = client.get(f"{URL}accrued", params={"date": "2025-12-31"}, headers=auth_headers)
    assert accrued.status_code == 200
    assert accrued.json() == {"date": "2025-12-31", "total_paid": 549000.0}


def test_replace_rejects_start_before_existing(client, auth_headers):
    client.put(
        URL,
        json={"employee_name": "Alice", "year": 2025, "start_date": "2025-06-01", "yearly_amount": 1000},
        headers=auth_headers,
    )
    response = client.put(
        URL,
        json={"employee_name": "Alice", "year": 2025, "start_date": "2025-03-01", "yearly_amount": 2000},
        headers=auth_headers,
    )
    assert response.status_code == 400


def test_accrued_requires_date(client, auth_headers):
    response = client.get(f"{URL}accrued", headers=auth_headers)
    assert response.status_code == 400


def test_exists(client, auth_headers):
    client.post(
        URL,
        json={"employee_name": "Alice", "yearly_amount": 1000, "year": 2025},
        headers=auth_headers,
    )
    client.put(
        URL,
        json={"employee_name": "Bob", "year": 2025, "start_date": "2025-04-01", "yearly_amount": 1000},
        headers=auth_headers,
    )

    def exists(name):
        response = client.get(
            f"{URL}exists", params={"employee_name": name, "year": 2025}, headers=auth_headers
        )
        assert response.status_code == 200
        return response.json()["exists"]

    assert exists("Alice") is True
    # Bob's period starts mid-year, only January 1 starts are matched
    assert exists("Bob") is False


def test_latest_per_employee(client, auth_headers):
    client.post(
        URL,
        json={"employee_name": "Alice", "yearly_amount": 20000, "year": 2025},
        headers=auth_headers,
    )
    client.put(
        URL,
        json={"employee_name": "Alice", "year": 2025, "start_date": "2025-09-01", "yearly_amount": 26000},
        headers=auth_headers,
    )
    client.post(
        URL,
        json={"employee_name": "Bob", "yearly_amount": 18000, "year": 2024},
        headers=auth_headers,
    )

    response = client.get(f"{URL}latest", params={"year": 2025}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == [
        {"employee_name": "Alice", "yearly_amount": 26000.0, "start_date": "2025-09-01"},
    ]


def test_list_employee_names(client, db_session, auth_headers):
    db_session.add_all([Employee(name="Zoé"), Employee(name="Alice"), Employee(name="Marc")])
    db_session.commit()

    response = client.get(f"{API}/employees/", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == ["Alice", "Marc", "Zoé"]
