import pytest


@pytest.fixture
def sales(client, admin_headers):
    rows = [
        (100, "2024-01-05T00:00:00Z", 5),
        (50, "2024-01-20T00:00:00Z", 5),
        (400, "2024-01-25T00:00:00Z", 7),
        (30, "2024-03-01T00:00:00Z", 9),
    ]
    for amount, sale_date, rep in rows:
        response = client.post(
            "/api/sales",
            json={"amount": amount, "sale_date": sale_date, "representative_id": rep},
            headers=admin_headers,
        )
        assert response.status_code == 201


def test_metrics_over_all_sales(client, admin_headers, sales):
    response = client.get("/api/dashboard/metrics", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["total_sales"] == 4
    assert data["total_amount"] == 580.0
    assert data["average_amount"] == 145.0
    assert [r["representative_id"] for r in data["by_representative"]] == [7, 5, 9]
    assert data["by_representative"][1] == {"representative_id": 5, "sales_count": 2, "total_amount": 150.0}


def test_metrics_within_date_range(client, admin_headers, sales):
    response = client.get(
        "/api/dashboard/metrics",
        params={"start_date": "2024-01-01T00:00:00Z", "end_date": "2024-01-20T00:00:00Z"},
        headers=admin_headers,
    )

    data = response.json()["data"]
    assert data["total_sales"] == 2
    assert data["total_amount"] == 150.0
    assert data["average_amount"] == 75.0


def test_metrics_on_empty_store(client, admin_headers):
    data = client.get("/api/dashboard/metrics", headers=admin_headers).json()["data"]

    assert data["total_sales"] == 0
    assert data["total_amount"] == 0.0
    assert data["average_amount"] == 0.0
    assert data["by_representative"] == []


def test_metrics_half_open_range_is_400(client, admin_headers):
    response = client.get(
        "/api/dashboard/metrics", params={"start_date": "2024-01-01T00:00:00Z"}, headers=admin_headers
    )

    assert response.status_code == 400


def test_metrics_require_admin_role(client, user_headers):
    response = client.get("/api/dashboard/metrics", headers=user_headers)

    assert response.status_code == 403
    assert response.json()["is_error"] is True
