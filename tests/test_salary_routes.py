"""
Tests for the /salaries endpoints.
"""
import pytest


def salary_payload(**overrides):
    payload = {
        "employeeNumber": 10001,
        "salary": 10000,
        "fromDate": "2020-01-01",
        "toDate": "2020-02-01",
    }
    payload.update(overrides)
    return payload


class TestCreateSalary:

    def test_returns_created_salary(self, client, employee_number):
        payload = salary_payload()

        response = client.post("/salaries", json=payload)

        assert response.status_code == 201
        assert response.json() == payload

    @pytest.mark.parametrize("overrides, field", [
        ({"fromDate": "notAdate"}, "body/fromDate"),
        ({"toDate": "notAdate"}, "body/toDate"),
        ({"salary": 0}, "body/salary"),
    ])
    def test_rejects_invalid_payload(self, client, employee_number, overrides, field):
        response = client.post("/salaries", json=salary_payload(**overrides))

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith(field)

    def test_rejects_reversed_range(self, client, employee_number):
        response = client.post("/salaries", json=salary_payload(fromDate="2020-03-01"))

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid salary date range"}}

    def test_rejects_duplicate(self, client, existing_salaries):
        response = client.post("/salaries", json=salary_payload(fromDate="1986-06-26", toDate="1986-06-27"))

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Salary already exists"}}

    def test_rejects_overlap(self, client, existing_salaries):
        response = client.post("/salaries", json=salary_payload(fromDate="1986-06-25", toDate="1986-06-27"))

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid salary date range"}}


class TestGetSalary:

    def test_returns_salary(self, client, existing_salaries):
        response = client.get("/salaries/10001/1986-06-26")

        assert response.status_code == 200
        assert response.json() == {
            "employeeNumber": 10001,
            "salary": 60117,
            "fromDate": "1986-06-26",
            "toDate": "1987-06-26",
        }

    def test_returns_404_when_missing(self, client, employee_number):
        response = client.get("/salaries/100/2020-01-01")

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Salary not found"}}

    def test_lists_salaries_of_employee(self, client, existing_salaries):
        response = client.get("/salaries/10001")

        assert response.status_code == 200
        assert [s["fromDate"] for s in response.json()] == ["1986-06-26", "1987-06-26"]

    def test_rejects_invalid_employee_number(self, client):
        response = client.get("/salaries/0")

        assert response.status_code == 400


class TestPatchSalary:

    def test_returns_edited_salary(self, client, existing_salaries):
        response = client.patch("/salaries/10001/1986-06-26", json={"salary": 100})

        assert response.status_code == 200
        assert response.json()["salary"] == 100
        assert response.json()["toDate"] == "1987-06-26"

    def test_returns_404_when_missing(self, client, employee_number):
        response = client.patch("/salaries/2002/2020-01-01", json={"salary": 100})

        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Salary not found"}}

    def test_rejects_overlapping_dates(self, client, existing_salaries):
        response = client.patch("/salaries/10001/1987-06-26", json={"fromDate": "1987-01-01"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid salary date range"}}

    @pytest.mark.parametrize("payload", [{"fromDate": "notAdate"}, {"toDate": "notAdate"}, {"salary": 0}])
    def test_rejects_invalid_payload(self, client, existing_salaries, payload):
        response = client.patch("/salaries/10001/1986-06-26", json=payload)

        assert response.status_code == 400


class TestDeleteSalary:

    def test_deletes_then_404(self, client, existing_salaries):
        first = client.delete("/salaries/10001/1986-06-26")
        second = client.delete("/salaries/10001/1986-06-26")

        assert first.status_code == 204
        assert first.content == b""
        assert second.status_code == 404
        assert second.json() == {"error": {"message": "Salary not found"}}


class TestDateFormat:

    def test_rejects_datetime_in_body(self, client, employee_number):
        response = client.post("/salaries", json=salary_payload(fromDate="2020-01-01T00:00:00"))

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("body/fromDate")

    def test_rejects_datetime_in_path(self, client, existing_salaries):
        response = client.get("/salaries/10001/1986-06-26T00:00:00")

        assert response.status_code == 400
        assert response.json()["error"]["message"].startswith("path/fromDate")

    def test_path_errors_use_camel_case_names(self, client):
        assert client.get("/salaries/10001/notAdate").json()["error"]["message"].startswith("path/fromDate")
        assert client.get("/salaries/0").json()["error"]["message"].startswith("path/employeeNumber")

    def test_openapi_paths_use_camel_case_names(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        assert "/salaries/{employeeNumber}/{fromDate}" in paths
        assert "/titles/{employeeNumber}/{title}/{fromDate}" in paths
        assert "/employees/{employeeNumber}" in paths
