"""API tests for case records"""

import re
from datetime import datetime, timezone

import pytest

YEAR = datetime.now(timezone.utc).year


def parse_ts(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.mark.api
class TestCases:

    def test_requires_session(self, client):
        assert client.get("/api/cases").status_code == 401
        assert client.post("/api/cases", json={"title": "x"}).status_code == 401

    def test_list_seeded_cases(self, admin_client):
        response = admin_client.get("/api/cases")

        assert response.status_code == 200
        cases = response.json()["cases"]
        assert len(cases) == 3
        assert all(re.fullmatch(rf"CASE-{YEAR}-\d{{3}}", c["caseNumber"]) for c in cases)

    def test_create_case(self, admin_client):
        me = admin_client.get("/api/auth/me").json()["user"]

        response = admin_client.post(
            "/api/cases",
            json={"title": "Vandalism at park", "description": "Benches damaged", "priority": "High"},
        )

        assert response.status_code == 201
        case = response.json()["case"]
        assert case["status"] == "Open"
        assert case["priority"] == "High"
        assert case["caseNumber"] == f"CASE-{YEAR}-004"
        assert case["createdById"] == me["id"]
        assert case["createdAt"] == case["updatedAt"]

    def test_client_cannot_set_server_fields(self, admin_client):
        response = admin_client.post(
            "/api/cases", json={"title": "Sneaky", "caseNumber": "CASE-1999-999", "id": 77}
        )

        case = response.json()["case"]
        assert case["caseNumber"] != "CASE-1999-999"
        assert case["id"] != 77

    def test_create_requires_title(self, admin_client):
        response = admin_client.post("/api/cases", json={"description": "untitled"})

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid input"}

    def test_malformed_json(self, admin_client):
        response = admin_client.post(
            "/api/cases", content="{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400

    def test_get_case(self, admin_client):
        response = admin_client.get("/api/cases/1")

        assert response.status_code == 200
        assert response.json()["case"]["title"] == "Burglary at Main Street Store"

    def test_get_missing_case(self, admin_client):
        response = admin_client.get("/api/cases/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Case not found"}

    def test_partial_update(self, admin_client):
        before = admin_client.get("/api/cases/2").json()["case"]

        response = admin_client.put("/api/cases/2", json={"status": "Closed"})

        assert response.status_code == 200
        after = response.json()["case"]
        assert after["status"] == "Closed"
        assert after["title"] == before["title"]
        assert after["location"] == before["location"]
        assert after["caseNumber"] == before["caseNumber"]
        assert parse_ts(after["updatedAt"]) > parse_ts(before["updatedAt"])

    def test_update_missing_case(self, admin_client):
        assert admin_client.put("/api/cases/999", json={"status": "Closed"}).status_code == 404

    @pytest.mark.parametrize("body", [{"title": None}, {"status": None}, {"priority": None}])
    def test_null_required_field_rejected(self, admin_client, body):
        before = admin_client.get("/api/cases/2").json()["case"]

        response = admin_client.put("/api/cases/2", json=body)

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid input"}
        assert admin_client.get("/api/cases/2").json()["case"] == before
        assert admin_client.get("/api/cases").status_code == 200

    def test_null_optional_field_clears_it(self, admin_client):
        response = admin_client.put("/api/cases/2", json={"location": None})

        assert response.status_code == 200
        assert response.json()["case"]["location"] is None
        assert response.json()["case"]["title"]

    def test_delete_case(self, admin_client):
        response = admin_client.delete("/api/cases/3")

        assert response.status_code == 200
        assert response.json() == {"message": "Case deleted successfully"}
        assert admin_client.get("/api/cases/3").status_code == 404
        assert admin_client.delete("/api/cases/3").status_code == 404

    def test_ids_not_reused(self, admin_client):
        admin_client.delete("/api/cases/3")

        case = admin_client.post("/api/cases", json={"title": "After delete"}).json()["case"]

        assert case["id"] == 4

    def test_regular_users_can_manage_cases(self, officer_client):
        response = officer_client.post("/api/cases", json={"title": "Officer case"})

        assert response.status_code == 201
