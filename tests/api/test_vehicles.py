"""API tests for police vehicles and license plates"""

import json

import pytest

NEW_VEHICLE = {
    "vehicleId": "PATROL-003",
    "licensePlate": "POL-003",
    "vehicleType": "patrol",
    "make": "Dodge",
    "model": "Charger",
    "year": 2024,
}


@pytest.mark.api
class TestPoliceVehicles:

    def test_list_is_raw(self, admin_client):
        vehicles = admin_client.get("/api/police-vehicles").json()

        assert isinstance(vehicles, list)
        assert [v["vehicleId"] for v in vehicles] == ["PATROL-001", "PATROL-002", "K9-001", "SPECIAL-001"]

    def test_create_defaults(self, admin_client):
        response = admin_client.post("/api/police-vehicles", json=NEW_VEHICLE)

        assert response.status_code == 201
        vehicle = response.json()
        assert vehicle["status"] == "available"
        assert vehicle["lastUpdate"] is not None

    def test_unique_vehicle_id_and_plate(self, admin_client):
        response = admin_client.post("/api/police-vehicles", json=dict(NEW_VEHICLE, vehicleId="PATROL-001"))
        assert response.status_code == 409

        response = admin_client.post("/api/police-vehicles", json=dict(NEW_VEHICLE, licensePlate="POL-001"))
        assert response.status_code == 409

    def test_invalid_status_on_create(self, admin_client):
        response = admin_client.post("/api/police-vehicles", json=dict(NEW_VEHICLE, status="parked"))

        assert response.status_code == 400

    def test_update_location(self, admin_client):
        response = admin_client.patch(
            "/api/police-vehicles/2/location", json={"location": [-122.41, 37.77]}
        )

        assert response.status_code == 200
        vehicle = response.json()
        assert json.loads(vehicle["currentLocation"]) == [-122.41, 37.77]

    @pytest.mark.parametrize(
        "body",
        [
            {"location": [-122.41]},
            {"location": [-122.41, 37.77, 1.0]},
            {"location": ["west", "north"]},
            {"location": "-122.41,37.77"},
            {},
        ],
    )
    def test_malformed_location(self, admin_client, body):
        response = admin_client.patch("/api/police-vehicles/2/location", json=body)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid location format. Expected [longitude, latitude]"

    def test_update_status(self, admin_client):
        response = admin_client.patch("/api/police-vehicles/2/status", json={"status": "responding"})

        assert response.status_code == 200
        assert response.json()["status"] == "responding"

    def test_invalid_status(self, admin_client):
        response = admin_client.patch("/api/police-vehicles/2/status", json={"status": "parked"})

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Invalid status. Must be one of: available, on_patrol, responding, out_of_service"
        )

    def test_patch_missing_vehicle(self, admin_client):
        response = admin_client.patch("/api/police-vehicles/99/status", json={"status": "available"})

        assert response.status_code == 404
        assert response.json()["message"] == "Police vehicle not found"

    def test_requires_session(self, client):
        assert client.patch("/api/police-vehicles/2/status", json={"status": "available"}).status_code == 401


@pytest.mark.api
class TestLicensePlates:

    def create(self, client, plate="ABC123", owner="John Smith"):
        return client.post("/api/license-plates", json={"plateNumber": plate, "ownerName": owner})

    def test_create_and_list(self, admin_client):
        response = self.create(admin_client)

        assert response.status_code == 201
        plate = response.json()["licensePlate"]
        assert plate["addedById"] == 1
        assert plate["ownerImage"] is None

        plates = admin_client.get("/api/license-plates").json()["licensePlates"]
        assert [p["plateNumber"] for p in plates] == ["ABC123"]

    def test_duplicate_plate(self, admin_client):
        self.create(admin_client)

        assert self.create(admin_client, owner="Someone Else").status_code == 409

    def test_update_missing_plate_is_404_before_conflict(self, admin_client):
        self.create(admin_client)

        response = admin_client.put("/api/license-plates/999", json={"plateNumber": "ABC123"})

        assert response.status_code == 404
        assert response.json()["message"] == "License plate not found"

    def test_null_owner_name_rejected(self, admin_client):
        plate_id = self.create(admin_client).json()["licensePlate"]["id"]

        response = admin_client.put(f"/api/license-plates/{plate_id}", json={"ownerName": None})

        assert response.status_code == 400
        plates = admin_client.get("/api/license-plates").json()["licensePlates"]
        assert plates[0]["ownerName"] == "John Smith"

    def test_search_exact(self, admin_client):
        self.create(admin_client)

        response = admin_client.get("/api/license-plates/search/ABC123")
        assert response.status_code == 200
        assert response.json()["licensePlate"]["ownerName"] == "John Smith"

        response = admin_client.get("/api/license-plates/search/abc123")
        assert response.status_code == 404
        assert response.json()["message"] == "License plate not found"

    def test_owner_image_data_uri(self, admin_client):
        image = "data:image/png;base64,iVBORw0KGgo="
        response = admin_client.post(
            "/api/license-plates",
            json={"plateNumber": "IMG001", "ownerName": "Pic Owner", "ownerImage": image},
        )

        assert response.json()["licensePlate"]["ownerImage"] == image
