from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError

from blood_bank_api.app.core.db import Database


def test_list_donors_empty(client):
    resp = client.get("/api/donors")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_donor(client, sample_donor):
    resp = client.post("/api/donors", json=sample_donor)
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    donor = body["donor"]
    assert ObjectId.is_valid(donor["_id"])
    assert donor["name"] == "Asha Verma"
    assert donor["bloodType"] == "O+"
    assert donor["createdAt"]
    assert donor["lastDonation"] is None


def test_create_donor_missing_field(client, sample_donor):
    del sample_donor["email"]
    resp = client.post("/api/donors", json=sample_donor)
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "email" in body["message"]


def test_create_donor_wrong_type(client, sample_donor):
    sample_donor["name"] = {"first": "Asha"}
    resp = client.post("/api/donors", json=sample_donor)
    assert resp.status_code == 400
    assert resp.json()["success"] is False


def test_list_donors_newest_first(client, sample_donor):
    for name, created in [
        ("First", "2024-01-01T08:00:00"),
        ("Third", "2024-03-01T08:00:00"),
        ("Second", "2024-02-01T08:00:00"),
    ]:
        client.post("/api/donors", json={**sample_donor, "name": name, "createdAt": created})
    names = [d["name"] for d in client.get("/api/donors").json()]
    assert names == ["Third", "Second", "First"]


def test_delete_donor(client, sample_donor):
    donor_id = client.post("/api/donors", json=sample_donor).json()["donor"]["_id"]
    resp = client.delete(f"/api/donors/{donor_id}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Donor deleted successfully"}
    assert client.get("/api/donors").json() == []


def test_delete_unknown_donor_is_success(client):
    resp = client.delete(f"/api/donors/{ObjectId()}")
    assert resp.status_code == 200
    assert resp.json()["success"] is True


def test_delete_donor_malformed_id(client):
    resp = client.delete("/api/donors/not-an-id")
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "Invalid id" in body["message"]


def test_numeric_text_fields_are_coerced(client, sample_donor):
    sample_donor["phone"] = 5550101
    resp = client.post("/api/donors", json=sample_donor)
    assert resp.status_code == 200
    assert resp.json()["donor"]["phone"] == "5550101"


def test_create_donor_database_error_is_500(client, monkeypatch):
    class BrokenDonors:
        async def insert_one(self, *args, **kwargs):
            raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    monkeypatch.setattr(Database, "donors", property(lambda self: BrokenDonors()))
    resp = client.post(
        "/api/donors",
        json={
            "name": "Asha Verma",
            "bloodType": "O+",
            "phone": "555-0101",
            "email": "asha@example.com",
            "address": "12 Lake Road",
        },
    )
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "message": "localhost:27017: connection refused"}
