import json
from datetime import date

import requests

from blood_bank_client import BloodBankAPI


def _response(status_code, payload):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(payload).encode()
    response.url = "http://bank.test/api"
    return response


class FakeSession:
    """Records calls and replays canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def test_create_donor_unwraps_envelope():
    session = FakeSession(_response(200, {"success": True, "donor": {"_id": "abc", "name": "Asha"}}))
    api = BloodBankAPI(base_url="http://bank.test/", session=session)
    donor, error = api.create_donor(
        name="Asha", blood_type="O+", phone="555", email="a@example.com", address="Lake Road"
    )
    assert error is None
    assert donor == {"_id": "abc", "name": "Asha"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://bank.test/api/donors"
    assert call["json"]["bloodType"] == "O+"


def test_add_blood_unit_serialises_date():
    envelope = {"success": True, "bloodUnit": {"_id": "u1"}, "donorUpdated": False}
    session = FakeSession(_response(200, envelope))
    api = BloodBankAPI(base_url="http://bank.test", session=session)
    data, error = api.add_blood_unit(blood_type="A+", donor_id="d1", collection_date=date(2024, 1, 15))
    assert error is None
    assert data == envelope
    assert session.calls[0]["json"]["collectionDate"] == "2024-01-15"


def test_update_request_status():
    session = FakeSession(_response(200, {"success": True, "request": {"status": "Fulfilled"}}))
    api = BloodBankAPI(base_url="http://bank.test", session=session)
    request, error = api.update_request_status("r1", "Fulfilled")
    assert error is None
    assert request["status"] == "Fulfilled"
    assert session.calls[0]["method"] == "PUT"
    assert session.calls[0]["url"] == "http://bank.test/api/requests/r1"
    assert session.calls[0]["json"] == {"status": "Fulfilled"}


def test_error_envelope_becomes_error_tuple():
    session = FakeSession(_response(400, {"success": False, "message": "email: Field required"}))
    api = BloodBankAPI(base_url="http://bank.test", session=session)
    data, error = api.create_request(
        patient_name="Ravi", blood_type="A-", units_needed=1, priority="Low", hospital="City"
    )
    assert data is None
    assert error == {"status_code": 400, "message": "email: Field required"}


def test_connection_error_becomes_error_tuple():
    session = FakeSession(requests.ConnectionError("refused"))
    api = BloodBankAPI(base_url="http://bank.test", session=session)
    data, error = api.list_donors()
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]
