import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from blood_bank_api.app.core.config import Settings
from blood_bank_api.app.core.db import Database
from blood_bank_api.app.main import create_app

INDEX_HTML = "<!DOCTYPE html><html><body>blood bank</body></html>"


@pytest.fixture
def frontend_dir(tmp_path):
    directory = tmp_path / "frontend"
    directory.mkdir()
    (directory / "index.html").write_text(INDEX_HTML)
    (directory / "app.js").write_text("console.log('blood bank');")
    return directory


@pytest.fixture
def database():
    return Database("mongodb://localhost:27017", "blood_bank_test", client=AsyncMongoMockClient())


@pytest.fixture
def client(frontend_dir, database):
    """A test client backed by an in-memory MongoDB."""
    app = create_app(Settings(frontend_dir=str(frontend_dir)), database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_donor():
    return {
        "name": "Asha Verma",
        "bloodType": "O+",
        "phone": "555-0101",
        "email": "asha@example.com",
        "address": "12 Lake Road",
    }


@pytest.fixture
def sample_request():
    return {
        "patientName": "Ravi Kumar",
        "bloodType": "A-",
        "unitsNeeded": 2,
        "priority": "High",
        "hospital": "City General",
    }
