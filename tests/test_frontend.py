from pathlib import Path

from fastapi.testclient import TestClient

from blood_bank_api.app.api.frontend import resolve_asset
from blood_bank_api.app.core.config import Settings
from blood_bank_api.app.main import create_app


def test_root_serves_index(client, frontend_dir):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == (frontend_dir / "index.html").read_text()


def test_unmatched_path_serves_index(client):
    root = client.get("/")
    for path in ("/donors", "/dashboard/requests/42", "/api/unknown"):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.text == root.text


def test_existing_asset_is_served(client):
    resp = client.get("/app.js")
    assert resp.status_code == 200
    assert "blood bank" in resp.text
    assert "javascript" in resp.headers["content-type"]


def test_paths_outside_frontend_fall_back_to_index(frontend_dir):
    (frontend_dir.parent / "secret.txt").write_text("nope")
    assert resolve_asset(frontend_dir, "../secret.txt") == Path(frontend_dir).resolve() / "index.html"
    assert resolve_asset(frontend_dir, "") == Path(frontend_dir).resolve() / "index.html"


def test_missing_index_is_404(tmp_path, database):
    app = create_app(Settings(frontend_dir=str(tmp_path)), database=database)
    with TestClient(app) as c:
        resp = c.get("/")
    assert resp.status_code == 404
    assert resp.json() == {"success": False, "message": "Frontend not found"}
