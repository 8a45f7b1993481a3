"""Tests for FastAPI application."""

import pytest
from fastapi.testclient import TestClient

from gendiffs.api.app import app
from gendiffs.api.service import DiffStore, parse_diff_name


@pytest.fixture
def diffs_dir(tmp_path, monkeypatch):
    """Populated diffs directory served by the API."""
    path = tmp_path / "diffs"
    path.mkdir()
    (path / "v2.0.0..v1.0.0.diff").write_bytes(b"diff --git a/x b/x\n")
    (path / "v1.0.0..v2.0.0.diff").write_bytes(b"diff --git a/y b/y\n\x00")
    (path / ".gitkeep").write_text("")
    (path / "notes.txt").write_text("ignored")
    monkeypatch.setenv("GENDIFFS_DIFFS_DIR", str(path))
    return path


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestAPIEndpoints:
    """Test API endpoints."""

    def test_root_endpoint(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "gendiffs API"
        assert "version" in data
        assert "endpoints" in data

    def test_health_endpoint(self, client, diffs_dir):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "git_available" in data
        assert data["diffs_dir_exists"] is True

    def test_version_endpoint(self, client):
        response = client.get("/version")
        assert response.status_code == 200
        data = response.json()
        assert data["api_version"] == "v1"

    def test_list_diffs(self, client, diffs_dir):
        response = client.get("/diffs")
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 2
        assert [d["name"] for d in data["diffs"]] == [
            "v1.0.0..v2.0.0.diff",
            "v2.0.0..v1.0.0.diff",
        ]
        assert data["diffs"][0]["from_tag"] == "v1.0.0"
        assert data["diffs"][0]["to_tag"] == "v2.0.0"
        assert data["diffs"][0]["size"] == 20

    def test_list_diffs_missing_dir(self, client, tmp_path, monkeypatch):
        monkeypatch.setenv("GENDIFFS_DIFFS_DIR", str(tmp_path / "missing"))
        response = client.get("/diffs")
        assert response.status_code == 200
        assert response.json() == {"count": 0, "diffs": []}

    def test_get_diff(self, client, diffs_dir):
        response = client.get("/diffs/v1.0.0/v2.0.0")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/x-diff")
        assert response.content == b"diff --git a/y b/y\n\x00"

    def test_get_missing_diff(self, client, diffs_dir):
        response = client.get("/diffs/v1.0.0/v3.0.0")
        assert response.status_code == 404
        assert response.json()["detail"]["error"]["code"] == "DIFF_NOT_FOUND"


class TestDiffStore:
    """Test DiffStore and name parsing."""

    def test_parse_diff_name(self):
        assert parse_diff_name("v1..v2.diff") == ("v1", "v2")
        assert parse_diff_name("v1.2.3..v2.0.0.diff") == ("v1.2.3", "v2.0.0")

    def test_parse_rejects_other_files(self):
        assert parse_diff_name(".gitkeep") is None
        assert parse_diff_name("v1..v2.patch") is None
        assert parse_diff_name("v1.diff") is None
        assert parse_diff_name("..v2.diff") is None

    def test_read_outside_dir_rejected(self, diffs_dir):
        (diffs_dir.parent / "secret..x.diff").write_text("secret")
        store = DiffStore(diffs_dir)
        assert store.read_diff("../secret", "x") is None

    def test_read_diff(self, diffs_dir):
        assert DiffStore(diffs_dir).read_diff("v2.0.0", "v1.0.0") == b"diff --git a/x b/x\n"
