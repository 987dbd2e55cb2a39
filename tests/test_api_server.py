"""Tests for the Flask API."""

import shutil

import pytest

from identicon import render
from identicon.api_server import create_app
from identicon.services.identicon_service import IdenticonService


@pytest.fixture
def client(tmp_path):
    app = create_app(results_folder=tmp_path / "results")
    app.config["TESTING"] = True
    return app.test_client()


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "healthy"


def test_get_identicon_returns_png(client):
    response = client.get("/api/identicon/alice")

    assert response.status_code == 200
    assert response.mimetype == "image/png"
    assert response.data == render("alice")


def test_post_identicon_writes_file(client, tmp_path):
    response = client.post("/api/identicon", json={"input": "alice"})

    body = response.get_json()
    image = IdenticonService().build("alice")
    assert response.status_code == 200
    assert body["success"] is True
    assert body["color"] == list(image.color)
    assert body["cells"] == len(image.pixel_map)
    assert (tmp_path / "results" / "alice.png").read_bytes() == render("alice")


def test_post_identicon_requires_input(client):
    response = client.post("/api/identicon", json={})

    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_post_identicon_write_failure(client, tmp_path):
    shutil.rmtree(tmp_path / "results")

    response = client.post("/api/identicon", json={"input": "alice"})

    assert response.status_code == 500
    body = response.get_json()
    assert body["success"] is False
    assert body["message"]


def test_unknown_route_is_json_404(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json() == {"error": "Not found"}


@pytest.mark.parametrize("value", ["../escaped", "nested/alice", "/"])
def test_post_identicon_rejects_paths(client, tmp_path, value):
    response = client.post("/api/identicon", json={"input": value})

    assert response.status_code == 400
    assert response.get_json()["success"] is False
    assert not (tmp_path / "escaped.png").exists()
    assert list((tmp_path / "results").iterdir()) == []


def test_post_identicon_rejects_absolute_path(client, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()

    response = client.post("/api/identicon", json={"input": str(outside / "pwned")})

    assert response.status_code == 400
    assert list(outside.iterdir()) == []
