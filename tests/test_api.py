"""End-to-end tests of the HTTP tools through FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from main import app


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestColorTools:
    def test_convert_to_hex(self, client):
        response = client.post("/convert_color_code", json={"code": "rgb(255, 0, 0)", "target": "hex"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "#ff0000"}

    def test_convert_to_hsl(self, client):
        response = client.post("/convert_color_code", json={"code": "#f00", "target": "hsl"})
        assert response.json()["message"] == "hsl(0deg 100% 50%)"

    def test_convert_invalid(self, client):
        response = client.post("/convert_color_code", json={"code": "nope", "target": "hex"})
        assert response.status_code == 400

    def test_convert_unknown_target(self, client):
        response = client.post("/convert_color_code", json={"code": "red", "target": "oklch"})
        assert response.status_code == 422

    def test_describe(self, client):
        response = client.post("/describe_color", json={"code": "#ffffff // note"})
        body = response.json()
        assert response.status_code == 200
        assert body["css"] == "#ffffff"
        assert body["contrast_css"] == "#444"
        assert body["hsl"] == "hsl(0deg 0% 100%)"
        assert body["comment"] == "note"
        assert body["bundle"] is None

    def test_describe_invalid(self, client):
        assert client.post("/describe_color", json={"code": "-"}).status_code == 400


class TestPaletteTools:
    def test_parse(self, client):
        response = client.post("/parse_text_palette", json={"text": "red\nblue\n-\ngreen"})
        body = response.json()
        assert response.status_code == 200
        assert [[e["css"] for e in row] for row in body["rows"]] == [["#ff0000", "#0000ff"], ["#008000"]]
        assert len(body["flat"]) == 3

    def test_closest(self, client):
        response = client.post("/find_closest_match", json={"code": "#fe0101", "palette_text": "red\nblue"})
        body = response.json()
        assert body["exact"] is False
        assert body["match"]["css"] == "#ff0000"

    def test_exact(self, client):
        response = client.post("/find_closest_match", json={"code": "blue", "palette_text": "red\n#00f"})
        body = response.json()
        assert body["exact"] is True
        assert body["match"]["css"] == "#0000ff"

    def test_palette_too_small(self, client):
        response = client.post("/find_closest_match", json={"code": "#fe0101", "palette_text": "red"})
        assert response.json() == {"exact": False, "match": None}

    def test_closest_invalid_code(self, client):
        response = client.post("/find_closest_match", json={"code": "nope", "palette_text": "red\nblue"})
        assert response.status_code == 400


class TestBlendTools:
    def test_default_grid(self, client):
        response = client.post("/blend_grid", json={})
        body = response.json()
        assert response.status_code == 200
        assert len(body["cells"]) == 6
        assert all(len(row) == 6 for row in body["cells"])
        assert body["display"][5][1:] == [None] * 5
        assert body["bundle"]["c"] == ["red", "white", "black"]
        assert body["bundle"]["op"] == "(not set)"

    def test_grid_too_big(self, client):
        assert client.post("/blend_grid", json={"grid_size": 1000}).status_code == 400

    def test_grid_bad_corner(self, client):
        assert client.post("/blend_grid", json={"corner_a": "nope"}).status_code == 400

    def test_grid_bad_method(self, client):
        assert client.post("/blend_grid", json={"method": "oklch"}).status_code == 422

    def test_extract_appends_fragment(self, client):
        response = client.post("/extract_selection", json={"op": "diagTL", "palette_text": "red"})
        body = response.json()
        assert response.status_code == 200
        assert len(body["cells"]) == 6
        assert body["bundle"]["op"] == "diagTL"
        assert body["fragment"].startswith("-- // {")
        assert body["palette_text"] == "red\n" + body["fragment"]

    def test_extract_exclusive(self, client):
        response = client.post("/extract_selection", json={"op": "row", "index": 0, "exclusive": True})
        body = response.json()
        assert body["fragment"].splitlines()[1:] == body["cells"][1:-1]
        assert body["palette_text"] is None

    def test_extract_needs_index(self, client):
        assert client.post("/extract_selection", json={"op": "row"}).status_code == 400

    def test_extract_index_out_of_range(self, client):
        assert client.post("/extract_selection", json={"op": "column", "index": 9}).status_code == 400

    def test_apply_bundle(self, client):
        bundle = {"c": ["red", "white", "black", "green"], "m": "rgb", "z": 3, "op": "row"}
        response = client.post("/apply_bundle", json={"bundle": bundle})
        body = response.json()
        assert response.status_code == 200
        assert body["linked"] is False
        assert body["corner_d"] == "green"
        assert body["grid_size"] == 3
        assert body["method"] == "rgb"

    def test_apply_bundle_unknown_method(self, client):
        bundle = {"c": ["red", "white", "black"], "m": "oklch", "z": 3, "op": "row"}
        assert client.post("/apply_bundle", json={"bundle": bundle}).status_code == 400

    def test_apply_bundle_bad_corners(self, client):
        bundle = {"c": ["red"], "m": "rgb", "z": 3, "op": "row"}
        assert client.post("/apply_bundle", json={"bundle": bundle}).status_code == 400
