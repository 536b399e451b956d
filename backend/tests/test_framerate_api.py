"""
Tests for the framerate HTTP API.

QC: Verify that the API:
1. Builds framerates with the same chain as parse_framerate()
2. Returns the chain's reason code on 422
3. Saves, lists and deletes framerates through the persistence manager
"""

import pytest
from fastapi.testclient import TestClient

from timebase.config import ServiceConfig
from timebase.main import create_app


pytestmark = pytest.mark.api


@pytest.fixture
def test_client(db_path):
    """Test client backed by a throwaway database."""
    app = create_app(ServiceConfig(db_path=db_path, log_level="WARNING"))
    return TestClient(app)


class TestParseEndpoint:
    def test_root(self, test_client):
        response = test_client.get("/")
        assert response.status_code == 200
        assert response.json()["service"] == "timebase"

    def test_parse_rational_string(self, test_client):
        response = test_client.post("/api/framerates/parse", json={"rate": "24000/1001"})

        assert response.status_code == 200
        body = response.json()
        assert body["numerator"] == 24000
        assert body["denominator"] == 1001
        assert body["ntsc"] == "non_drop"
        assert body["is_ntsc"] is True
        assert body["timebase"] == "24"
        assert body["display"] == "<23.98 NTSC>"

    def test_parse_drop_frame_with_coercion(self, test_client):
        response = test_client.post(
            "/api/framerates/parse",
            json={"rate": 29.97, "ntsc": "drop", "coerce_ntsc": True},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["display"] == "<29.97 NTSC DF>"
        assert body["description"] == "29.97 NTSC DF (30000/1001 fps, timebase 30, drops 2 frames/minute)"

    def test_parse_whole_rate(self, test_client):
        response = test_client.post("/api/framerates/parse", json={"rate": 25, "ntsc": None})

        assert response.status_code == 200
        body = response.json()
        assert body["ntsc"] is None
        assert body["is_ntsc"] is False
        assert body["timebase"] == "25"
        assert body["display"] == "<25.0 fps>"

    def test_parse_inverted(self, test_client):
        response = test_client.post(
            "/api/framerates/parse",
            json={"rate": "1/24", "ntsc": None, "invert": True},
        )
        assert response.json()["numerator"] == 24

    @pytest.mark.parametrize(
        "payload, reason",
        [
            ({"rate": "abc"}, "unrecognized_format"),
            ({"rate": 23.98, "ntsc": None}, "imprecise"),
            ({"rate": 0, "ntsc": None}, "non_positive"),
            ({"rate": "24000/1001", "ntsc": "bogus"}, "invalid_ntsc"),
            ({"rate": 24}, "invalid_ntsc_rate"),
            ({"rate": 24, "ntsc": "drop", "coerce_ntsc": True}, "bad_drop_rate"),
        ],
    )
    def test_parse_errors(self, test_client, payload, reason):
        response = test_client.post("/api/framerates/parse", json=payload)

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["reason"] == reason
        assert detail["message"]

    def test_unknown_fields_are_rejected(self, test_client):
        response = test_client.post("/api/framerates/parse", json={"rate": 24, "drop": True})
        assert response.status_code == 422

    def test_common_rates(self, test_client):
        response = test_client.get("/api/framerates/common")

        assert response.status_code == 200
        names = [entry["name"] for entry in response.json()]
        assert "29.97 DF" in names
        assert len(names) == 15


class TestSavedFramerates:
    def test_save_get_list_delete(self, test_client):
        response = test_client.post(
            "/api/framerates/saved/broadcast",
            json={"rate": 30, "ntsc": "drop", "coerce_ntsc": True, "label": "US broadcast"},
        )
        assert response.status_code == 200
        assert response.json()["framerate"]["display"] == "<29.97 NTSC DF>"

        response = test_client.get("/api/framerates/saved/broadcast")
        assert response.status_code == 200
        assert response.json()["label"] == "US broadcast"

        response = test_client.get("/api/framerates/saved")
        assert [entry["id"] for entry in response.json()] == ["broadcast"]

        response = test_client.delete("/api/framerates/saved/broadcast")
        assert response.status_code == 200

        response = test_client.get("/api/framerates/saved/broadcast")
        assert response.status_code == 404

    def test_save_invalid_rate_is_not_stored(self, test_client):
        response = test_client.post("/api/framerates/saved/bad", json={"rate": "abc"})
        assert response.status_code == 422
        assert test_client.get("/api/framerates/saved").json() == []

    def test_delete_missing(self, test_client):
        response = test_client.delete("/api/framerates/saved/missing")
        assert response.status_code == 404


class TestExtremeRates:
    def test_huge_rate_renders(self, test_client):
        response = test_client.post("/api/framerates/parse", json={"rate": "1e400", "ntsc": None})

        assert response.status_code == 200
        assert response.json()["display"] == "<inf fps>"

    def test_huge_exponent_is_unrecognized(self, test_client):
        response = test_client.post("/api/framerates/parse", json={"rate": "1e30000000", "ntsc": None})

        assert response.status_code == 422
        assert response.json()["detail"]["reason"] == "unrecognized_format"

    def test_coercion_above_500_is_rejected(self, test_client):
        response = test_client.post("/api/framerates/parse", json={"rate": 1000, "coerce_ntsc": True})

        assert response.status_code == 422
        assert response.json()["detail"]["reason"] == "invalid_ntsc_rate"

    def test_unstorable_rate_is_not_saved(self, test_client):
        response = test_client.post("/api/framerates/saved/huge", json={"rate": "1e20", "ntsc": None})

        assert response.status_code == 422
        assert "too large to store" in response.json()["detail"]
        assert test_client.get("/api/framerates/saved").json() == []
