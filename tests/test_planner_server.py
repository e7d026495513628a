# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the planner HTTP server."""

import json
import threading
import time
import urllib.error
import urllib.request

import pytest

from spacia.domain.launch_sites import LAUNCH_SITES


CAPE_SMALLSAT = {
    "siteLat": 28.573,
    "siteLon": -80.649,
    "altitudeKm": 550,
    "inclinationDeg": 53,
    "massKg": 200,
    "areaM2": 0.5,
}


def _start_server(port):
    """Start planner server on given port, return server."""
    from spacia.adapters.planner_server import create_planner_server
    server = create_planner_server(port=port)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    for _ in range(50):
        try:
            urllib.request.urlopen(f"http://127.0.0.1:{port}/api/health", timeout=1)
            break
        except (urllib.error.URLError, ConnectionRefusedError):
            time.sleep(0.05)
    return server


def _api_request(port, method, path, body=None, raw=None):
    """Make HTTP request to server, return (status, parsed_json, headers)."""
    url = f"http://127.0.0.1:{port}{path}"
    data = raw if raw is not None else (json.dumps(body).encode() if body is not None else None)
    req = urllib.request.Request(url, data=data, method=method)
    if data is not None:
        req.add_header("Content-Type", "application/json")
    try:
        resp = urllib.request.urlopen(req, timeout=10)
        content = resp.read().decode()
        return resp.status, json.loads(content) if content else None, resp.headers
    except urllib.error.HTTPError as e:
        content = e.read().decode()
        return e.code, json.loads(content) if content else None, e.headers


@pytest.fixture
def server_port():
    """Find a free port for testing."""
    import socket
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def running_server(server_port):
    server = _start_server(server_port)
    yield server_port
    server.shutdown()
    server.server_close()


class TestPlannerEndpoint:

    def test_post_planner_returns_report(self, running_server):
        status, body, headers = _api_request(running_server, "POST", "/api/planner", CAPE_SMALLSAT)
        assert status == 200
        assert body["launchSiteAnalysis"]["userSite"] == "Cape Canaveral SFS"
        assert body["debrisRisk"]["level"] == "high"
        assert body["inputs"] == {"Cd": 2.2, "solarFlux81": 120.0, "eccentricity": 0.0}
        assert headers["Access-Control-Allow-Origin"] == "*"
        assert headers["Content-Type"].startswith("application/json")

    def test_query_string_ignored(self, running_server):
        status, _, _ = _api_request(running_server, "POST", "/api/planner?debug=1", CAPE_SMALLSAT)
        assert status == 200

    def test_invalid_payload(self, running_server):
        bad = dict(CAPE_SMALLSAT, altitudeKm="low")
        status, body, _ = _api_request(running_server, "POST", "/api/planner", bad)
        assert status == 400
        assert body == {"error": "Invalid payload", "kind": "InvalidPayload"}

    def test_invalid_eccentricity(self, running_server):
        bad = dict(CAPE_SMALLSAT, eccentricity=1.0)
        status, body, _ = _api_request(running_server, "POST", "/api/planner", bad)
        assert status == 400
        assert body["kind"] == "InvalidEccentricity"

    def test_malformed_json(self, running_server):
        status, body, _ = _api_request(running_server, "POST", "/api/planner", raw=b"{not json")
        assert status == 400
        assert body["kind"] == "InvalidPayload"

    def test_empty_body(self, running_server):
        status, body, _ = _api_request(running_server, "POST", "/api/planner", raw=b"")
        assert status == 400
        assert body["kind"] == "InvalidPayload"

    def test_post_unknown_path(self, running_server):
        status, body, _ = _api_request(running_server, "POST", "/api/other", CAPE_SMALLSAT)
        assert status == 404
        assert "Not found" in body["error"]


class TestReadEndpoints:

    def test_sites(self, running_server):
        status, body, _ = _api_request(running_server, "GET", "/api/sites")
        assert status == 200
        assert len(body["sites"]) == len(LAUNCH_SITES)
        assert body["sites"][0] == {
            "name": LAUNCH_SITES[0].name,
            "lat": LAUNCH_SITES[0].lat,
            "lon": LAUNCH_SITES[0].lon,
            "azimuthRange": list(LAUNCH_SITES[0].azimuth_range),
        }

    def test_health(self, running_server):
        status, body, _ = _api_request(running_server, "GET", "/api/health")
        assert status == 200
        assert body["status"] == "ok"
        assert "version" in body

    def test_unknown_get(self, running_server):
        status, body, _ = _api_request(running_server, "GET", "/nope")
        assert status == 404
        assert body == {"error": "Not found: /nope"}

    def test_options_preflight(self, running_server):
        status, body, headers = _api_request(running_server, "OPTIONS", "/api/planner")
        assert status == 204
        assert body is None
        assert "POST" in headers["Access-Control-Allow-Methods"]
