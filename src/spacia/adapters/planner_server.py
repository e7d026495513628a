# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
HTTP server exposing the mission planner.

Endpoints:
    POST /api/planner   request JSON → report JSON (400 / 500 on error)
    GET  /api/sites     launch site catalog
    GET  /api/health    liveness probe

Threaded; handlers share no mutable state.
"""
import json
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from spacia.domain.launch_sites import LAUNCH_SITES
from spacia.domain.planner_contracts import InvalidPayloadError
from spacia.domain.serialization import format_launch_site
from spacia.service import error_body, handle_planner_payload
from spacia.version import __version__

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 64 * 1024


class PlannerRequestHandler(BaseHTTPRequestHandler):
    server_version = f"spacia/{__version__}"

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)

    def _send_json(self, status: int, body: object) -> None:
        data = json.dumps(body, ensure_ascii=False).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(data)))
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(data)

    def _read_json(self) -> object:
        length = int(self.headers.get("Content-Length") or 0)
        if length <= 0 or length > MAX_BODY_BYTES:
            raise InvalidPayloadError(f"body length {length} outside (0, {MAX_BODY_BYTES}]")
        raw = self.rfile.read(length)
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidPayloadError(f"malformed JSON: {e}") from e

    def do_OPTIONS(self):
        self.send_response(204)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

    def do_GET(self):
        path = urlsplit(self.path).path
        if path == "/api/sites":
            self._send_json(200, {"sites": [format_launch_site(s) for s in LAUNCH_SITES]})
        elif path == "/api/health":
            self._send_json(200, {"status": "ok", "version": __version__})
        else:
            self._send_json(404, {"error": f"Not found: {self.path}"})

    def do_POST(self):
        if urlsplit(self.path).path != "/api/planner":
            self._send_json(404, {"error": f"Not found: {self.path}"})
            return
        try:
            payload = self._read_json()
        except InvalidPayloadError as e:
            logger.info("Rejected planner body: %s", e)
            self._send_json(e.status, error_body(e))
            return
        status, body = handle_planner_payload(payload)
        self._send_json(status, body)


def create_planner_server(host: str = "127.0.0.1", port: int = 8080) -> ThreadingHTTPServer:
    """Bind a threaded planner server; call serve_forever() to run it."""
    server = ThreadingHTTPServer((host, port), PlannerRequestHandler)
    server.daemon_threads = True
    logger.info("Planner server bound to %s:%d", host, server.server_address[1])
    return server
