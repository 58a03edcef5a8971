"""High-score HTTP service and health check.

Routes:
    GET  /health            -> {"status": "ok"}
    GET  /api/high-scores   -> top 10 records, highest score first
    POST /api/high-scores   -> 201 stored record | 400 validation | 500 storage
"""

import argparse
import http.server
import itertools
import json
import threading
from datetime import datetime, timezone
from typing import Optional

from logging_utils import log_debug

TOP_SCORES = 10
MAX_NAME_LENGTH = 50


class StorageError(Exception):
    """Raised when a score cannot be persisted."""


class HighScoreStore:
    """Volatile in-process score table."""

    def __init__(self):
        self._records = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def top(self, limit=TOP_SCORES):
        with self._lock:
            # sorted() is stable: equal scores keep submission order
            return sorted(self._records, key=lambda r: r["score"], reverse=True)[:limit]

    def add(self, record):
        with self._lock:
            stored = {"id": next(self._ids), **record}
            self._records.append(stored)
            return stored

    def __len__(self):
        with self._lock:
            return len(self._records)


def validate_submission(payload):
    """Return (record, errors); record is None whenever errors is non-empty."""
    errors = {}
    if not isinstance(payload, dict):
        return None, {"body": "expected a JSON object"}

    name = payload.get("playerName")
    if not isinstance(name, str) or not name.strip():
        errors["playerName"] = "required non-empty string"
    elif len(name.strip()) > MAX_NAME_LENGTH:
        errors["playerName"] = f"at most {MAX_NAME_LENGTH} characters"

    score = payload.get("score")
    if isinstance(score, bool) or not isinstance(score, int):
        errors["score"] = "required integer"
    elif score < 0:
        errors["score"] = "must be non-negative"

    created_at = payload.get("createdAt")
    if created_at is None:
        created_at = datetime.now(timezone.utc).isoformat()
    elif not isinstance(created_at, str):
        errors["createdAt"] = "expected an ISO-8601 timestamp"
    else:
        try:
            datetime.fromisoformat(created_at.replace("Z", "+00:00"))
        except ValueError:
            errors["createdAt"] = "expected an ISO-8601 timestamp"

    if errors:
        return None, errors
    return {"playerName": name.strip(), "score": score, "createdAt": created_at}, {}


class ScoreRequestHandler(http.server.BaseHTTPRequestHandler):
    """Serves the score API; the store hangs off ``self.server.store``."""

    def _path(self):
        return self.path.split("?")[0].split("#")[0]

    def _send_json(self, status, body):
        data = json.dumps(body).encode()
        self.send_response(status)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(data)))
        self.send_header("Cache-Control", "no-cache")
        self.end_headers()
        self.wfile.write(data)

    def do_GET(self):
        path = self._path()
        if path == "/health":
            self._send_json(200, {"status": "ok"})
        elif path == "/api/high-scores":
            self._send_json(200, self.server.store.top())
        else:
            self._send_json(404, {"error": "not found"})

    def do_POST(self):
        if self._path() != "/api/high-scores":
            self._send_json(404, {"error": "not found"})
            return
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            length = -1
        if length < 0:
            self._send_json(400, {"errors": {"body": "invalid Content-Length"}})
            return
        try:
            payload = json.loads(self.rfile.read(length) or b"null")
        except (ValueError, UnicodeDecodeError):
            self._send_json(400, {"errors": {"body": "invalid JSON"}})
            return

        record, errors = validate_submission(payload)
        if errors:
            self._send_json(400, {"errors": errors})
            return
        try:
            stored = self.server.store.add(record)
        except StorageError as exc:
            log_debug(f"ScoreRequestHandler storage failure: {exc}")
            self._send_json(500, {"error": "could not store score"})
            return
        self._send_json(201, stored)

    def log_message(self, format, *args):
        log_debug(f"[HTTP] {self.client_address[0]} - {format % args}")


def make_server(host="127.0.0.1", port=5000, store: Optional[HighScoreStore] = None):
    httpd = http.server.ThreadingHTTPServer((host, port), ScoreRequestHandler)
    httpd.daemon_threads = True
    httpd.store = store if store is not None else HighScoreStore()
    return httpd


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="HODL THE WHEEL high-score service")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5000)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    httpd = make_server(args.host, args.port)
    print(f"High-score service on http://{args.host}:{httpd.server_address[1]}")
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        httpd.server_close()


if __name__ == "__main__":
    main()
