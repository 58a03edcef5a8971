import json
import socket
import threading
import unittest
from unittest.mock import patch

import requests

from score_server import (
    HighScoreStore, StorageError, make_server, parse_args, validate_submission,
)


class ValidateSubmissionTests(unittest.TestCase):
    def test_valid_payload(self):
        record, errors = validate_submission(
            {"playerName": "  neo ", "score": 420, "createdAt": "2024-01-02T03:04:05Z"})
        self.assertEqual(errors, {})
        self.assertEqual(record["playerName"], "neo")
        self.assertEqual(record["score"], 420)

    def test_created_at_defaults_to_now(self):
        record, _ = validate_submission({"playerName": "neo", "score": 0})
        self.assertTrue(record["createdAt"])

    def test_missing_score(self):
        record, errors = validate_submission({"playerName": "neo"})
        self.assertIsNone(record)
        self.assertIn("score", errors)

    def test_rejects_bad_types(self):
        for payload, field in (
            ({"playerName": "", "score": 1}, "playerName"),
            ({"playerName": "x" * 51, "score": 1}, "playerName"),
            ({"playerName": "neo", "score": -1}, "score"),
            ({"playerName": "neo", "score": 1.5}, "score"),
            ({"playerName": "neo", "score": True}, "score"),
            ({"playerName": "neo", "score": 1, "createdAt": "yesterday"}, "createdAt"),
        ):
            with self.subTest(payload=payload):
                record, errors = validate_submission(payload)
                self.assertIsNone(record)
                self.assertIn(field, errors)

    def test_rejects_non_object(self):
        self.assertEqual(validate_submission([1, 2])[1], {"body": "expected a JSON object"})


class HighScoreStoreTests(unittest.TestCase):
    def test_top_is_sorted_and_limited(self):
        store = HighScoreStore()
        for i in range(15):
            store.add({"playerName": f"p{i}", "score": i * 10, "createdAt": "x"})
        top = store.top()
        self.assertEqual(len(top), 10)
        self.assertEqual([r["score"] for r in top], list(range(140, 40, -10)))
        self.assertEqual(len(store), 15)

    def test_ties_keep_submission_order(self):
        store = HighScoreStore()
        first = store.add({"playerName": "a", "score": 5, "createdAt": "x"})
        second = store.add({"playerName": "b", "score": 5, "createdAt": "x"})
        self.assertEqual(store.top(), [first, second])
        self.assertLess(first["id"], second["id"])


class ScoreServiceTests(unittest.TestCase):
    def setUp(self):
        self.store = HighScoreStore()
        self.httpd = make_server("127.0.0.1", 0, self.store)
        self.thread = threading.Thread(target=self.httpd.serve_forever, daemon=True)
        self.thread.start()
        self.base = f"http://127.0.0.1:{self.httpd.server_address[1]}"

    def tearDown(self):
        self.httpd.shutdown()
        self.httpd.server_close()
        self.thread.join(timeout=5)

    def test_health(self):
        response = requests.get(f"{self.base}/health", timeout=5)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_missing_score_is_rejected_and_not_stored(self):
        response = requests.post(f"{self.base}/api/high-scores",
                                 json={"playerName": "neo"}, timeout=5)
        self.assertEqual(response.status_code, 400)
        self.assertIn("score", response.json()["errors"])
        self.assertEqual(len(self.store), 0)

    def test_invalid_json(self):
        response = requests.post(f"{self.base}/api/high-scores", data=b"{not json",
                                 headers={"Content-Type": "application/json"}, timeout=5)
        self.assertEqual(response.status_code, 400)

    def test_post_then_get_top_scores(self):
        for name, score in (("a", 10), ("b", 300), ("c", 20)):
            response = requests.post(f"{self.base}/api/high-scores",
                                     json={"playerName": name, "score": score}, timeout=5)
            self.assertEqual(response.status_code, 201)
            self.assertEqual(response.json()["playerName"], name)
        scores = requests.get(f"{self.base}/api/high-scores", timeout=5).json()
        self.assertEqual([s["playerName"] for s in scores], ["b", "c", "a"])

    def test_storage_failure_returns_500(self):
        with patch.object(self.store, "add", side_effect=StorageError("boom")):
            response = requests.post(f"{self.base}/api/high-scores",
                                     json={"playerName": "neo", "score": 1}, timeout=5)
        self.assertEqual(response.status_code, 500)

    def test_injected_empty_store_is_used(self):
        self.assertIs(self.httpd.store, self.store)
        requests.post(f"{self.base}/api/high-scores",
                      json={"playerName": "neo", "score": 5}, timeout=5)
        self.assertEqual(len(self.store), 1)

    def _raw_post(self, content_length):
        request = (
            "POST /api/high-scores HTTP/1.0\r\n"
            "Host: 127.0.0.1\r\n"
            "Content-Type: application/json\r\n"
            f"Content-Length: {content_length}\r\n"
            "\r\n"
        ).encode()
        with socket.create_connection(self.httpd.server_address, timeout=5) as sock:
            sock.sendall(request)
            chunks = []
            while True:
                chunk = sock.recv(4096)
                if not chunk:
                    break
                chunks.append(chunk)
        head, _, body = b"".join(chunks).partition(b"\r\n\r\n")
        return head.split(b" ", 2)[1], json.loads(body)

    def test_malformed_content_length_is_rejected(self):
        for value in ("abc", "-1"):
            with self.subTest(content_length=value):
                status, body = self._raw_post(value)
                self.assertEqual(status, b"400")
                self.assertEqual(body, {"errors": {"body": "invalid Content-Length"}})
        self.assertEqual(len(self.store), 0)

    def test_unknown_path(self):
        self.assertEqual(requests.get(f"{self.base}/nope", timeout=5).status_code, 404)
        self.assertEqual(requests.post(f"{self.base}/nope", json={}, timeout=5).status_code, 404)


class ParseArgsTests(unittest.TestCase):
    def test_defaults(self):
        args = parse_args([])
        self.assertEqual((args.host, args.port), ("127.0.0.1", 5000))


if __name__ == "__main__":
    unittest.main()
