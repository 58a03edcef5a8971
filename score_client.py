"""Client for the remote high-score service."""

import threading
from datetime import datetime, timezone

import requests

from logging_utils import log_debug


class RemoteScoreClient:
    """Talks to ``/api/high-scores``; every failure is reported, never raised."""

    def __init__(self, base_url, timeout=5, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def scores_url(self):
        return f"{self.base_url}/api/high-scores"

    def get_scores(self):
        """Top scores, or an empty list when the service cannot be reached."""
        try:
            response = self.session.get(self.scores_url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as exc:
            log_debug(f"RemoteScoreClient.get_scores failed: {exc}")
            return []

    def submit_score(self, player_name, score):
        payload = {
            "playerName": player_name,
            "score": int(score),
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }
        try:
            response = self.session.post(self.scores_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            return True, response.json()
        except requests.exceptions.RequestException as exc:
            log_debug(f"RemoteScoreClient.submit_score failed: {exc}")
            return False, f"Network error: {exc}"
        except ValueError as exc:
            log_debug(f"RemoteScoreClient.submit_score bad response: {exc}")
            return False, f"Bad response: {exc}"

    def submit_score_async(self, player_name, score, callback=None):
        """Submit in a daemon thread so the caller never waits on the network."""

        def _submit():
            success, result = self.submit_score(player_name, score)
            if callback:
                callback(success, result)

        thread = threading.Thread(target=_submit, name="score-submit", daemon=True)
        thread.start()
        return thread
