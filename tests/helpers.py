from unittest.mock import Mock

import requests

API_KEY = "test-key"
BASE_URL = "https://api.example.test/3"


def tmdb_record(mid, title, **extra):
    record = {
        "id": mid,
        "title": title,
        "poster_path": f"/{mid}.jpg",
        "vote_average": 7.25,
        "overview": f"About {title}",
        "release_date": "2024-05-17",
    }
    record.update(extra)
    return record


def make_response(payload=None, status=200):
    """Mocked requests.Response carrying *payload* as JSON."""
    resp = Mock(spec=requests.Response)
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.json.return_value = payload
    return resp


TRENDING = [tmdb_record(1, "Alpha"), tmdb_record(2, "Bravo"), tmdb_record(3, "Charlie")]


class ManualRunner:
    """Runner that queues jobs until the test decides to resolve them."""

    def __init__(self):
        self.pending = []

    def __call__(self, job, on_done, on_error):
        self.pending.append((job, on_done, on_error))

    def resolve(self, index=0):
        job, on_done, on_error = self.pending.pop(index)
        try:
            result = job()
        except Exception as exc:
            on_error(exc)
        else:
            on_done(result)

    def resolve_all(self):
        while self.pending:
            self.resolve(0)
