from __future__ import annotations

from typing import Any, List

import requests

from movieVault.exceptions import MissingCredentialError, TMDBError
from movieVault.metadata.core.models import FetchMode, Movie
from movieVault.settings import TMDB_API_KEY, TMDB_BASE_URL, TMDB_TIMEOUT
from movieVault.utils import log_debug


class TMDBClient:
    """Thin read-only wrapper around The Movie Database (TMDb) v3 API.

    Two endpoints are used, both returning ``{"results": [...]}``:

        /trending/movie/week
        /search/movie?query=...

    Every call is a single GET for page 1; there is no retry and no
    timeout unless one is configured.

    Without an injected *session* each call goes through the module-level
    ``requests.get``, so worker threads never share a connection pool.
    Log lines and error messages never carry the request URL, which
    holds the API key.
    """

    TRENDING_PATH = "/trending/movie/week"
    SEARCH_PATH   = "/search/movie"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        api_key: str | None = TMDB_API_KEY,
        session: requests.Session | None = None,
        base_url: str = TMDB_BASE_URL,
        timeout: float | None = TMDB_TIMEOUT,
    ):
        self.api_key = (api_key or "").strip() or None
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def fetch(self, mode: FetchMode, query: str = "") -> List[Movie]:
        if mode is FetchMode.SEARCH:
            return self.search(query)
        return self.trending()

    def trending(self) -> List[Movie]:
        """This week's trending movies (page 1)."""
        return self._results(self.TRENDING_PATH)

    def search(self, query: str) -> List[Movie]:
        """Title search; a blank *query* falls back to :meth:`trending`."""
        if not query or not query.strip():
            return self.trending()
        return self._results(self.SEARCH_PATH, query=query)

    def poster_bytes(self, url: str) -> bytes:
        """Download a poster from the image CDN (no API key involved)."""
        try:
            resp = self._http_get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TMDBError(f"poster download failed: {type(exc).__name__}") from exc
        if not resp.ok:
            raise TMDBError("poster download failed", status_code=resp.status_code)
        return resp.content

    # ------------------------------------------------------------------
    # Internal helpers – API calls
    # ------------------------------------------------------------------
    def _http_get(self, url: str, **kwargs) -> requests.Response:
        http = requests if self.session is None else self.session
        return http.get(url, **kwargs)

    def _get(self, path: str, **params) -> Any:
        if not self.has_credential:
            raise MissingCredentialError()
        params["api_key"] = self.api_key

        try:
            resp = self._http_get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            # str(exc) embeds the full URL, api_key included
            log_debug(f"TMDb {path} transport error: {type(exc).__name__}")
            raise TMDBError(f"TMDb request to {path} failed: {type(exc).__name__}") from exc

        if not resp.ok:
            log_debug(f"TMDb {path} → HTTP {resp.status_code}")
            raise TMDBError(f"TMDb request to {path} failed", status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            log_debug(f"TMDb {path} returned a non-JSON body")
            raise TMDBError(f"TMDb returned invalid JSON for {path}") from exc

    def _results(self, path: str, **params) -> List[Movie]:
        payload = self._get(path, **params)
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            log_debug(f"TMDb {path}: no results array in payload")
            return []

        movies: List[Movie] = []
        for record in results:
            if not isinstance(record, dict):
                continue
            try:
                movies.append(Movie.from_tmdb(record))
            except (TypeError, ValueError) as exc:
                log_debug(f"TMDb {path}: skipping malformed record: {exc}")
        log_debug(f"TMDb {path} {params.get('query', '')!r} → {len(movies)} movie(s)")
        return movies
