"""Exception hierarchy for movieVault.

    MovieVaultError (base)
    ├── MissingCredentialError - no TMDb API key configured
    └── TMDBError - transport failure or non-2xx response from TMDb
"""

from __future__ import annotations


class MovieVaultError(Exception):
    """Base exception for all movieVault errors."""


class MissingCredentialError(MovieVaultError):
    """Raised before any network activity when no API key is configured."""

    def __init__(self, message: str = "TMDB_API_KEY is not set"):
        super().__init__(message)


class TMDBError(MovieVaultError):
    """A TMDb request failed; the response body is never inspected."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} (HTTP {self.status_code})" if self.status_code else base
