"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – dataclasses, bookmark repository, view-state store
* api_clients – TMDb client
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieVault.metadata.core.models import Movie, ErrorKind, ErrorState, FetchMode, LoadPhase, ViewState
from movieVault.metadata.core.repo   import BookmarkRepo
from movieVault.metadata.core.store  import VaultStore

# ── API client ────────────────────────────────────────────────────────────
from movieVault.metadata.api_clients.tmdb_client import TMDBClient

__all__ = [
    "Movie",
    "ErrorKind",
    "ErrorState",
    "FetchMode",
    "LoadPhase",
    "ViewState",
    "BookmarkRepo",
    "VaultStore",
    "TMDBClient",
]
