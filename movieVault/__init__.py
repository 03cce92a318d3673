"""
movieVault
~~~~~~~~~~

Top-level package for the MovieVault application.

Exports:
  - TMDB_API_KEY, BOOKMARKS_PATH
  - Core objects: Movie, BookmarkRepo, VaultStore, TMDBClient
"""

# settings
from movieVault.settings import TMDB_API_KEY, BOOKMARKS_PATH

# core
from movieVault.metadata import Movie, BookmarkRepo, VaultStore, TMDBClient

__version__ = "0.1.0"

__all__ = [
    # settings
    "TMDB_API_KEY",
    "BOOKMARKS_PATH",
    # core
    "Movie",
    "BookmarkRepo",
    "VaultStore",
    "TMDBClient",
]
