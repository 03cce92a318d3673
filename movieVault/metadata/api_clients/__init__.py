"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.
"""

from movieVault.metadata.api_clients.tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
