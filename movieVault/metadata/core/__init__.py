from movieVault.metadata.core.models import Movie
from movieVault.metadata.core.repo   import BookmarkRepo
from movieVault.metadata.core.store  import VaultStore

__all__ = ["Movie", "BookmarkRepo", "VaultStore"]
