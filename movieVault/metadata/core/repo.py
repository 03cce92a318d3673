"""metadata.core.repo
Bookmark repository.

The bookmarked movie-ids live in one JSON slot on disk (an array of
ints). The file is read once at start-up and rewritten in full after
every toggle; nothing else touches it.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, List

from movieVault.utils import log_debug


def _load_id_list(path: Path) -> List[int]:
    """Load the JSON slot; return [] when missing or unparsable."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return []
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        log_debug(f"bookmarks: ignoring unreadable {path.name}: {exc}")
        return []

    if not isinstance(raw, list):
        log_debug(f"bookmarks: expected a JSON array in {path.name}, got {type(raw).__name__}")
        return []
    return [i for i in raw if isinstance(i, int) and not isinstance(i, bool)]


class BookmarkRepo:
    """Set of bookmarked movie-ids mirrored to ``path``."""

    def __init__(self, path: Path):
        self.path = Path(path)
        # dict keeps insertion order and gives set semantics
        self._ids: dict[int, None] = {}

    # ───────────────────────────── readers ──────────────────────────
    def load(self) -> "BookmarkRepo":
        self._ids = dict.fromkeys(_load_id_list(self.path))
        log_debug(f"bookmarks: loaded {len(self._ids)} id(s) from {self.path}")
        return self

    def __contains__(self, movie_id: object) -> bool:
        return movie_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def ids(self) -> List[int]:
        return list(self._ids)

    # ───────────────────────────── writers ──────────────────────────
    def toggle(self, movie_id: int) -> bool:
        """Flip membership of *movie_id* and persist.

        Returns the membership *before* the toggle, so ``True`` means the
        id has just been removed.
        """
        was_present = movie_id in self._ids
        ids = dict(self._ids)
        if was_present:
            del ids[movie_id]
        else:
            ids[movie_id] = None
        # memory only changes once the file holds the new set
        self._save(ids)
        self._ids = ids
        return was_present

    def _save(self, ids: Dict[int, None]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(list(ids)), encoding="utf-8")
