"""metadata.core.store
State container for the main window.

Every mutation goes through a named method and ends with a change
notification; the GUI only reads ``store.state`` and
``store.displayed_movies()`` when it re-renders.
"""

from __future__ import annotations
from itertools import count
from typing import Callable, List

from movieVault.metadata.core.models import (
    ErrorState, FetchMode, LoadPhase, Movie, ViewState,
)
from movieVault.metadata.core.repo import BookmarkRepo
from movieVault.utils import log_debug

Listener = Callable[[], None]


class VaultStore:
    def __init__(self, bookmarks: BookmarkRepo, discard_stale: bool = False):
        self.bookmarks = bookmarks
        self.discard_stale = discard_stale
        self.state = ViewState()
        self._listeners: List[Listener] = []
        self._seq = count(1)
        self.latest_request = 0

    # ───────────────────────────── observers ─────────────────────────
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ───────────────────────────── request cycle ─────────────────────
    def begin_request(self, mode: FetchMode, query: str = "") -> int:
        """Enter LOADING for a new fetch and return its sequence number."""
        seq = next(self._seq)
        self.latest_request = seq
        st = self.state
        st.error = ErrorState.none()
        st.phase = LoadPhase.LOADING
        st.bookmarks_only = False
        if mode is FetchMode.TRENDING:
            st.search_text = ""
        log_debug(f"request #{seq} {mode.value} {query!r}")
        self._changed()
        return seq

    def _is_stale(self, seq: int) -> bool:
        if self.discard_stale and seq != self.latest_request:
            log_debug(f"request #{seq} dropped, #{self.latest_request} is newer")
            return True
        return False

    def resolve_request(self, seq: int, mode: FetchMode, movies: List[Movie]) -> bool:
        """Apply a successful response. Returns False if it was dropped as stale."""
        if self._is_stale(seq):
            return False
        st = self.state
        st.movies = list(movies)
        if st.movies:
            st.phase = LoadPhase.SUCCESS
            st.error = ErrorState.none()
        else:
            st.phase = LoadPhase.EMPTY
            st.error = ErrorState.no_results(mode)
        log_debug(f"request #{seq} resolved with {len(st.movies)} movie(s)")
        self._changed()
        return True

    def fail_request(self, seq: int, mode: FetchMode) -> bool:
        """Apply a transport/HTTP failure. Returns False if dropped as stale."""
        if self._is_stale(seq):
            return False
        st = self.state
        st.movies = []
        st.phase = LoadPhase.ERROR
        st.error = ErrorState.transport(mode)
        self._changed()
        return True

    def fail_configuration(self) -> None:
        st = self.state
        st.movies = []
        st.phase = LoadPhase.ERROR
        st.error = ErrorState.missing_credential()
        self._changed()

    # ───────────────────────────── view toggles ──────────────────────
    def set_search_text(self, text: str) -> None:
        self.state.search_text = text
        self._changed()

    def set_bookmarks_only(self, flag: bool) -> None:
        self.state.bookmarks_only = bool(flag)
        self._changed()

    def toggle_bookmarks_only(self) -> bool:
        self.set_bookmarks_only(not self.state.bookmarks_only)
        return self.state.bookmarks_only

    def select(self, movie: Movie) -> None:
        self.state.selected = movie
        self._changed()

    def clear_selection(self) -> None:
        self.state.selected = None
        self._changed()

    # ───────────────────────────── bookmarks ─────────────────────────
    def is_bookmarked(self, movie_id: int) -> bool:
        return movie_id in self.bookmarks

    def toggle_bookmark(self, movie_id: int) -> bool:
        """Toggle and persist; returns the membership before the toggle."""
        try:
            was_bookmarked = self.bookmarks.toggle(movie_id)
        finally:
            # a failed write still re-renders, so clicked buttons snap back
            self._changed()
        return was_bookmarked

    # ───────────────────────────── derived ───────────────────────────
    def displayed_movies(self) -> List[Movie]:
        movies = self.state.movies
        if not self.state.bookmarks_only:
            return list(movies)
        return [m for m in movies if m.id in self.bookmarks]
