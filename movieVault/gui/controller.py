from __future__ import annotations
from typing import Callable, List, Optional

from movieVault.exceptions import MissingCredentialError
from movieVault.metadata.api_clients.tmdb_client import TMDBClient
from movieVault.metadata.core.models import FetchMode, Movie
from movieVault.metadata.core.store import VaultStore
from movieVault.utils import log_debug

# runner(job, on_done, on_error): run job() in the background, then call
# exactly one of the callbacks back on the UI thread
Runner = Callable[[Callable[[], object], Callable[[object], None], Callable[[BaseException], None]], None]
Notify = Callable[[str, str], None]

ADDED_NOTICE   = "Added to bookmarks"
REMOVED_NOTICE = "Removed from bookmarks"
SAVE_FAILED_NOTICE = "Could not save bookmarks"


class VaultController:
    """All user actions of the main window, funnelled into the store."""

    def __init__(
        self,
        store: VaultStore,
        client: TMDBClient,
        runner: Runner,
        notify: Optional[Notify] = None,
    ):
        self.store = store
        self.client = client
        self.runner = runner
        self.notify = notify or (lambda level, text: None)

    # ───────────────────────── fetch actions ─────────────────────────
    def start(self) -> None:
        """Initial mount: configuration check, then the trending list."""
        if not self.client.has_credential:
            log_debug("start-up: TMDB_API_KEY missing")
            self.store.fail_configuration()
            return
        self.show_trending()

    def show_trending(self) -> None:
        """Home action: clear search + bookmark filter and reload trending."""
        self._dispatch(FetchMode.TRENDING)

    def search(self, text: str) -> None:
        """Called on every keystroke; blank text means trending."""
        self.store.set_search_text(text)
        if not text.strip():
            self._dispatch(FetchMode.TRENDING)
        else:
            self._dispatch(FetchMode.SEARCH, text)

    def _dispatch(self, mode: FetchMode, query: str = "") -> None:
        if not self.client.has_credential:
            self.store.fail_configuration()
            return

        seq = self.store.begin_request(mode, query)

        def on_done(movies: List[Movie]) -> None:
            self.store.resolve_request(seq, mode, movies)

        def on_error(exc: BaseException) -> None:
            if isinstance(exc, MissingCredentialError):
                self.store.fail_configuration()
                return
            log_debug(f"request #{seq} {mode.value} failed: {exc!r}")
            if self.store.fail_request(seq, mode):
                self.notify("error", self.store.state.error.message)

        self.runner(lambda: self.client.fetch(mode, query), on_done, on_error)

    # ───────────────────────── bookmark / view actions ───────────────
    def toggle_bookmark(self, movie_id: int) -> bool:
        """Toggle *movie_id*; returns True when it is now bookmarked."""
        try:
            was_bookmarked = self.store.toggle_bookmark(movie_id)
        except OSError as exc:
            log_debug(f"bookmarks: saving {movie_id} failed: {exc}")
            self.notify("error", SAVE_FAILED_NOTICE)
            return self.store.is_bookmarked(movie_id)
        self.notify("success", REMOVED_NOTICE if was_bookmarked else ADDED_NOTICE)
        return not was_bookmarked

    def toggle_bookmarks_only(self) -> bool:
        return self.store.toggle_bookmarks_only()

    def open_details(self, movie: Movie) -> None:
        self.store.select(movie)

    def close_details(self) -> None:
        self.store.clear_selection()
