import json
from unittest.mock import Mock

import pytest
import requests

from movieVault.exceptions import MissingCredentialError
from movieVault.gui.controller import ADDED_NOTICE, REMOVED_NOTICE, SAVE_FAILED_NOTICE, VaultController
from movieVault.metadata import ErrorKind, LoadPhase, TMDBClient
from movieVault.settings import LOG_PATH

from tests.helpers import BASE_URL, TRENDING, tmdb_record


def _ids(store):
    return [m.id for m in store.displayed_movies()]


def _endpoints(session):
    return [c.args[0].rsplit("/3", 1)[-1] for c in session.get.call_args_list]


# ───────────────────────── start-up ──────────────────────────────────────
def test_missing_credential_at_startup_issues_no_fetch(store, session, runner, notices):
    client = TMDBClient(api_key=None, session=session, base_url=BASE_URL)
    controller = VaultController(store, client, runner)

    controller.start()
    runner.resolve_all()

    assert session.get.call_count == 0
    assert runner.pending == []
    assert store.state.phase is LoadPhase.ERROR
    assert store.state.error.kind is ErrorKind.MISSING_CREDENTIAL
    assert store.state.error.instructions


def test_missing_credential_blocks_every_fetch_action(store, session, runner):
    controller = VaultController(store, TMDBClient(api_key="", session=session, base_url=BASE_URL), runner)

    controller.show_trending()
    controller.search("dune")

    assert runner.pending == []
    session.get.assert_not_called()
    assert store.state.error.kind is ErrorKind.MISSING_CREDENTIAL
    assert store.state.search_text == "dune"


def test_start_loads_trending(controller, store, runner):
    controller.start()
    assert store.state.phase is LoadPhase.LOADING

    runner.resolve_all()
    assert store.state.phase is LoadPhase.SUCCESS
    assert _ids(store) == [r["id"] for r in TRENDING]


# ───────────────────────── search ────────────────────────────────────────
def test_search_fetches_on_each_keystroke(controller, store, runner, session, search_results):
    search_results["d"] = [tmdb_record(10, "Dallas")]
    search_results["du"] = [tmdb_record(11, "Dune")]

    controller.search("d")
    controller.search("du")
    assert len(runner.pending) == 2
    assert store.state.search_text == "du"

    runner.resolve_all()
    assert _endpoints(session) == ["/search/movie", "/search/movie"]
    assert _ids(store) == [11]


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_search_matches_trending(controller, store, runner, session, blank):
    controller.show_trending()
    runner.resolve_all()
    trending = store.displayed_movies()

    controller.search(blank)
    runner.resolve_all()

    assert store.displayed_movies() == trending
    assert _endpoints(session) == ["/trending/movie/week", "/trending/movie/week"]


def test_zero_results_sets_no_results_slot(controller, store, runner):
    controller.search("qwertyuiop")
    runner.resolve_all()

    assert store.displayed_movies() == []
    assert store.state.phase is LoadPhase.EMPTY
    assert store.state.error.kind is ErrorKind.NO_RESULTS
    assert store.state.error.message == "No movies found for your search"


def test_transport_failure_sets_error_and_notifies(controller, store, runner, session, notices):
    controller.start()
    runner.resolve_all()
    session.get.side_effect = None
    session.get.return_value.ok = False
    session.get.return_value.status_code = 503

    controller.search("dune")
    runner.resolve_all()

    assert store.state.movies == []
    assert store.state.error.kind is ErrorKind.TRANSPORT
    assert store.state.error.message == "Failed to search movies. Please try again later."
    assert notices == [("error", "Failed to search movies. Please try again later.")]


def test_failed_request_log_never_contains_api_key(store, runner, notices):
    secret = "controller-secret-key"
    session = Mock(spec=requests.Session)
    session.get.side_effect = requests.ConnectionError(f"/search/movie?query=x&api_key={secret}")
    controller = VaultController(store, TMDBClient(api_key=secret, session=session, base_url=BASE_URL),
                                 runner, notify=lambda level, text: notices.append((level, text)))

    controller.search("x")
    runner.resolve_all()

    assert store.state.error.kind is ErrorKind.TRANSPORT
    assert secret not in LOG_PATH.read_text(encoding="utf-8")


def test_unexpected_job_exception_is_a_transport_failure(store, runner, notices):
    class Exploding(TMDBClient):
        def fetch(self, mode, query=""):
            raise RuntimeError("boom")

    controller = VaultController(store, Exploding(api_key="k"), runner,
                                 notify=lambda level, text: notices.append((level, text)))
    controller.show_trending()
    runner.resolve_all()

    assert store.state.error.kind is ErrorKind.TRANSPORT
    assert notices == [("error", "Failed to fetch movies. Please try again later.")]


def test_credential_error_from_job_maps_to_configuration_state(store, runner, notices):
    class Revoked(TMDBClient):
        def fetch(self, mode, query=""):
            raise MissingCredentialError()

    controller = VaultController(store, Revoked(api_key="k"), runner,
                                 notify=lambda level, text: notices.append((level, text)))
    controller.show_trending()
    runner.resolve_all()

    assert store.state.error.kind is ErrorKind.MISSING_CREDENTIAL
    assert notices == []


def test_last_resolved_response_wins(controller, store, runner, search_results):
    search_results["a"] = [tmdb_record(1, "Alien")]
    search_results["ab"] = [tmdb_record(2, "Abyss")]

    controller.search("a")
    controller.search("ab")
    runner.resolve(1)           # second issued, resolves first
    assert _ids(store) == [2]
    runner.resolve(0)           # first issued, resolves last
    assert _ids(store) == [1]
    assert store.state.search_text == "ab"


def test_discard_stale_keeps_last_issued(repo, client, runner, search_results):
    from movieVault.metadata import VaultStore

    store = VaultStore(repo, discard_stale=True)
    controller = VaultController(store, client, runner)
    search_results["a"] = [tmdb_record(1, "Alien")]
    search_results["ab"] = [tmdb_record(2, "Abyss")]

    controller.search("a")
    controller.search("ab")
    runner.resolve(1)
    runner.resolve(0)
    assert _ids(store) == [2]


# ───────────────────────── trending / filter ─────────────────────────────
def test_show_trending_resets_search_and_filter(controller, store, runner, search_results):
    search_results["dune"] = [tmdb_record(11, "Dune")]
    controller.search("dune")
    runner.resolve_all()
    controller.toggle_bookmarks_only()
    assert store.state.bookmarks_only

    controller.show_trending()
    assert store.state.search_text == ""
    assert store.state.bookmarks_only is False
    runner.resolve_all()
    assert _ids(store) == [1, 2, 3]


def test_bookmarks_only_view(controller, store, runner):
    controller.start()
    runner.resolve_all()
    controller.toggle_bookmark(3)
    controller.toggle_bookmark(1)

    assert controller.toggle_bookmarks_only() is True
    assert _ids(store) == [1, 3]
    assert controller.toggle_bookmarks_only() is False
    assert _ids(store) == [1, 2, 3]


# ───────────────────────── bookmarks ─────────────────────────────────────
def test_toggle_bookmark_notices_follow_previous_state(controller, notices, bookmarks_path):
    assert controller.toggle_bookmark(7) is True
    assert controller.toggle_bookmark(7) is False

    assert notices == [("success", ADDED_NOTICE), ("success", REMOVED_NOTICE)]
    assert json.loads(bookmarks_path.read_text(encoding="utf-8")) == []


def test_failed_bookmark_write_notifies_and_rerenders(controller, store, notices, bookmarks_path):
    renders = []
    store.subscribe(lambda: renders.append(store.is_bookmarked(7)))
    bookmarks_path.mkdir()

    assert controller.toggle_bookmark(7) is False
    assert not store.is_bookmarked(7)
    assert notices == [("error", SAVE_FAILED_NOTICE)]
    assert renders == [False]


def test_details_selection(controller, store, runner):
    controller.start()
    runner.resolve_all()
    movie = store.displayed_movies()[1]

    controller.open_details(movie)
    assert store.state.selected == movie
    controller.close_details()
    assert store.state.selected is None
