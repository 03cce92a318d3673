import os
import tempfile

# keep the debug log and any default data dir out of the user's home
_TMP = tempfile.mkdtemp(prefix="movievault-tests-")
os.environ["MOVIEVAULT_DATA_DIR"] = _TMP
os.environ["MOVIEVAULT_LOG_PATH"] = os.path.join(_TMP, "movievault_debug.log")

from unittest.mock import Mock

import pytest
import requests

from movieVault.metadata import BookmarkRepo, TMDBClient, VaultStore
from movieVault.gui.controller import VaultController

from tests.helpers import API_KEY, BASE_URL, TRENDING, ManualRunner, make_response


@pytest.fixture
def search_results():
    """query → TMDb results; tests add entries before issuing searches."""
    return {}


@pytest.fixture
def session(search_results):
    """Mocked HTTP session routing by endpoint and query."""
    sess = Mock(spec=requests.Session)

    def route(url, params=None, timeout=None):
        params = params or {}
        if url.endswith("/trending/movie/week"):
            return make_response({"results": TRENDING})
        if url.endswith("/search/movie"):
            return make_response({"results": search_results.get(params.get("query"), [])})
        return make_response(status=404)

    sess.get.side_effect = route
    return sess


@pytest.fixture
def client(session):
    return TMDBClient(api_key=API_KEY, session=session, base_url=BASE_URL)


@pytest.fixture
def bookmarks_path(tmp_path):
    return tmp_path / "movieVaultBookmarks.json"


@pytest.fixture
def repo(bookmarks_path):
    return BookmarkRepo(bookmarks_path).load()


@pytest.fixture
def store(repo):
    return VaultStore(repo)


@pytest.fixture
def runner():
    return ManualRunner()


@pytest.fixture
def notices():
    return []


@pytest.fixture
def controller(store, client, runner, notices):
    return VaultController(store, client, runner, notify=lambda level, text: notices.append((level, text)))
