from pathlib import Path
import os
from dotenv import load_dotenv, find_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (.env in the working tree, then secret.env beside the package)
load_dotenv(find_dotenv(usecwd=True))
load_dotenv(BASE_DIR / "secret.env")


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str) -> float | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        raise EnvironmentError(f"{name} must be a number of seconds, got {raw!r}")


# A missing key is reported in the UI, not raised here
TMDB_API_KEY   = (os.getenv("TMDB_API_KEY") or "").strip() or None
TMDB_BASE_URL  = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3").rstrip("/")
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
TMDB_SIGNUP_URL     = "https://www.themoviedb.org/signup"
TMDB_TIMEOUT   = _env_float("TMDB_TIMEOUT")          # None == wait forever

# File / folder paths
DATA_DIR       = Path(os.getenv("MOVIEVAULT_DATA_DIR") or Path.home() / ".movievault").expanduser()
BOOKMARKS_SLOT = "movieVaultBookmarks"
BOOKMARKS_PATH = DATA_DIR / f"{BOOKMARKS_SLOT}.json"
LOG_PATH       = Path(os.getenv("MOVIEVAULT_LOG_PATH") or DATA_DIR / "movievault_debug.log").expanduser()

# Request ordering: False keeps "last response to arrive wins"
DISCARD_STALE_RESPONSES = _env_flag("MOVIEVAULT_DISCARD_STALE")

# UI constants
APP_NAME        = "MovieVault"
ACCENT_COLOR    = "#a855f7"
RATING_COLOR    = "#eab308"
NOTICE_MS       = 3000
CARD_WIDTH      = 200
POSTER_HEIGHT   = 300
POSTER_CACHE_SIZE = 200   # decoded w500 posters kept in memory
