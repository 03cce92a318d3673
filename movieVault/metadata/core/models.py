# Movie dataclass + view-state DTOs
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from movieVault.settings import TMDB_IMAGE_BASE_URL, TMDB_SIGNUP_URL
from movieVault.utils import release_year, format_rating


@dataclass(frozen=True, slots=True)
class Movie:
    id: int
    title: str
    poster_path: str | None = None
    vote_average: float = 0.0
    overview: str = ""
    release_date: str = ""

    @classmethod
    def from_tmdb(cls, record: Mapping[str, Any]) -> "Movie":
        """Build a Movie from one entry of a TMDb ``results`` array.

        Raises ValueError when the record has no integer ``id``.
        """
        mid = record.get("id")
        if isinstance(mid, bool) or not isinstance(mid, int):
            raise ValueError(f"TMDb record without integer id: {mid!r}")
        return cls(
            id=mid,
            title=record.get("title") or record.get("name") or "",
            poster_path=record.get("poster_path") or None,
            vote_average=float(record.get("vote_average") or 0.0),
            overview=record.get("overview") or "",
            release_date=record.get("release_date") or record.get("first_air_date") or "",
        )

    @property
    def release_year(self) -> int | None:
        return release_year(self.release_date)

    @property
    def rating_label(self) -> str:
        return format_rating(self.vote_average)

    @property
    def poster_url(self) -> str | None:
        return f"{TMDB_IMAGE_BASE_URL}{self.poster_path}" if self.poster_path else None


class FetchMode(Enum):
    TRENDING = "trending"
    SEARCH = "search"


class LoadPhase(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


class ErrorKind(Enum):
    NONE = "none"
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT = "transport"
    NO_RESULTS = "no_results"


MISSING_KEY_MESSAGE = "API key is missing. Please add your TMDB API key to the .env file."
MISSING_KEY_STEPS = (
    f'Visit <a href="{TMDB_SIGNUP_URL}">TMDB Sign Up</a>',
    "Create an account and verify your email",
    "Go to Settings → API and request an API key",
    "Add the API key to your .env file as TMDB_API_KEY",
)

FAILURE_MESSAGES = {
    FetchMode.TRENDING: "Failed to fetch movies. Please try again later.",
    FetchMode.SEARCH:   "Failed to search movies. Please try again later.",
}
NO_RESULTS_MESSAGES = {
    FetchMode.TRENDING: "No movies found",
    FetchMode.SEARCH:   "No movies found for your search",
}


@dataclass(frozen=True, slots=True)
class ErrorState:
    """Tagged error slot shown in place of the movie grid."""
    kind: ErrorKind = ErrorKind.NONE
    message: str | None = None

    @property
    def is_error(self) -> bool:
        return self.kind is not ErrorKind.NONE

    @property
    def instructions(self) -> tuple[str, ...]:
        return MISSING_KEY_STEPS if self.kind is ErrorKind.MISSING_CREDENTIAL else ()

    @classmethod
    def none(cls) -> "ErrorState":
        return cls()

    @classmethod
    def missing_credential(cls) -> "ErrorState":
        return cls(ErrorKind.MISSING_CREDENTIAL, MISSING_KEY_MESSAGE)

    @classmethod
    def transport(cls, mode: FetchMode) -> "ErrorState":
        return cls(ErrorKind.TRANSPORT, FAILURE_MESSAGES[mode])

    @classmethod
    def no_results(cls, mode: FetchMode) -> "ErrorState":
        return cls(ErrorKind.NO_RESULTS, NO_RESULTS_MESSAGES[mode])


@dataclass(slots=True)
class ViewState:
    movies: list[Movie] = field(default_factory=list)
    phase: LoadPhase = LoadPhase.IDLE
    error: ErrorState = field(default_factory=ErrorState)
    search_text: str = ""
    selected: Movie | None = None
    bookmarks_only: bool = False
