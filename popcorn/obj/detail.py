from dataclasses import dataclass, replace

from popcorn.models.movie import MovieDetail, WatchedEntry


@dataclass(frozen=True)
class DetailState:
    """Detail panel of the selected movie.

    ``movie_id`` is the id the detail was requested for; a fetched detail is
    only taken in when it was issued for that same id.
    """

    movie_id: str | None = None
    detail: MovieDetail | None = None
    loading: bool = False
    error: str | None = None
    user_rating: int = 0

    @property
    def can_add(self) -> bool:
        return self.detail is not None and self.user_rating > 0


def open_detail(movie_id: str) -> DetailState:
    return DetailState(movie_id=movie_id, loading=True)


def detail_loaded(state: DetailState, movie_id: str, detail: MovieDetail) -> DetailState:
    if movie_id != state.movie_id:
        return state
    return replace(state, detail=detail, loading=False, error=None)


def detail_failed(state: DetailState, movie_id: str, message: str) -> DetailState:
    if movie_id != state.movie_id:
        return state
    return replace(state, loading=False, error=message)


def rate(state: DetailState, value: int) -> DetailState:
    return replace(state, user_rating=WatchedEntry.parse_rating(value))


def build_entry(state: DetailState) -> WatchedEntry:
    """Raises MalformedDetailError if the detail cannot make a valid entry."""
    if not state.can_add:
        raise ValueError("Rate a loaded movie before adding it")
    assert state.detail is not None
    return WatchedEntry.from_detail(state.detail, state.user_rating)
