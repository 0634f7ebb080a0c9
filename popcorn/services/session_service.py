from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from loguru import logger

from popcorn.exceptions import DuplicateEntryError, MalformedDetailError, PopcornError
from popcorn.models.movie import MovieDetail, MovieSummary, WatchedEntry
from popcorn.obj.detail import (
    DetailState,
    build_entry,
    detail_failed,
    detail_loaded,
    open_detail,
    rate,
)
from popcorn.obj.omdb_client import OmdbClient
from popcorn.obj.search import (
    SearchState,
    SearchTicket,
    change_query,
    search_failed,
    search_succeeded,
)
from popcorn.obj.selection import SelectionState, close, select
from popcorn.obj.watch_list import WatchList, WatchListSummary

TokenT = TypeVar("TokenT")
ValueT = TypeVar("ValueT")


@dataclass(frozen=True)
class Outcome(Generic[TokenT, ValueT]):
    """Settled result of a fetch, tagged with the token it was issued for."""

    token: TokenT
    value: ValueT | None = None
    error: str | None = None


class SessionService:
    """The browsing session: search, selection, detail and the watch list.

    ``perform_*`` methods only talk to the movie database and may run off the
    UI thread; every state change goes through the other methods.
    """

    def __init__(self, client: OmdbClient, watch_list: WatchList) -> None:
        self._client = client
        self.watch_list = watch_list
        self.search_state = SearchState()
        self.selection = SelectionState()
        self.detail = DetailState()

    @property
    def selected_id(self) -> str | None:
        return self.selection.selected_id

    # search

    def set_query(self, query: str) -> SearchTicket | None:
        """Start a new search cycle; returns the ticket to fetch, if any."""
        self.search_state, ticket = change_query(self.search_state, query)
        logger.debug(f"query changed to {query!r}; {ticket=}")
        return ticket

    def perform_search(
        self, ticket: SearchTicket
    ) -> Outcome[SearchTicket, list[MovieSummary]]:
        try:
            movies = self._client.search_movies(ticket.query)
        except PopcornError as e:
            logger.info(f"search for {ticket.query!r} failed: {e}")
            return Outcome(ticket, error=str(e))
        return Outcome(ticket, value=movies)

    def apply_search(self, outcome: Outcome[SearchTicket, list[MovieSummary]]) -> bool:
        if not self.search_state.is_current(outcome.token):
            logger.debug(f"discarding stale search results for {outcome.token}")
            return False
        if outcome.error is not None:
            self.search_state = search_failed(
                self.search_state, outcome.token, outcome.error
            )
        else:
            self.search_state = search_succeeded(
                self.search_state, outcome.token, outcome.value or []
            )
        return True

    def search(self, query: str) -> SearchState:
        ticket = self.set_query(query)
        if ticket is not None:
            self.apply_search(self.perform_search(ticket))
        return self.search_state

    # selection and detail

    def select(self, movie_id: str) -> str | None:
        """Select a movie (or close it if already selected).

        Returns the id whose detail should now be fetched, or None.
        """
        self.selection = select(self.selection, movie_id)
        if self.selection.selected_id is None:
            self.detail = DetailState()
            return None
        self.detail = open_detail(movie_id)
        return movie_id

    def close(self) -> None:
        self.selection = close(self.selection)
        self.detail = DetailState()

    def perform_detail(self, movie_id: str) -> Outcome[str, MovieDetail]:
        try:
            detail = self._client.get_movie_by_id(movie_id)
        except PopcornError as e:
            logger.info(f"details for {movie_id} failed: {e}")
            return Outcome(movie_id, error=str(e))
        return Outcome(movie_id, value=detail)

    def apply_detail(self, outcome: Outcome[str, MovieDetail]) -> bool:
        if outcome.token != self.selection.selected_id:
            logger.debug(f"discarding stale details for {outcome.token}")
            return False
        if outcome.value is not None:
            self.detail = detail_loaded(self.detail, outcome.token, outcome.value)
        else:
            self.detail = detail_failed(
                self.detail, outcome.token, outcome.error or "Could not load the movie"
            )
        return True

    def open(self, movie_id: str) -> DetailState:
        to_fetch = self.select(movie_id)
        if to_fetch is not None:
            self.apply_detail(self.perform_detail(to_fetch))
        return self.detail

    def submit_rating(self, value: int) -> None:
        self.detail = rate(self.detail, value)

    def confirm_add(self) -> WatchedEntry | None:
        """Add the selected movie with the pending rating, then close it.

        On failure the selection stays open with the error set on the detail.
        """
        try:
            entry = build_entry(self.detail)
            self.watch_list.add(entry)
        except (MalformedDetailError, DuplicateEntryError) as e:
            logger.warning(f"could not add {self.detail.movie_id}: {e}")
            self.detail = replace(self.detail, error=str(e))
            return None
        logger.info(f"added {entry.title!r} ({entry.id}) rated {entry.user_rating}")
        self.close()
        return entry

    # watch list

    def is_watched(self, movie_id: str | None) -> bool:
        return movie_id is not None and movie_id in self.watch_list

    def prior_user_rating(self, movie_id: str | None) -> int | None:
        if movie_id is None:
            return None
        entry = self.watch_list.get(movie_id)
        return entry.user_rating if entry else None

    def delete_watched(self, movie_id: str) -> bool:
        deleted = self.watch_list.delete(movie_id)
        logger.info(f"delete {movie_id}: {'done' if deleted else 'not in the list'}")
        return deleted

    def summary(self) -> WatchListSummary:
        return self.watch_list.summary()
