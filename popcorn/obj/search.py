"""Search state and its transitions.

Every transition is a pure function ``(state, event) -> state``. A query
change hands out a ``SearchTicket``; results are applied only while that
ticket is still the current one, so a late response for an older query is
dropped instead of overwriting newer results.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

from popcorn.models.movie import MovieSummary


class SearchPanel(StrEnum):
    RESULTS = "RESULTS"
    LOADING = "LOADING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class SearchTicket:
    query: str
    seq: int


@dataclass(frozen=True)
class SearchState:
    query: str = ""
    results: tuple[MovieSummary, ...] = ()
    loading: bool = False
    error: str | None = None
    seq: int = 0

    @property
    def panel(self) -> SearchPanel:
        if self.error is not None:
            return SearchPanel.ERROR
        if self.loading:
            return SearchPanel.LOADING
        return SearchPanel.RESULTS

    def is_current(self, ticket: SearchTicket) -> bool:
        return ticket.seq == self.seq and ticket.query == self.query


def change_query(
    state: SearchState, query: str
) -> tuple[SearchState, SearchTicket | None]:
    seq = state.seq + 1
    if not query:
        return SearchState(seq=seq), None
    new_state = replace(state, query=query, loading=True, error=None, seq=seq)
    return new_state, SearchTicket(query, seq)


def search_succeeded(
    state: SearchState, ticket: SearchTicket, results: list[MovieSummary]
) -> SearchState:
    if not state.is_current(ticket):
        return state
    return replace(state, results=tuple(results), loading=False, error=None)


def search_failed(state: SearchState, ticket: SearchTicket, message: str) -> SearchState:
    if not state.is_current(ticket):
        return state
    return replace(state, results=(), loading=False, error=message)
