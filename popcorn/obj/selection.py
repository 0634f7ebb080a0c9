from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionState:
    selected_id: str | None = None


def select(state: SelectionState, movie_id: str) -> SelectionState:
    """Select a movie; selecting the selected one again closes it."""
    if movie_id == state.selected_id:
        return SelectionState()
    return SelectionState(movie_id)


def close(state: SelectionState) -> SelectionState:
    return SelectionState()
