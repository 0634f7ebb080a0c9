import itertools
import random

from loguru import logger
from rich.markup import escape
from textual import work
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Input, ListView, Static
from textual.worker import Worker, WorkerState

from popcorn.applications.tui.widgets import MovieItem, StarRating, WatchedItem
from popcorn.models.movie import MovieDetail, MovieSummary
from popcorn.obj.search import SearchPanel, SearchTicket
from popcorn.services.session_service import Outcome, SessionService
from popcorn.utils.rich_utils import (
    format_detail_body,
    format_detail_header,
    format_num_results,
    format_summary,
)


class PopcornApp(App):
    CSS_PATH = "popcorn.tcss"
    TITLE = "usePopcorn"
    BINDINGS = [
        ("escape", "close_movie()", "close movie"),
        ("ctrl+r", "next_theme()", "cycle themes"),
    ]

    def __init__(self, session_service: SessionService, initial_query: str = "") -> None:
        self._session = session_service
        self._initial_query = initial_query
        self._shown_results: tuple[MovieSummary, ...] | None = None
        super().__init__()
        self._themes = list(
            self.available_themes.keys()
            - {"textual-light", "solarized-light", "catppuccin-latte"}
        )
        random.shuffle(self._themes)
        self._themes_it = itertools.cycle(self._themes)

    def action_next_theme(self) -> None:
        self.theme = next(self._themes_it)

    def compose(self) -> ComposeResult:
        with Horizontal(id="nav-bar"):
            yield Static("🍿 usePopcorn", id="logo")
            yield Input(
                value=self._initial_query, placeholder="Search movies...", id="search"
            )
            yield Static("", id="num-results")
        with Horizontal(id="main"):
            with Vertical(id="results-box", classes="box"):
                yield Static("Loading...", id="loader")
                yield Static("", id="error")
                yield ListView(id="movies")
            with Vertical(id="side-box", classes="box"):
                yield Button("–", id="toggle", classes="btn-toggle")
                with VerticalScroll(id="box-content"):
                    with Vertical(id="details"):
                        yield Button("←", id="back")
                        yield Static("", id="details-header")
                        yield StarRating(id="rating")
                        yield Static("", id="rated")
                        yield Button("+ Add to list", id="add", variant="primary")
                        yield Static("", id="details-body")
                    with Vertical(id="watched"):
                        yield Static("", id="summary")
                        yield ListView(id="watched-list")

    def on_mount(self) -> None:
        logger.info(f"starting PopcornApp; initial query {self._initial_query!r}")
        self._change_query(self._initial_query)
        self.refresh_box()

    # search

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search":
            self._change_query(event.value)

    def _change_query(self, query: str) -> None:
        if query == self._session.search_state.query and self._shown_results is not None:
            return
        ticket = self._session.set_query(query)
        self.refresh_search()
        if ticket is not None:
            self.fetch_results(ticket)

    @work(thread=True, group="search", exit_on_error=False)
    def fetch_results(self, ticket: SearchTicket) -> None:
        outcome = self._session.perform_search(ticket)
        self.call_from_thread(self._apply_search, outcome)

    def _apply_search(self, outcome: Outcome[SearchTicket, list[MovieSummary]]) -> None:
        if self._session.apply_search(outcome):
            self.refresh_search()

    def refresh_search(self) -> None:
        state = self._session.search_state
        self.query_one("#num-results", Static).update(
            format_num_results(len(state.results))
        )
        self.query_one("#loader", Static).display = state.panel == SearchPanel.LOADING
        error = self.query_one("#error", Static)
        error.display = state.panel == SearchPanel.ERROR
        error.update(f"⛔ {escape(state.error or '')}")
        movies = self.query_one("#movies", ListView)
        movies.display = state.panel == SearchPanel.RESULTS
        if state.results != self._shown_results:
            self._shown_results = state.results
            movies.clear()
            movies.extend(MovieItem(movie) for movie in state.results)

    # selection and detail

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, MovieItem):
            to_fetch = self._session.select(event.item.movie.id)
            self.query_one(StarRating).rating = 0
            self.refresh_box()
            if to_fetch is not None:
                self.fetch_detail(to_fetch)

    @work(thread=True, group="detail", exit_on_error=False)
    def fetch_detail(self, movie_id: str) -> None:
        outcome = self._session.perform_detail(movie_id)
        self.call_from_thread(self._apply_detail, outcome)

    def _apply_detail(self, outcome: Outcome[str, MovieDetail]) -> None:
        if self._session.apply_detail(outcome):
            self.refresh_box()

    def on_star_rating_changed(self, event: StarRating.Changed) -> None:
        self._session.submit_rating(event.rating)
        self.refresh_box()

    def action_close_movie(self) -> None:
        self._session.close()
        self.refresh_box()

    def _add_selected(self) -> None:
        entry = self._session.confirm_add()
        if entry is None:
            self.notify(f" {self._session.detail.error}", severity="error")
        else:
            self.notify(f"Added {entry.title} ({entry.user_rating} ⭐)")
        self.refresh_box()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if button.id == "toggle":
            content = self.query_one("#box-content")
            content.display = not content.display
            button.label = "–" if content.display else "+"
        elif button.id == "back":
            self.action_close_movie()
        elif button.id == "add":
            self._add_selected()
        elif button.has_class("btn-delete") and button.name:
            self._session.delete_watched(button.name)
            self.refresh_box()

    def refresh_box(self) -> None:
        selected_id = self._session.selected_id
        self.query_one("#details").display = selected_id is not None
        self.query_one("#watched").display = selected_id is None
        if selected_id is None:
            self._refresh_watched()
        else:
            self._refresh_details(selected_id)

    def _refresh_details(self, selected_id: str) -> None:
        state = self._session.detail
        header = self.query_one("#details-header", Static)
        body = self.query_one("#details-body", Static)
        rating = self.query_one(StarRating)
        rated = self.query_one("#rated", Static)
        add = self.query_one("#add", Button)

        ready = not state.loading and state.detail is not None
        for widget in (body, rating, rated, add):
            widget.display = ready
        if state.loading:
            header.update("Loading...")
            return
        if state.detail is None:
            header.update(f"⛔ {escape(state.error or 'Could not load the movie')}")
            return

        header.update(format_detail_header(state.detail))
        body.update(format_detail_body(state.detail))
        is_watched = self._session.is_watched(selected_id)
        rating.display = not is_watched
        rated.display = is_watched
        rated.update(
            f"You rated this movie {self._session.prior_user_rating(selected_id)} ⭐"
        )
        add.display = not is_watched and state.can_add

    def _refresh_watched(self) -> None:
        self.query_one("#summary", Static).update(format_summary(self._session.summary()))
        watched = self.query_one("#watched-list", ListView)
        watched.clear()
        watched.extend(WatchedItem(entry) for entry in self._session.watch_list)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.state == WorkerState.ERROR:
            logger.error(f"worker {event.worker.name} failed: {event.worker.error!r}")
            self.notify(f" {event.worker.error}", severity="error")
