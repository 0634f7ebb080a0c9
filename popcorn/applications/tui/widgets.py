from rich.text import Text
from textual import events
from textual.app import ComposeResult, RenderResult
from textual.containers import Horizontal
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, ListItem, Static

from popcorn.models.movie import MAX_RATING, MovieSummary, WatchedEntry
from popcorn.utils.rich_utils import format_movie, format_watched

FULL_STAR = "★"
EMPTY_STAR = "☆"


class StarRating(Widget, can_focus=True):
    """Row of clickable stars; posts ``StarRating.Changed`` when a star is picked.

    Arrow keys move the rating by one star.
    """

    BINDINGS = [
        ("left", "decrease", "less"),
        ("right", "increase", "more"),
    ]

    rating: reactive[int] = reactive(0)

    class Changed(Message):
        def __init__(self, star_rating: "StarRating", rating: int) -> None:
            self.star_rating = star_rating
            self.rating = rating
            super().__init__()

    def __init__(self, max_rating: int = MAX_RATING, **kwargs) -> None:
        super().__init__(**kwargs)
        self.max_rating = max_rating

    def render(self) -> RenderResult:
        stars = " ".join(
            FULL_STAR if i < self.rating else EMPTY_STAR for i in range(self.max_rating)
        )
        return Text(f"{stars}  {self.rating or ''}", style="bold yellow")

    def set_rating(self, value: int) -> None:
        value = max(1, min(self.max_rating, value))
        self.rating = value
        self.post_message(self.Changed(self, value))

    def on_click(self, event: events.Click) -> None:
        star = event.x // 2 + 1
        if 1 <= star <= self.max_rating:
            self.set_rating(star)

    def action_increase(self) -> None:
        self.set_rating(self.rating + 1)

    def action_decrease(self) -> None:
        self.set_rating(self.rating - 1)


class MovieItem(ListItem):
    def __init__(self, movie: MovieSummary) -> None:
        super().__init__(Static(format_movie(movie)))
        self.movie = movie


class WatchedItem(ListItem):
    def __init__(self, entry: WatchedEntry) -> None:
        super().__init__()
        self.entry = entry

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Static(format_watched(self.entry), classes="watched-text")
            yield Button("X", name=self.entry.id, classes="btn-delete", variant="error")
