import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from popcorn.exceptions import MalformedDetailError

NOT_AVAILABLE = "N/A"
RELEASE_DATE_PATTERN = "%d %b %Y"
MAX_RATING = 10


class OmdbRecord(BaseModel):
    """Fields shared by every record read from an OMDb payload.

    Validates from OMDb's own field names (``imdbID``, ``Title``, ...) and,
    for code and tests, from the python field names.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(validation_alias="imdbID")
    title: str = Field(validation_alias="Title")
    year: str = Field(default="", validation_alias="Year")
    poster_url: str = Field(default="", validation_alias="Poster")

    @field_validator("poster_url", mode="before")
    @classmethod
    def validate_poster_url(cls, v: Any) -> Any:
        return "" if v == NOT_AVAILABLE else v


class MovieSummary(OmdbRecord):
    """A search result."""


class MovieDetail(OmdbRecord):
    """The full record of one movie, as returned by a lookup by id."""

    runtime: str = Field(default="", validation_alias="Runtime")
    critic_rating: float | None = Field(default=None, validation_alias="imdbRating")
    plot: str = Field(default="", validation_alias="Plot")
    release_date: datetime.date | None = Field(default=None, validation_alias="Released")
    actors: str = Field(default="", validation_alias="Actors")
    director: str = Field(default="", validation_alias="Director")
    genre: str = Field(default="", validation_alias="Genre")

    @field_validator("critic_rating", mode="before")
    @classmethod
    def validate_critic_rating(cls, v: Any) -> Any:
        if v in {NOT_AVAILABLE, ""}:
            return None
        return v

    @field_validator("release_date", mode="before")
    @classmethod
    def validate_release_date(cls, v: Any) -> Any:
        if v in {NOT_AVAILABLE, ""}:
            return None
        if isinstance(v, str):
            return datetime.datetime.strptime(v, RELEASE_DATE_PATTERN).date()
        return v


class WatchedEntry(BaseModel):
    """A movie the user has watched, with their own rating."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    year: str = ""
    poster_url: str = ""
    critic_rating: float | None = None
    runtime_minutes: int = Field(ge=0)
    user_rating: int = Field(ge=1, le=MAX_RATING)

    @classmethod
    def from_detail(cls, detail: MovieDetail, user_rating: int) -> Self:
        """Build an entry from a fetched detail and the rating the user gave.

        Raises MalformedDetailError if the runtime cannot be parsed.
        """
        return cls(
            id=detail.id,
            title=detail.title,
            year=detail.year,
            poster_url=detail.poster_url,
            critic_rating=detail.critic_rating,
            runtime_minutes=cls.parse_runtime(detail.runtime),
            user_rating=user_rating,
        )

    @staticmethod
    def parse_runtime(runtime: str | None) -> int:
        tokens = runtime.split() if runtime else []
        if not tokens:
            raise MalformedDetailError("Missing runtime")
        try:
            minutes = int(tokens[0])
        except ValueError:
            raise MalformedDetailError(
                f"Bad runtime format {runtime!r}; should be like '120 min'."
            )
        if minutes < 0:
            raise MalformedDetailError(f"Negative runtime: {runtime!r}")
        return minutes

    @staticmethod
    def parse_rating(rating: int) -> int:
        if not 0 <= rating <= MAX_RATING:
            raise ValueError(f"Rating out of range (0 <= rating <= {MAX_RATING}): {rating}")
        return rating
