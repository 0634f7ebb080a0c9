from typing import Any

import pytest

from popcorn.exceptions import NetworkError, NotFoundError
from popcorn.models.movie import MovieDetail, MovieSummary
from popcorn.obj.watch_list import WatchList
from popcorn.services.session_service import SessionService

INCEPTION_ID = "tt1375666"
INTERSTELLAR_ID = "tt0816692"


def detail_payload(**overrides: str) -> dict[str, Any]:
    payload = {
        "Title": "Inception",
        "Year": "2010",
        "Rated": "PG-13",
        "Released": "16 Jul 2010",
        "Runtime": "148 min",
        "Genre": "Action, Adventure, Sci-Fi",
        "Director": "Christopher Nolan",
        "Actors": "Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page",
        "Plot": "A thief who steals corporate secrets through dream-sharing technology.",
        "Poster": "https://example.com/inception.jpg",
        "imdbRating": "8.8",
        "imdbVotes": "2,600,000",
        "imdbID": INCEPTION_ID,
        "Type": "movie",
        "Response": "True",
    }
    payload.update(overrides)
    return payload


SEARCH_PAYLOAD: dict[str, Any] = {
    "Search": [
        {
            "Title": "Inception",
            "Year": "2010",
            "imdbID": INCEPTION_ID,
            "Type": "movie",
            "Poster": "https://example.com/inception.jpg",
        },
        {
            "Title": "Inception: The Cobol Job",
            "Year": "2010",
            "imdbID": "tt5295894",
            "Type": "movie",
            "Poster": "N/A",
        },
    ],
    "totalResults": "2",
    "Response": "True",
}


class FakeOmdbClient:
    """In-memory stand-in for OmdbClient, keyed by lowercase query and by id."""

    def __init__(
        self,
        searches: dict[str, list[MovieSummary]],
        details: dict[str, MovieDetail],
    ) -> None:
        self.searches = searches
        self.details = details
        self.calls: list[tuple[str, str]] = []
        self.offline = False

    def search_movies(self, title: str) -> list[MovieSummary]:
        self.calls.append(("search", title))
        if self.offline:
            raise NetworkError("Something went wrong with fetching movies")
        if title.lower() not in self.searches:
            raise NotFoundError("Movie not found!")
        return self.searches[title.lower()]

    def get_movie_by_id(self, movie_id: str) -> MovieDetail:
        self.calls.append(("lookup", movie_id))
        if self.offline:
            raise NetworkError("Something went wrong with fetching movies")
        if movie_id not in self.details:
            raise NotFoundError("Incorrect IMDb ID.")
        return self.details[movie_id]


@pytest.fixture
def inception() -> MovieDetail:
    return MovieDetail.model_validate(detail_payload())


@pytest.fixture
def interstellar() -> MovieDetail:
    return MovieDetail.model_validate(
        detail_payload(
            Title="Interstellar",
            Year="2014",
            Released="07 Nov 2014",
            Runtime="169 min",
            imdbRating="8.7",
            imdbID=INTERSTELLAR_ID,
        )
    )


@pytest.fixture
def fake_client(inception: MovieDetail, interstellar: MovieDetail) -> FakeOmdbClient:
    return FakeOmdbClient(
        searches={
            "inception": [
                MovieSummary.model_validate(item) for item in SEARCH_PAYLOAD["Search"]
            ],
            "interstellar": [
                MovieSummary(
                    id=INTERSTELLAR_ID,
                    title="Interstellar",
                    year="2014",
                    poster_url="",
                )
            ],
        },
        details={INCEPTION_ID: inception, INTERSTELLAR_ID: interstellar},
    )


@pytest.fixture
def session_service(fake_client: FakeOmdbClient) -> SessionService:
    return SessionService(fake_client, WatchList())  # type: ignore[arg-type]
