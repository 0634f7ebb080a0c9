from typing import Any

import requests
from loguru import logger
from pydantic import ValidationError

from popcorn.exceptions import MalformedDetailError, NetworkError, NotFoundError
from popcorn.models.movie import MovieDetail, MovieSummary

URL_BASE = "http://www.omdbapi.com"


class OmdbClient:
    """Thin client over the OMDb search (``s=``) and lookup (``i=``) endpoints.

    One attempt per call: failures are raised, never retried.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = URL_BASE,
        session: requests.Session | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/") + "/"
        self._session = session or requests.Session()

    def _get(self, **params: str) -> dict[str, Any]:
        logger.debug(f"OMDb request {params!r}")
        try:
            response = self._session.get(
                self._base_url, params={"apikey": self._api_key, **params}
            )
        except requests.RequestException as e:
            logger.warning(f"OMDb request {params!r} failed: {e}")
            raise NetworkError("Something went wrong with fetching movies") from e
        if not response.ok:
            logger.warning(f"OMDb request {params!r} answered {response.status_code}")
            raise NetworkError(
                f"Something went wrong with fetching movies ({response.status_code})"
            )
        try:
            payload = response.json()
        except ValueError as e:
            raise NetworkError("The movie database sent an unreadable response") from e
        if payload.get("Response") != "True":
            logger.info(f"OMDb request {params!r}: {payload.get('Error')!r}")
            raise NotFoundError(payload.get("Error") or "Movie not found!")
        return payload

    def search_movies(self, title: str) -> list[MovieSummary]:
        """Search movies by (part of) their title.

        Raises
            NetworkError: the request failed.
            NotFoundError: nothing matches the title.
            MalformedDetailError: a result has an unexpected shape.
        """
        payload = self._get(s=title)
        found = payload.get("Search") or []
        if not found:
            raise NotFoundError("Movie not found!")
        try:
            return [MovieSummary.model_validate(item) for item in found]
        except ValidationError as e:
            raise MalformedDetailError(f"Unexpected search result: {e}") from e

    def get_movie_by_id(self, movie_id: str) -> MovieDetail:
        """Fetch the full record of one movie by its IMDb id."""
        payload = self._get(i=movie_id)
        try:
            return MovieDetail.model_validate(payload)
        except ValidationError as e:
            raise MalformedDetailError(f"Unexpected details for {movie_id}: {e}") from e
