from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from popcorn.exceptions import MalformedDetailError, NetworkError, NotFoundError
from popcorn.obj.omdb_client import OmdbClient

from .conftest import INCEPTION_ID, SEARCH_PAYLOAD, detail_payload

API_KEY = "secret"


def make_session(payload: Any = None, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.ok = 200 <= status_code < 400
    response.status_code = status_code
    response.json.return_value = payload
    session = MagicMock()
    session.get.return_value = response
    return session


def test_search_sends_key_and_title():
    session = make_session(SEARCH_PAYLOAD)
    client = OmdbClient(API_KEY, base_url="http://omdb.test", session=session)

    movies = client.search_movies("inception")

    session.get.assert_called_once_with(
        "http://omdb.test/", params={"apikey": API_KEY, "s": "inception"}
    )
    assert [m.id for m in movies] == [INCEPTION_ID, "tt5295894"]


def test_lookup_sends_key_and_id():
    session = make_session(detail_payload())
    client = OmdbClient(API_KEY, session=session)

    detail = client.get_movie_by_id(INCEPTION_ID)

    session.get.assert_called_once_with(
        "http://www.omdbapi.com/", params={"apikey": API_KEY, "i": INCEPTION_ID}
    )
    assert detail.title == "Inception"


def test_search_not_found():
    session = make_session({"Response": "False", "Error": "Movie not found!"})
    client = OmdbClient(API_KEY, session=session)
    with pytest.raises(NotFoundError, match="Movie not found!"):
        client.search_movies("zzzzzznotamovie")


def test_search_empty_result_list_is_not_found():
    session = make_session({"Response": "True", "Search": []})
    client = OmdbClient(API_KEY, session=session)
    with pytest.raises(NotFoundError):
        client.search_movies("nothing")


def test_http_failure_is_network_error():
    session = make_session({"Response": "False", "Error": "Invalid API key!"}, 401)
    client = OmdbClient(API_KEY, session=session)
    with pytest.raises(NetworkError):
        client.search_movies("inception")


def test_transport_failure_is_network_error():
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("no route to host")
    client = OmdbClient(API_KEY, session=session)
    with pytest.raises(NetworkError):
        client.get_movie_by_id(INCEPTION_ID)


def test_unreadable_body_is_network_error():
    session = make_session()
    session.get.return_value.json.side_effect = ValueError("not json")
    client = OmdbClient(API_KEY, session=session)
    with pytest.raises(NetworkError):
        client.search_movies("inception")


def test_lookup_with_unexpected_shape():
    payload = detail_payload(Released="sometime in July")
    client = OmdbClient(API_KEY, session=make_session(payload))
    with pytest.raises(MalformedDetailError):
        client.get_movie_by_id(INCEPTION_ID)
