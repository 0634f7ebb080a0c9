from typing import cast

import requests
from dependency_injector.containers import DeclarativeContainer
from dependency_injector.providers import Configuration, Factory, Singleton

from popcorn.obj.omdb_client import OmdbClient
from popcorn.obj.watch_list import WatchList
from popcorn.services.session_service import SessionService
from popcorn.settings import Settings


class Container(DeclarativeContainer):
    config = Configuration()
    config.from_pydantic(Settings())  # type: ignore
    config = cast(Settings, config)  # type: ignore[assignment]

    http_session = Singleton(requests.Session)

    omdb_client = Singleton(
        OmdbClient,
        api_key=config.omdb_api,
        base_url=config.omdb_url,
        session=http_session,
    )
    watch_list = Factory(WatchList)

    # Services
    session_service = Singleton(
        SessionService,
        client=omdb_client,
        watch_list=watch_list,
    )
