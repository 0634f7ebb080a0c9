from dependency_injector.wiring import Provide, inject

from popcorn.applications.tui.popcorn_app import PopcornApp
from popcorn.dependencies import Container
from popcorn.services.session_service import SessionService
from popcorn.setup_logging import setup_logging


@inject
def main(
    session_service: SessionService = Provide[Container.session_service],
    initial_query: str = Provide[Container.config.initial_query],
) -> None:
    app = PopcornApp(
        session_service=session_service,
        initial_query=initial_query,
    )
    app.run()


if __name__ == "__main__":
    setup_logging()
    container = Container()
    container.wire(modules=[__name__])
    main()
