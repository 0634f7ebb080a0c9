from typing import TYPE_CHECKING

from popcorn.dependencies import Container

# this is to avoid long imports when not actually using the app in the cli
if TYPE_CHECKING:
    from popcorn.applications.tui.popcorn_app import PopcornApp


def create_app(container: Container, initial_query: str | None = None) -> "PopcornApp":
    from rich.console import Console

    cns = Console()
    with cns.status("Loading dependencies..."):
        from popcorn.applications.tui.popcorn_app import PopcornApp

    with cns.status("Assembling app..."):
        app = PopcornApp(
            session_service=container.session_service(),
            initial_query=(
                container.config.initial_query()
                if initial_query is None
                else initial_query
            ),
        )

    return app
