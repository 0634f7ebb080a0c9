"""CLI entry point for the TUI application."""

import click


@click.command()
@click.option(
    "--query",
    "-q",
    default=None,
    help="Search to start with (defaults to INITIAL_QUERY from the config).",
)
@click.version_option(package_name="popcorn")
def main(query: str | None) -> None:
    """usePopcorn: browse OMDb movies and keep a list of the ones you watched."""
    from popcorn.applications.tui.app import create_app
    from popcorn.dependencies import Container
    from popcorn.setup_logging import setup_logging

    setup_logging()
    app = create_app(Container(), initial_query=query)
    app.run()
