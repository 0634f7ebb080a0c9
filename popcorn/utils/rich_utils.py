from rich.markup import escape

from popcorn.models.movie import MovieDetail, MovieSummary, WatchedEntry
from popcorn.obj.watch_list import WatchListSummary


def format_rating(rating: float | None) -> str:
    return "N/A" if rating is None else f"{rating:.1f}"


def format_title(title: str) -> str:
    return f"[bold]{escape(title)}[/]"


def format_num_results(num_results: int) -> str:
    return f"Found [bold]{num_results}[/] results"


def format_movie(movie: MovieSummary) -> str:
    return f"{format_title(movie.title)}\n🗓  {escape(movie.year)}"


def format_detail_header(detail: MovieDetail) -> str:
    released = (
        detail.release_date.strftime("%d %b %Y") if detail.release_date else "N/A"
    )
    lines = [
        f"[bold cyan]{escape(detail.title)}[/] ({escape(detail.year)})",
        f"{released} • {escape(detail.runtime or 'N/A')}",
        escape(detail.genre),
        f"⭐ {format_rating(detail.critic_rating)} IMDb rating",
    ]
    if detail.poster_url:
        lines.append(f"[link={detail.poster_url}]poster[/link]")
    return "\n".join(lines)


def format_detail_body(detail: MovieDetail) -> str:
    return (
        f"[italic]{escape(detail.plot)}[/]\n\n"
        f"Starring {escape(detail.actors)}\n"
        f"Directed by {escape(detail.director)}"
    )


def format_watched(entry: WatchedEntry) -> str:
    return (
        f"{format_title(entry.title)}\n"
        f"⭐️ {format_rating(entry.critic_rating)}  "
        f"🌟 {entry.user_rating}  "
        f"⏳ {entry.runtime_minutes} min"
    )


def format_summary(summary: WatchListSummary) -> str:
    return (
        "[bold]Movies you watched[/]\n"
        f"#️⃣  {summary.count} movies  "
        f"⭐️ {summary.mean_critic_rating:.2f}  "
        f"🌟 {summary.mean_user_rating:.2f}  "
        f"⏳ {summary.mean_runtime_minutes:.0f} min"
    )
