from collections.abc import Iterator
from dataclasses import dataclass
from statistics import mean

from popcorn.exceptions import DuplicateEntryError
from popcorn.models.movie import WatchedEntry


def _mean(data: list[float] | list[int]) -> float:
    return float(mean(data)) if data else 0.0


@dataclass(frozen=True)
class WatchListSummary:
    count: int
    mean_critic_rating: float
    mean_user_rating: float
    mean_runtime_minutes: float


class WatchList:
    def __init__(self, entries: list[WatchedEntry] | None = None):
        self.entries: list[WatchedEntry] = list(entries or [])

    @property
    def ids(self) -> set[str]:
        return {entry.id for entry in self.entries}

    def __contains__(self, movie_id: str) -> bool:
        return any(entry.id == movie_id for entry in self.entries)

    def __eq__(self, other: "WatchList") -> bool:  # type: ignore[override]
        return self.entries == other.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[WatchedEntry]:
        return iter(self.entries)

    def add(self, entry: WatchedEntry) -> None:
        """Append an entry.

        Raises DuplicateEntryError if an entry with the same id is present.
        """
        if entry.id in self:
            raise DuplicateEntryError(f"'{entry.title}' is already in your list")
        self.entries.append(entry)

    def delete(self, movie_id: str) -> bool:
        """Remove the entry with this id; returns False if there was none."""
        for idx, entry in enumerate(self.entries):
            if entry.id == movie_id:
                self.entries.pop(idx)
                return True
        return False

    def get(self, movie_id: str, default=None) -> WatchedEntry | None:
        for entry in self.entries:
            if entry.id == movie_id:
                return entry
        return default

    def summary(self) -> WatchListSummary:
        """Count and means over the entries; every mean is 0.0 for an empty list.

        Entries without a critic rating are left out of that mean.
        """
        return WatchListSummary(
            count=len(self.entries),
            mean_critic_rating=_mean(
                [e.critic_rating for e in self.entries if e.critic_rating is not None]
            ),
            mean_user_rating=_mean([e.user_rating for e in self.entries]),
            mean_runtime_minutes=_mean([e.runtime_minutes for e in self.entries]),
        )

    def copy(self) -> "WatchList":
        return WatchList(self.entries.copy())
