"""Value types held by the rating store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

MIN_RATING = 0
MAX_RATING = 5

# `last_rated` of an item with no entries; sorts after every real timestamp.
EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(slots=True, frozen=True)
class RatingEntry:
    """One day's rating for one item."""

    date: datetime
    value: int

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date.isoformat().replace("+00:00", "Z"), "value": self.value}


@dataclass(slots=True, frozen=True)
class RatingItem:
    """A rated thing and its history, oldest entry first.

    `id` is the sanitized name and doubles as the display name and the record
    filename; `name` is kept as a separate field for callers that expect one.
    """

    id: str
    name: str
    ratings: tuple[RatingEntry, ...] = field(default_factory=tuple)

    @property
    def last_rated(self) -> datetime:
        return self.ratings[-1].date if self.ratings else EARLIEST

    @property
    def average_rating(self) -> float:
        if not self.ratings:
            return 0.0
        return sum(entry.value for entry in self.ratings) / len(self.ratings)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping including the derived fields."""

        return {
            "id": self.id,
            "name": self.name,
            "ratings": [entry.to_dict() for entry in self.ratings],
            "last_rated": self.ratings[-1].to_dict()["date"] if self.ratings else None,
            "average_rating": self.average_rating,
        }


def sorted_entries(entries: Any) -> tuple[RatingEntry, ...]:
    """Return entries ordered ascending by timestamp."""

    return tuple(sorted(entries, key=lambda entry: entry.date))


def sorted_items(items: Any) -> list[RatingItem]:
    """Return items ordered by most recent activity first."""

    return sorted(items, key=lambda item: item.last_rated, reverse=True)
