"""File-backed store of daily ratings.

Updates:
    v0.1.0 - 2026-10-19 - One record file per item, same-day guard, atomic writes.
    v0.1.1 - 2026-10-19 - Injected clock and calendar zone; unsaved-item tracking.
"""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from datetime import date, datetime, timezone, tzinfo
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .models import MAX_RATING, MIN_RATING, RatingEntry, RatingItem, sorted_entries, sorted_items
from .record_codec import decode_record, encode_record
from .sanitize import sanitize_name

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

DEFAULT_STORAGE_DIR = Path("~/.rated/ratings")


class InvalidRatingError(ValueError):
    """Raised when a rating value falls outside the 0..5 scale."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RatingStore:
    """Owns every rated item and persists each one as its own record file.

    The in-memory collection is the source of truth for the process lifetime;
    the directory is read once at construction. Storage failures never raise:
    unreadable records are left out on load and failed writes are logged and
    tracked in `unsaved_items`.
    """

    def __init__(
        self,
        base_dir: str | Path = DEFAULT_STORAGE_DIR,
        *,
        tz: Optional[tzinfo] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """Open the store and load existing records.

        Args:
            base_dir (str | Path): Directory holding one record per item.
            tz (tzinfo | None): Calendar zone for the same-day guard; `None`
                uses the system local zone.
            clock (Callable[[], datetime] | None): Source of "now".
        """

        self._base_dir = Path(base_dir).expanduser()
        self._tz = tz
        self._clock = clock or _utc_now
        self._items: Dict[str, RatingItem] = {}
        self._order: List[str] = []
        self._unsaved: set[str] = set()
        self._ensure_base_directory()
        self._load()

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def unsaved_items(self) -> frozenset[str]:
        """Ids whose most recent write did not reach disk."""

        return frozenset(self._unsaved)

    def list_items(self) -> List[RatingItem]:
        """Return a snapshot of all items, most recently rated first."""

        return [self._items[item_id] for item_id in self._order]

    def get_item(self, name: str) -> Optional[RatingItem]:
        return self._items.get(sanitize_name(name))

    def add_rating(self, name: str, value: int) -> bool:
        """Record today's rating for the named item.

        Args:
            name (str): Raw item name; sanitized before lookup.
            value (int): Rating on the 0..5 scale.

        Returns:
            bool: `False` when the item already has an entry on today's
            calendar day (nothing is changed), `True` otherwise.

        Raises:
            InvalidRatingError: If `value` is outside 0..5.
        """

        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRatingError(f"Rating must be an integer, got {value!r}")
        if not MIN_RATING <= value <= MAX_RATING:
            raise InvalidRatingError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}, got {value}"
            )

        item_id = sanitize_name(name)
        now = self._now()
        existing = self._items.get(item_id)

        if existing is not None:
            today = self._calendar_day(now)
            if any(self._calendar_day(entry.date) == today for entry in existing.ratings):
                logger.info("Item already rated today.", extra={"item": item_id})
                return False
            item = RatingItem(
                id=item_id,
                name=existing.name,
                ratings=sorted_entries(existing.ratings + (RatingEntry(date=now, value=value),)),
            )
        else:
            item = RatingItem(
                id=item_id, name=item_id, ratings=(RatingEntry(date=now, value=value),)
            )

        self._items[item_id] = item
        self._write(item)
        self._resort()
        logger.debug(
            "Rating recorded.", extra={"item": item_id, "value": value, "entries": len(item.ratings)}
        )
        return True

    def delete_item(self, name: str) -> None:
        """Remove the named item from memory and disk; unknown names are a no-op."""

        item_id = sanitize_name(name)
        path = self._record_path(item_id)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning(
                "Failed to remove record.", extra={"item": item_id, "path": str(path), "error": str(exc)}
            )
        if self._items.pop(item_id, None) is not None:
            self._order.remove(item_id)
            logger.debug("Item deleted.", extra={"item": item_id})
        self._unsaved.discard(item_id)

    def _now(self) -> datetime:
        moment = self._clock()
        if moment.tzinfo is None:
            moment = moment.astimezone()
        # Records hold whole seconds; keep memory identical to disk.
        return moment.replace(microsecond=0)

    def _calendar_day(self, moment: datetime) -> date:
        return moment.astimezone(self._tz).date()

    def _resort(self) -> None:
        self._order = [item.id for item in sorted_items(self._items.values())]

    def _record_path(self, item_id: str) -> Path:
        return self._base_dir / item_id

    def _ensure_base_directory(self) -> None:
        try:
            self._base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning(
                "Storage directory unavailable.",
                extra={"path": str(self._base_dir), "error": str(exc)},
            )

    def _load(self) -> None:
        try:
            paths = sorted(self._base_dir.iterdir())
        except OSError as exc:
            logger.warning(
                "Unable to list storage directory.",
                extra={"path": str(self._base_dir), "error": str(exc)},
            )
            return

        for path in paths:
            if path.name.startswith(".") or path.is_dir():
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(
                    "Skipping unreadable record.", extra={"path": str(path), "error": str(exc)}
                )
                continue
            entries = decode_record(text)
            if not entries:
                continue
            self._items[path.name] = RatingItem(
                id=path.name, name=path.name, ratings=sorted_entries(entries)
            )

        self._resort()
        logger.debug(
            "Loaded rating records.",
            extra={"path": str(self._base_dir), "items": len(self._items)},
        )

    def _write(self, item: RatingItem) -> bool:
        path = self._record_path(item.id)
        tmp_name: Optional[str] = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=".rated-", suffix=".tmp", dir=self._base_dir
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
                fh.write(encode_record(item.ratings))
            os.replace(tmp_name, path)
        except OSError as exc:
            logger.warning(
                "Failed to persist record; change kept in memory only.",
                extra={"item": item.id, "path": str(path), "error": str(exc)},
            )
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            self._unsaved.add(item.id)
            return False
        self._unsaved.discard(item.id)
        return True
