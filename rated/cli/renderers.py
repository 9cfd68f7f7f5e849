"""Rich renderers for CLI outputs."""

from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional

from rich.panel import Panel
from rich.table import Table

from rated.cli.io import console
from rated.services.summary import circle_fill
from rated.store.models import RatingItem

FULL_CIRCLE = "●"
PARTIAL_CIRCLE = "◐"
EMPTY_CIRCLE = "○"


def circle_bar(average: float) -> str:
    """Return a five-glyph bar for an average rating."""

    glyphs = []
    for fill in circle_fill(average):
        if fill >= 1.0:
            glyphs.append(FULL_CIRCLE)
        elif fill > 0.0:
            glyphs.append(PARTIAL_CIRCLE)
        else:
            glyphs.append(EMPTY_CIRCLE)
    return "".join(glyphs)


def _format_day(item: RatingItem, tz: Optional[tzinfo]) -> str:
    if not item.ratings:
        return "never"
    return item.last_rated.astimezone(tz).strftime("%Y-%m-%d")


def render_items_table(items: Iterable[RatingItem], *, tz: Optional[tzinfo] = None) -> None:
    """Display every item with its average, most recently rated first."""

    items = list(items)
    if not items:
        console.print(Panel("No ratings yet.", title="Ratings"))
        return

    table = Table(title="Ratings", show_lines=False)
    table.add_column("Name", overflow="ellipsis")
    table.add_column("Average", justify="center")
    table.add_column("Score", justify="right")
    table.add_column("Entries", justify="right")
    table.add_column("Last rated")

    for item in items:
        table.add_row(
            item.name,
            f"[blue]{circle_bar(item.average_rating)}[/]",
            f"{item.average_rating:.1f}",
            str(len(item.ratings)),
            _format_day(item, tz),
        )
    console.print(table)


def render_item_detail(item: RatingItem, *, tz: Optional[tzinfo] = None) -> None:
    """Display the full rating history of a single item."""

    lines = [
        f"[bold]Average:[/] [blue]{circle_bar(item.average_rating)}[/] {item.average_rating:.2f}",
        f"[bold]Entries:[/] {len(item.ratings)}",
        "",
    ]
    for entry in item.ratings:
        day = entry.date.astimezone(tz).strftime("%Y-%m-%d %H:%M")
        lines.append(f"{day}  {circle_bar(entry.value)}  {entry.value}")
    console.print(Panel("\n".join(lines), title=item.name))


__all__ = ["circle_bar", "render_item_detail", "render_items_table"]
