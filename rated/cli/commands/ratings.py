"""Rating commands for the rater CLI."""

from __future__ import annotations

import sys

import typer
from rich.panel import Panel

from rated.cli.io import console
from rated.cli.renderers import render_item_detail, render_items_table
from rated.store.models import MAX_RATING, MIN_RATING
from rated.store.sanitize import sanitize_name

NAME_LIMIT = 15


def _cli():
    return sys.modules["rated.cli"]


def _calendar_zone():
    return _cli().get_config().storage_config.timezone


def rate(
    name: str = typer.Argument(..., help="Thing to rate, e.g. 'coffee'."),
    value: int = typer.Argument(
        ...,
        min=MIN_RATING,
        max=MAX_RATING,
        help=f"Score from {MIN_RATING} to {MAX_RATING}.",
    ),
) -> None:
    """Record today's rating for NAME."""

    if not name.strip():
        raise typer.BadParameter("Name must not be blank.", param_hint="NAME")
    if len(name.strip()) > NAME_LIMIT:
        raise typer.BadParameter(f"Limit is {NAME_LIMIT} characters.", param_hint="NAME")

    store = _cli().get_store()
    if not store.add_rating(name, value):
        console.print(f"[yellow]Already rated today:[/] {sanitize_name(name)}")
        raise typer.Exit(code=1)

    item = store.get_item(name)
    console.print(
        f"[green]Rated[/] {item.name} {value} "
        f"(average {item.average_rating:.1f} over {len(item.ratings)} days)"
    )
    if item.id in store.unsaved_items:
        console.print("[red]Warning:[/] the rating could not be saved to disk.")


def list_items(
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit raw JSON instead of a table.",
    ),
) -> None:
    """List rated items, most recently rated first."""

    items = _cli().get_store().list_items()
    if json_output:
        console.print_json(data=[item.to_dict() for item in items])
        return
    render_items_table(items, tz=_calendar_zone())


def show(
    name: str = typer.Argument(..., help="Item to display."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit raw JSON instead of a panel.",
    ),
) -> None:
    """Show the full rating history of NAME."""

    item = _cli().get_store().get_item(name)
    if item is None:
        console.print(Panel(f"No such item: {sanitize_name(name)}", title="Ratings"))
        raise typer.Exit(code=1)
    if json_output:
        console.print_json(data=item.to_dict())
        return
    render_item_detail(item, tz=_calendar_zone())


def delete(
    name: str = typer.Argument(..., help="Item to delete."),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Delete without confirmation prompt.",
    ),
) -> None:
    """Delete NAME and its whole rating history."""

    store = _cli().get_store()
    item = store.get_item(name)
    if item is None:
        store.delete_item(name)
        console.print(f"[yellow]No such item:[/] {sanitize_name(name)}")
        return

    if not force and not typer.confirm(f"Delete {item.name} and {len(item.ratings)} ratings?"):
        console.print("[yellow]Ratings unchanged.[/]")
        return

    store.delete_item(name)
    console.print(f"[green]Deleted[/] {item.name}")


__all__ = ["delete", "list_items", "rate", "show"]
