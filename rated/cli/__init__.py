"""Rater CLI package."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from rated.cli.commands.ratings import delete, list_items, rate, show
from rated.cli.io import console
from rated.cli.renderers import circle_bar, render_item_detail, render_items_table
from rated.cli.runtime import (
    get_config,
    get_runtime,
    get_store,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from rated.cli.utils import apply_log_override
from rated.core.logging_setup import configure_logging
from rated.services.config_service import ConfigService
from rated.store.rating_store import RatingStore

logger = logging.getLogger(__name__)

# Typer application ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Rate anything once a day, 0 to 5.")


@app.callback()
def _main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level for this invocation.",
    ),
) -> None:
    apply_log_override(log_level)


# Command registration -------------------------------------------------------

app.command()(rate)
app.command("list")(list_items)
app.command()(show)
app.command()(delete)


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    # Typer app / entrypoint
    "app",
    "main",
    # Console & logging
    "console",
    "logger",
    "configure_logging",
    "set_runtime_level",
    "apply_log_override",
    # Runtime
    "ConfigService",
    "RatingStore",
    "get_config",
    "get_runtime",
    "get_store",
    "initialize_runtime",
    "set_runtime",
    # Renderers
    "circle_bar",
    "render_item_detail",
    "render_items_table",
]
