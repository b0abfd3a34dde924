"""CLI: look up mock weather for a city and render the panel."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
import sys

from rich.console import Console
from rich.prompt import Prompt

from .config import Settings, load_settings
from .exceptions import ConfigError
from .log_setup import setup_logger
from .ui.controller import WeatherView
from .ui.state import TABS, Success
from .weather.mock import MockWeatherSource

QUIT_COMMANDS = {":q", ":quit", ":exit"}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Show mock current weather and a 7-day forecast.")
    parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="Render one lookup and exit instead of prompting.",
    )
    parser.add_argument(
        "--tab",
        choices=list(TABS),
        default=None,
        help="Tab to show after a successful lookup.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible data.")
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Override simulated latency in seconds.",
    )
    return parser.parse_args(argv)


def build_view(
    args: argparse.Namespace,
    settings: Settings,
    logger: logging.Logger,
) -> WeatherView:
    """Wire the mock source into a view using CLI overrides over settings."""
    seed = args.seed if args.seed is not None else settings.seed
    delay = args.delay if args.delay is not None else settings.delay_seconds
    if delay < 0:
        raise ConfigError("--delay must be >= 0.")
    source = MockWeatherSource(
        delay_seconds=delay,
        sentinel=settings.sentinel_city,
        rng=random.Random(seed),
        logger=logger.getChild("source"),
    )
    return WeatherView(
        source=source,
        default_tab=args.tab or settings.default_tab,
        logger=logger.getChild("view"),
    )


def _submit(console: Console, view: WeatherView, city: str) -> None:
    view.set_query(city)
    with console.status("Loading..."):
        asyncio.run(view.submit())


def run_interactive(console: Console, view: WeatherView) -> int:
    """Prompt for cities until the user quits."""
    console.print(view.render(width=console.width))
    console.print(
        "Type a city and press Enter. "
        "Use :current / :forecast to switch tabs, :quit to leave.",
        style="dim",
    )
    while True:
        try:
            line = Prompt.ask("City", console=console, default="", show_default=False)
        except EOFError:
            break
        command = line.strip()
        if command.lower() in QUIT_COMMANDS:
            break
        if command.startswith(":"):
            tab = command[1:].lower()
            if tab not in TABS:
                console.print(f"Unknown command {command!r}.", style="yellow")
                continue
            view.select_tab(tab)
        else:
            _submit(console, view, line)
        console.print(view.render(width=console.width))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the weather panel CLI."""
    args = parse_args(argv)
    logger = setup_logger()
    console = Console()

    try:
        settings = load_settings()
        logger.setLevel(settings.log_level)
        logger.debug("Settings loaded: %s", settings.safe_summary())
        view = build_view(args, settings, logger)
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2

    if args.city is None:
        return run_interactive(console, view)

    _submit(console, view, args.city)
    console.print(view.render(width=console.width))
    return 0 if isinstance(view.state, Success) else 1


if __name__ == "__main__":
    sys.exit(main())
