from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

from . import __version__
from .core.notify import Notifier
from .core.rng import RNG
from .core.settings import Settings
from .errors import SettingsError
from .models.ranch import Ranch
from .ui.menu import RanchMenu
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="ranch",
        description="Creature Ranch - train, breed and sort a small ranch of creatures",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a settings YAML file overlaid on the defaults.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed the breeding RNG (overrides settings)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def build_ranch(settings: Settings, notifier: Optional[Notifier] = None, seed: Optional[int] = None) -> Ranch:
    """Create the ranch seeded with the configured starter roster."""
    rng = RNG(seed if seed is not None else settings.seed)
    ranch = Ranch(notifier=notifier or Notifier(), rng=rng)
    for creature in settings.build_roster():
        ranch.add(creature)
    logger.info("Ranch ready with %d starter creatures", len(ranch))
    return ranch


def main(argv=None, input_fn: Optional[Callable[[str], str]] = None, notifier: Optional[Notifier] = None) -> int:
    args = parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    configure_logging(level)

    try:
        settings = Settings.load(user_path=args.settings_path)
    except SettingsError as exc:
        logger.error("Could not load settings: %s", exc)
        return 2

    ranch = build_ranch(settings, notifier=notifier, seed=args.seed)
    menu = RanchMenu(ranch, input_fn=input_fn)
    try:
        return menu.run()
    except KeyboardInterrupt:
        ranch.notifier.emit("menu", "")
        logger.info("Interrupted by user")
        return 130
