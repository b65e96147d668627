import logging
import os
import sys

ENV_LOG_LEVEL = "RANCH_LOG_LEVEL"


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure the root logger.

    Respects RANCH_LOG_LEVEL if present. Logs go to stderr so they stay out of
    the menu output on stdout.
    """
    level_name = os.getenv(ENV_LOG_LEVEL)
    if level_name:
        level = getattr(logging, level_name.upper(), level)

    handler = logging.StreamHandler(stream=sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates in repeated test runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
