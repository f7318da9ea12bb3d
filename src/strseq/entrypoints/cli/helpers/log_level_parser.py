"""Helpers for parsing logger-level CLI options.

Options take the form NAME=LEVEL, either repeated or comma/space-separated
in a single value (as read from an environment variable). Items are
normalized and textual level names are converted into numeric levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split a single string or a sequence of strings on commas and whitespace.

    Args:
        value: The option value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    values = value if isinstance(value, (tuple, list)) else [value]
    return [s for v in values for s in re.split(r"[,\s]+", v) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LIB_LEVELS with any overrides supplied via the CLI; later
    items win. LEVEL is a standard logging level name, case-insensitive.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is invalid.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
