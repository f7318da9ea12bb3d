"""Logging setup for the strseq CLI.

Two handlers hang off the root logger:

* a Rich console handler on stderr whose level follows ``-v``/``-q``, so
  stdout stays free for command output;
* an optional flight recorder, a `MemoryHandler` that keeps recent DEBUG
  records in memory and writes them to a file once a WARNING shows up (or
  when the process exits, if asked to).

`configure_logging` builds both from a `LoggingSettings` and installs them;
`log_startup` records what was installed.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "strseq"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
CONSOLE_DEBUG_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` counts onto a level, starting from WARNING."""
    level = logging.WARNING - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Everything the CLI decides about logging before a command runs."""

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    recorder_capacity: int = 2000
    recorder_flush_on_close: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with ``[top-level-name]``.

    Project records get an empty prefix. Nothing is ever dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        ours = name == PROJECT_PREFIX or name.startswith(PROJECT_PREFIX + ".")
        record.prefix = "" if ours else f"[{name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a `RichHandler` writing to stderr.

    Debug mode lowers the handler to DEBUG, adds timestamps, logger names and
    source links, and drops the third-party prefix.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(CONSOLE_DEBUG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a `MemoryHandler` buffering up to ``capacity`` records for ``path``.

    The file is only opened on the first flush, which happens at
    ``flush_level`` or, with ``flush_on_close``, when the handler closes.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    The root logger is opened to DEBUG so each handler applies its own
    threshold; ``settings.logger_levels`` then pins individual loggers.

    Returns:
        list[Handler]: The handlers now attached to the root logger.
    """
    handlers: list[Handler] = [
        config_console_handler(
            level=settings.level, debug_mode=settings.debug, color=settings.color
        )
    ]
    if settings.log_path is not None:
        handlers.append(
            config_flight_recorder(
                settings.log_path,
                capacity=settings.recorder_capacity,
                flush_on_close=settings.recorder_flush_on_close,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: Logger,
    settings: LoggingSettings,
    handlers: list[Handler],
    *,
    app_version: str,
    coercion_policy: str,
) -> None:
    """Emit an INFO summary line followed by DEBUG environment details."""
    logger.info(
        "strseq %s: console=%s, coercion=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.level),
        coercion_policy,
        "ON" if settings.flight_recorder else "OFF",
    )

    logger.debug(
        "Python %s on %s %s (pid %s)",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
    )
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.recorder_capacity,
            settings.recorder_flush_on_close,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
