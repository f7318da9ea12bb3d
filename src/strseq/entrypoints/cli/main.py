"""strseq CLI entry point.

Defines the top-level ``strseq`` command (via Click-Extra) and registers the
sequence commands from `strseq.entrypoints.cli.seq`.

Notes
- The CLI version is sourced from `strseq.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Items that start with ``-`` must follow ``--`` so Click does not read them
  as options.

Examples
    $ strseq --version
    $ strseq stats 3 1 2
    $ strseq --coercion strict coerce int -- -5 2
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from strseq import __version__, config
from strseq.domain.coercion import POLICIES, get_policy
from strseq.logging import (
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_level,
)

from .helpers import parse_log_level
from .seq import COMMANDS

logger = logging.getLogger(__name__)


HELP = """strseq command-line interface.

    Work with ordered sequences of string-encoded values: summary statistics,
    membership, counting, union, absolute values and type coercion. Values are
    converted with a lenient (never fails) or strict (fails loudly) policy.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more on the console: -v for INFO, -vv for DEBUG.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show less on the console: -q for ERROR, -qq for CRITICAL.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Console at DEBUG with timestamps, logger names and source links.",
    default=False,
)
@click.option(
    "--coercion",
    "coercion",
    type=click.Choice(sorted(POLICIES), case_sensitive=False),
    help=(
        "Coercion policy. 'lenient' turns unconvertible values into 0/false/''; "
        "'strict' reports them as errors. Defaults to "
        f"${config.COERCION_POLICY_ENV}, then '{config.DEFAULT_COERCION_POLICY}'."
    ),
    default=config.get_coercion_policy_name,
    show_default=config.DEFAULT_COERCION_POLICY,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder writes to.",
    default=lambda: Path(user_log_dir("strseq", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="STRSEQ_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="STRSEQ_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Number of records the flight recorder keeps in memory.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Buffer recent DEBUG records in memory, regardless of -v/-q, and "
        "write them to --log-path when a warning or error is logged."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Also write the flight recorder buffer when the command exits.",
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Pin a logger to a minimum level, as NAME=LEVEL "
        "(e.g. -L strseq.domain.coercion=INFO). Repeatable; the env var takes a "
        "comma or space separated list."
    ),
    default=("sqlalchemy=WARNING",),
    envvar="STRSEQ_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def strseq(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    coercion: str,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """strseq command-line interface."""
    settings = LoggingSettings(
        level=verbosity_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        recorder_flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    # flushes the recorder on exit when --force-flush is set
    ctx.call_on_close(logging.shutdown)

    policy = get_policy(coercion)
    log_startup(
        logger,
        settings,
        handlers,
        app_version=__version__,
        coercion_policy=policy.name,
    )

    # subcommands read the policy from ctx.obj
    ctx.obj = policy


for _command in COMMANDS:
    strseq.add_command(_command)
