"""customer-service CLI entry point.

Defines the top-level ``customer-service`` command (via Click-Extra), sets up
logging, and registers the customer subcommands.

Examples
    $ export CUSTOMER_SERVICE_DB_URL='postgresql+psycopg://app:pw@localhost:5432/customers'
    $ customer-service init
    $ customer-service add 1 George
    $ customer-service list --json
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from customer_service import __version__
from customer_service.logging import (
    config_console_handler,
    config_flight_recorder,
    log_startup,
)

from .customers import add, init, list_customers, status
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """customer-service command-line interface.

    Create the customers table, add customers, and list them. The database is
    selected with the CUSTOMER_SERVICE_DB_URL environment variable.
    """


def _default_log_path() -> Path:
    return Path(user_log_dir("customer-service", appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with logger names and paths).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight recorder output file.",
    default=None,
    envvar="CUSTOMER_SERVICE_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent DEBUG records in memory and write them to --log-path when "
        "a WARNING/ERROR occurs (or on exit with --force-flush)."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help="Always write the flight recorder buffer to --log-path on exit.",
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
        "Set the minimum level for specific loggers (NAME=LEVEL). Repeatable, "
        "e.g. -L sqlalchemy.engine=INFO."
    ),
    show_envvar=True,
)
@clickx.pass_context
def customer_service(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """customer-service command-line interface."""

    # 0) effective verbosity, clamped to DEBUG..CRITICAL
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) console
    use_color = ctx.color is not False
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) flight recorder
    if flight_recorder:
        if log_path is None:
            log_path = _default_log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            config_flight_recorder(
                path=log_path, flush_on_close=force_flush_flight_recorder
            )
        )

    # 3) root logger captures everything; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) third-party logger levels
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


customer_service.add_command(init)
customer_service.add_command(add)
customer_service.add_command(list_customers)
customer_service.add_command(status)
