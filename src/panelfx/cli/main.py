"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from panelfx import __version__

from .commands import EFFECT_COMMANDS, config

logger = logging.getLogger(__name__)

_installed_handlers: list[logging.Handler] = []


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the command line.

    Args:
        verbose: Verbosity count for stderr (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log DEBUG to ./panelfx-debug.log as well
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        console_level = logging.DEBUG
    elif verbose == 1:
        console_level = logging.INFO
    else:
        console_level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    _installed_handlers.append(console_handler)

    levels = [console_level]

    log_path = None
    if debug and not log_file:
        log_path = Path.cwd() / "panelfx-debug.log"
        file_level = logging.DEBUG
    elif log_file:
        log_path = log_file
        file_level = getattr(logging, log_level.upper())

    if log_path is not None:
        # Keeps last 5 files, max 10MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        _installed_handlers.append(file_handler)
        levels.append(file_level)

    root_logger.setLevel(min(levels))
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    logger.debug(
        f"Logging configured: console={logging.getLevelName(console_level)}, file={log_path}"
    )


@click.group()
@click.version_option(version=__version__, prog_name="panelfx")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.panelfx/config.json)'
)
@click.option('--url', type=str, default=None, help='Device API root, overrides the config file')
@click.option('--token', type=str, default=None, help='Auth token, overrides the config file')
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./panelfx-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
@click.pass_context
def cli(
    ctx,
    config_path: Optional[Path],
    url: Optional[str],
    token: Optional[str],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    panelfx - control the lighting effects of a smart panel controller.

    \b
    Examples:
      # Store the device address and token once
      panelfx config set --url http://192.168.1.20:16021/api/v1 --token abc123

      # List effects and activate one
      panelfx list
      panelfx select Flow

      # Export an effect, edit it, store it under a new name
      panelfx show Flow > flow.json
      panelfx add "My Flow" flow.json

      # Stream a custom animation
      panelfx display sunrise.json --no-loop
    """
    setup_logging(verbose, debug, log_file, log_level)

    ctx.ensure_object(dict)
    ctx.obj.update(config_path=config_path, url=url, token=token)


for command in EFFECT_COMMANDS:
    cli.add_command(command)
cli.add_command(config)

if __name__ == "__main__":
    cli()
