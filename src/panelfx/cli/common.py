"""Helpers shared by CLI commands: config and definition loading, client construction, error display."""

import logging
import sys
from functools import wraps
from pathlib import Path
from typing import Callable, TypeVar

import click
from pydantic import BaseModel, ValidationError

from panelfx.client import EffectsClient
from panelfx.exceptions import DefinitionFileError, format_error_for_display, wrap_pydantic_error
from panelfx.models import DeviceConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def load_config(ctx: click.Context) -> DeviceConfig:
    """
    Load the stored config and apply --url/--token overrides.

    Raises:
        ConfigFileInvalidError: If the config file has invalid JSON syntax
        ConfigValidationError: If stored or overridden values are invalid
    """
    state = ctx.obj
    config = DeviceConfig.load_or_default(state.get("config_path"))

    overrides = {
        key: state[key] for key in ("url", "token") if state.get(key) is not None
    }
    if not overrides:
        return config

    try:
        return DeviceConfig.model_validate({**config.model_dump(), **overrides})
    except ValidationError as e:
        raise wrap_pydantic_error(e, "command line") from e


def load_definition(path: Path, model_type: type[T], kind: str) -> T:
    """
    Read an effect or animation JSON file given on the command line.

    Raises:
        DefinitionFileError: If the file cannot be read or fails validation
    """
    try:
        return model_type.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as e:
        problems = []
        for err in e.errors():
            # JSON syntax errors carry no location
            field = ".".join(str(loc) for loc in err["loc"]) or "file"
            problems.append(f"  - {field}: {err['msg']}")
        raise DefinitionFileError(str(path), kind, "\n".join(problems)) from e
    except OSError as e:
        raise DefinitionFileError(str(path), kind, f"  - {e}") from e


def open_client(ctx: click.Context) -> EffectsClient:
    """Build a client from config, using an injected transport when one is set."""
    return EffectsClient.from_config(load_config(ctx), ctx.obj.get("transport"))


def report_errors(func: Callable) -> Callable:
    """
    Show failures as a short message plus recovery hint, and exit with status 1.

    Click's own exceptions pass through untouched so usage errors keep
    their normal formatting.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.Abort):
            raise
        except Exception as e:
            logger.debug("Command failed", exc_info=True)

            user_message, recovery_hint = format_error_for_display(e)
            click.echo(f"ERROR: {user_message}", err=True)
            if recovery_hint:
                click.echo(f"\n{recovery_hint}", err=True)
            sys.exit(1)

    return wrapper
