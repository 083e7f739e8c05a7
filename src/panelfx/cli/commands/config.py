"""
Config command group.

Commands:
    - config show                                  # Display configuration
    - config set [--url U] [--token T] [--timeout S]   # Update and save
"""

import click
from pydantic import ValidationError

from panelfx.cli.common import report_errors
from panelfx.exceptions import wrap_pydantic_error
from panelfx.models import DeviceConfig


@click.group(name="config")
def config():
    """Show or change the stored device configuration."""
    pass


@config.command(name="show")
@click.option("--reveal-token", is_flag=True, help="Print the token instead of masking it")
@click.pass_context
@report_errors
def show_config(ctx, reveal_token: bool):
    """Display the current configuration."""
    path = ctx.obj.get("config_path")
    device_config = DeviceConfig.load_or_default(path)

    token = device_config.token
    if token and not reveal_token:
        token = token[:4] + "..." if len(token) > 4 else "***"

    click.echo(f"url:     {device_config.url}")
    click.echo(f"token:   {token or '(not set)'}")
    click.echo(f"timeout: {device_config.timeout}s")


@config.command(name="set")
@click.option("--url", type=str, default=None, help="Device API root, e.g. http://192.168.1.20:16021/api/v1")
@click.option("--token", type=str, default=None, help="Auth token obtained by pairing")
@click.option("--timeout", type=float, default=None, help="Per-request timeout in seconds")
@click.pass_context
@report_errors
def set_config(ctx, url: str | None, token: str | None, timeout: float | None):
    """Update configuration values and save them."""
    updates = {
        key: value
        for key, value in (("url", url), ("token", token), ("timeout", timeout))
        if value is not None
    }
    if not updates:
        raise click.UsageError("Nothing to set; pass --url, --token or --timeout")

    path = ctx.obj.get("config_path")
    current = DeviceConfig.load_or_default(path)
    try:
        updated = DeviceConfig.model_validate({**current.model_dump(), **updates})
    except ValidationError as e:
        raise wrap_pydantic_error(e, str(path or "command line")) from e

    updated.save(path)
    click.echo(f"Updated: {', '.join(sorted(updates))}")
