"""Effect commands: list, inspect, select, edit and stream effects."""

import json
from pathlib import Path

import click

from panelfx.cli.common import load_definition, open_client, report_errors
from panelfx.models import EffectData, StreamAnimation


def _dump(effect: EffectData) -> str:
    return effect.model_dump_json(by_alias=True, exclude_none=True, indent=2)


@click.command(name="list")
@click.pass_context
@report_errors
def list_effects(ctx):
    """List the effects stored on the device."""
    with open_client(ctx) as client:
        names = client.list_effects()

    if not names:
        click.echo("No effects stored on the device.")
        return

    for name in names:
        click.echo(name)


@click.command(name="current")
@click.pass_context
@report_errors
def current(ctx):
    """Show the currently active effect."""
    with open_client(ctx) as client:
        click.echo(client.get_selected())


@click.command(name="select")
@click.argument("name")
@click.pass_context
@report_errors
def select(ctx, name: str):
    """Activate effect NAME."""
    with open_client(ctx) as client:
        client.select(name)
    click.echo(f"Selected '{name}'")


@click.command(name="show")
@click.argument("name", required=False)
@click.option("--all", "show_all", is_flag=True, help="Show every effect definition")
@click.pass_context
@report_errors
def show(ctx, name: str | None, show_all: bool):
    """
    Print the definition of effect NAME as JSON.

    \b
    Examples:
      panelfx show Flow
      panelfx show --all > effects.json
    """
    if show_all == (name is not None):
        raise click.UsageError("Give either an effect NAME or --all")

    with open_client(ctx) as client:
        if show_all:
            effects = client.fetch_all_effects()
            click.echo(json.dumps([e.to_wire() for e in effects], indent=2))
        else:
            click.echo(_dump(client.fetch_effect(name)))


@click.command(name="rename")
@click.argument("name")
@click.argument("new_name")
@click.pass_context
@report_errors
def rename(ctx, name: str, new_name: str):
    """Rename effect NAME to NEW_NAME."""
    with open_client(ctx) as client:
        client.rename(name, new_name)
    click.echo(f"Renamed '{name}' to '{new_name}'")


@click.command(name="delete")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
@report_errors
def delete(ctx, name: str, yes: bool):
    """Delete effect NAME from the device."""
    if not yes:
        click.confirm(f"Delete effect '{name}'?", abort=True)

    with open_client(ctx) as client:
        client.delete(name)
    click.echo(f"Deleted '{name}'")


@click.command(name="add")
@click.argument("name")
@click.argument(
    "definition",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.pass_context
@report_errors
def add(ctx, name: str, definition: Path):
    """
    Create or overwrite effect NAME from a JSON DEFINITION file.

    The file uses the device's field names, e.g. the output of 'panelfx show'.
    """
    data = load_definition(definition, EffectData, "effect definition")

    with open_client(ctx) as client:
        client.add_or_update(data, name)
    click.echo(f"Saved '{name}'")


@click.command(name="display")
@click.argument(
    "animation",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--anim-data", type=str, default=None, help="Already encoded animation data")
@click.option("--loop/--no-loop", default=True, help="Repeat the animation (default: loop)")
@click.pass_context
@report_errors
def display(ctx, animation: Path | None, anim_data: str | None, loop: bool):
    """
    Stream a custom RGB animation without storing it.

    ANIMATION is a JSON file of the form
    {"panels": [{"id": 1, "frames": [{"red": 255, "green": 0, "blue": 0, "transition_time": 5}]}]}

    \b
    Examples:
      panelfx display sunrise.json
      panelfx display --anim-data "1 1 1 255 0 0 0 5" --no-loop
    """
    if (animation is None) == (anim_data is None):
        raise click.UsageError("Give either an ANIMATION file or --anim-data")

    payload = anim_data
    if animation is not None:
        payload = load_definition(animation, StreamAnimation, "animation")

    with open_client(ctx) as client:
        client.display(payload, loop=loop)
    click.echo("Animation sent")


@click.command(name="display-temp")
@click.argument("name")
@click.argument("seconds", type=click.IntRange(min=1))
@click.pass_context
@report_errors
def display_temp(ctx, name: str, seconds: int):
    """Show effect NAME for SECONDS, then return to the previous effect."""
    with open_client(ctx) as client:
        client.display_temporary(name, seconds)
    click.echo(f"Showing '{name}' for {seconds}s")


@click.command(name="raw")
@click.argument("payload")
@click.pass_context
@report_errors
def raw(ctx, payload: str):
    """
    Send PAYLOAD (a JSON object) verbatim inside a write envelope.

    \b
    Example:
      panelfx raw '{"command": "display", "animType": "static", "animData": "0"}'
    """
    try:
        body = json.loads(payload)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="PAYLOAD") from e
    if not isinstance(body, dict):
        raise click.BadParameter("must be a JSON object", param_hint="PAYLOAD")

    with open_client(ctx) as client:
        client.write_raw(body)
    click.echo("Payload sent")


EFFECT_COMMANDS = [
    list_effects,
    current,
    select,
    show,
    rename,
    delete,
    add,
    display,
    display_temp,
    raw,
]
