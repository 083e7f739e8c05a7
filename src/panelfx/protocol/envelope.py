"""
Command envelopes for the effects endpoint, and response decoders.

Every mutation is a PUT to the same URL. The body is either a ``select``
envelope or a ``write`` envelope whose ``command`` field says what to do::

    {"select": "Flow"}
    {"write": {"command": "rename", "animName": "Flow", "newName": "River"}}

Each command has its own request model and builder function below, so the
shape of every body is fixed by its type. ``build_raw`` is the only way to
send an unchecked payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from panelfx.exceptions import MalformedResponseError
from panelfx.models import EffectCommand, EffectData


def encode_select(name: str) -> dict[str, Any]:
    """Build the activation envelope ``{"select": name}``."""
    return {"select": name}


def encode_write(command: str, **fields: Any) -> dict[str, Any]:
    """Build ``{"write": {"command": command, **fields}}``, command first."""
    return {"write": {"command": command, **fields}}


class WriteCommand(BaseModel):
    """Base for typed ``write`` payloads."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    command: EffectCommand

    def fields(self) -> dict[str, Any]:
        """Wire fields other than ``command``."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"command"})


class RequestCommand(WriteCommand):
    command: Literal[EffectCommand.REQUEST] = EffectCommand.REQUEST
    name: str = Field(alias="animName")


class RequestAllCommand(WriteCommand):
    command: Literal[EffectCommand.REQUEST_ALL] = EffectCommand.REQUEST_ALL


class RenameCommand(WriteCommand):
    command: Literal[EffectCommand.RENAME] = EffectCommand.RENAME
    name: str = Field(alias="animName")
    new_name: str = Field(alias="newName")


class DeleteCommand(WriteCommand):
    command: Literal[EffectCommand.DELETE] = EffectCommand.DELETE
    name: str = Field(alias="animName")


class DisplayCommand(WriteCommand):
    """Show an RGB custom animation immediately, without storing it."""

    command: Literal[EffectCommand.DISPLAY] = EffectCommand.DISPLAY
    anim_type: Literal["custom"] = Field(default="custom", alias="animType")
    color_type: Literal["RGB"] = Field(default="RGB", alias="colorType")
    anim_data: str = Field(alias="animData")
    loop: bool


class DisplayTempCommand(WriteCommand):
    """Show a stored effect for ``duration`` seconds, then revert (device-side timer)."""

    command: Literal[EffectCommand.DISPLAY_TEMP] = EffectCommand.DISPLAY_TEMP
    duration: int
    name: str = Field(alias="animName")


@dataclass(frozen=True)
class SelectEnvelope:
    """Activation request for a stored effect."""

    name: str

    @property
    def label(self) -> str:
        return "select"

    def to_wire(self) -> dict[str, Any]:
        return encode_select(self.name)


@dataclass(frozen=True)
class WriteEnvelope:
    """A ``write`` request: a typed command, an EffectData to add, or a raw mapping."""

    payload: WriteCommand | EffectData | Mapping[str, Any]

    @property
    def label(self) -> str:
        """Command tag for logging; ``raw`` for unchecked payloads."""
        if isinstance(self.payload, WriteCommand):
            return self.payload.command.value
        if isinstance(self.payload, EffectData):
            return self.payload.command or "add"
        return "raw"

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready body for the PUT request."""
        if isinstance(self.payload, WriteCommand):
            return encode_write(self.payload.command.value, **self.payload.fields())
        if isinstance(self.payload, EffectData):
            body = self.payload.to_wire()
            command = body.pop("command")
            return encode_write(command, **body)
        return {"write": dict(self.payload)}


Envelope = SelectEnvelope | WriteEnvelope


def build_select(name: str) -> SelectEnvelope:
    return SelectEnvelope(name=name)


def build_request(name: str) -> WriteEnvelope:
    return WriteEnvelope(RequestCommand(name=name))


def build_request_all() -> WriteEnvelope:
    return WriteEnvelope(RequestAllCommand())


def build_rename(name: str, new_name: str) -> WriteEnvelope:
    return WriteEnvelope(RenameCommand(name=name, new_name=new_name))


def build_add(data: EffectData, name: str) -> WriteEnvelope:
    """
    Build an add/overwrite request.

    ``command`` and ``name`` are forced onto a copy of ``data`` whatever the
    caller had set; the caller's object is left as it was.
    """
    return WriteEnvelope(data.model_copy(update={"command": EffectCommand.ADD.value, "name": name}))


def build_delete(name: str) -> WriteEnvelope:
    return WriteEnvelope(DeleteCommand(name=name))


def build_display(anim_data: str, loop: bool) -> WriteEnvelope:
    return WriteEnvelope(DisplayCommand(anim_data=anim_data, loop=loop))


def build_display_temp(name: str, duration: int) -> WriteEnvelope:
    return WriteEnvelope(DisplayTempCommand(name=name, duration=duration))


def build_raw(payload: Mapping[str, Any]) -> WriteEnvelope:
    """Wrap an arbitrary payload under ``write`` without any checking."""
    return WriteEnvelope(payload)


class _AnimationsEnvelope(BaseModel):
    animations: list[EffectData]


_STRING_LIST = TypeAdapter(list[str])
_STRING = TypeAdapter(str)
_EFFECT_DATA = TypeAdapter(EffectData)
_ANIMATIONS = TypeAdapter(_AnimationsEnvelope)


def _decode(adapter: TypeAdapter, body: bytes, expected: str) -> Any:
    try:
        return adapter.validate_json(body)
    except ValidationError as e:
        raise MalformedResponseError(expected, str(e)) from e


def decode_string_list(body: bytes) -> list[str]:
    """Decode a JSON array of effect names, keeping device order."""
    return _decode(_STRING_LIST, body, "a list of effect names")


def decode_string(body: bytes) -> str:
    """Decode a single JSON string (the active effect name)."""
    return _decode(_STRING, body, "an effect name")


def decode_effect_data(body: bytes) -> EffectData:
    """Decode one effect definition."""
    return _decode(_EFFECT_DATA, body, "an effect definition")


def decode_effect_data_list(body: bytes) -> list[EffectData]:
    """Decode ``{"animations": [...]}`` into effect definitions, keeping device order."""
    return _decode(_ANIMATIONS, body, "a list of effect definitions").animations
