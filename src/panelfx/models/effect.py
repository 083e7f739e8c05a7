"""Effect definition models, as exchanged with the device."""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from panelfx.models.animation import StreamAnimation
from panelfx.models.enums import PluginValueKind

# bool must stay ahead of int: strict types keep True from being read as 1
PluginValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]

# Effect types whose animData uses the positional stream format
STREAM_ANIM_TYPES = frozenset({"custom", "static"})


class PaletteColor(BaseModel):
    """One palette entry. Ranges are documented, not enforced; the device decides."""

    model_config = ConfigDict(frozen=True)

    hue: int = Field(description="Hue (0-360)")
    saturation: int = Field(description="Saturation (0-100)")
    brightness: int = Field(description="Brightness (0-100)")
    probability: float | None = Field(
        default=None,
        description="Selection weight within the palette (0.0-1.0)",
    )


class PluginOption(BaseModel):
    """A plugin setting. The value's kind comes from the plugin schema."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Option key")
    value: PluginValue = Field(description="Option value (bool, int, float or str)")

    @property
    def kind(self) -> PluginValueKind:
        """Which primitive kind ``value`` holds."""
        if isinstance(self.value, bool):
            return PluginValueKind.BOOL
        if isinstance(self.value, int):
            return PluginValueKind.INT
        if isinstance(self.value, float):
            return PluginValueKind.FLOAT
        return PluginValueKind.STR


class EffectData(BaseModel):
    """Full definition of an effect.

    Python attribute names are snake_case; the device's camelCase names are
    the aliases, and either spelling is accepted on construction. Fields left
    as ``None`` are omitted from the wire form.
    """

    model_config = ConfigDict(populate_by_name=True)

    command: str | None = Field(default=None, description="Operation tag, set by the client")
    loop: bool | None = None
    name: str = Field(alias="animName", description="Effect name")
    anim_type: str | None = Field(default=None, alias="animType")
    version: str | None = None
    anim_data: str | None = Field(
        default=None,
        alias="animData",
        description="Positional animation data (see panelfx.protocol.stream)",
    )
    color_type: str | None = Field(default=None, alias="colorType")
    palette: list[PaletteColor] | None = None
    plugin_type: str | None = Field(default=None, alias="pluginType")
    plugin_uuid: str | None = Field(default=None, alias="pluginUuid")
    plugin_options: list[PluginOption] | None = Field(default=None, alias="pluginOptions")
    overlay_palette: list[PaletteColor] | None = Field(default=None, alias="overlayPalette")
    overlay_color_type: str | None = Field(default=None, alias="overlayColorType")
    has_overlay: bool | None = Field(default=None, alias="hasOverlay")
    logical_panels_enabled: bool | None = Field(default=None, alias="logicalPanelsEnabled")

    def to_wire(self) -> dict[str, Any]:
        """Dump using device field names, dropping absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def animation(self) -> StreamAnimation | None:
        """
        Parse ``anim_data`` into a StreamAnimation.

        Returns:
            The parsed animation, or None when the effect carries no
            stream-format data (plugin effects, or no animData at all)

        Raises:
            MalformedResponseError: If animData does not follow the stream grammar
        """
        if self.anim_data is None or self.anim_type not in STREAM_ANIM_TYPES:
            return None

        from panelfx.protocol.stream import decode_animation

        return decode_animation(self.anim_data)
