"""Caller-built animation models for streamed custom effects.

Order is part of the identity at every level: the device reads the encoded
form positionally, so panels and frames are kept exactly as given. Colour
ranges (0-255) and non-negative transition times are the caller's
responsibility.
"""

from pydantic import BaseModel, Field


class Frame(BaseModel):
    """One colour step of a panel."""

    red: int = Field(description="Red (0-255)")
    green: int = Field(description="Green (0-255)")
    blue: int = Field(description="Blue (0-255)")
    transition_time: int = Field(
        default=0,
        description="Tenths of a second to reach this colour from the previous state",
    )


class Panel(BaseModel):
    """A light tile and its ordered frames."""

    id: int = Field(description="Panel ID as reported by the device layout")
    frames: list[Frame] = Field(default_factory=list)


class StreamAnimation(BaseModel):
    """Ordered set of panels to stream as a custom effect."""

    panels: list[Panel] = Field(default_factory=list)

    def add_panel(self, panel_id: int, frames: list[Frame] | None = None) -> Panel:
        """Append a panel and return it so frames can be added in place."""
        panel = Panel(id=panel_id, frames=list(frames or []))
        self.panels.append(panel)
        return panel
