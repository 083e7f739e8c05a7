"""
Positional text format for streamed custom effects.

The device reads ``animData`` as a flat run of space-separated integers with
no field tags::

    <panelCount> { <panelID> <frameCount> { <R> <G> <B> 0 <transitionTime> } }

Example: two panels, panel 1 red fading in over 0.5s, panel 2 green then
blue::

    2 1 1 255 0 0 0 5 2 2 0 255 0 0 3 0 0 255 0 7
    │ │ │ └────┬────┘ │ │ └────┬─────┘ └────┬────┘
    │ │ │   frame 1   │ │   frame 1     frame 2
    │ │ └─ 1 frame    │ └─ 2 frames
    │ └─ panel ID 1   └─ panel ID 2
    └─ 2 panels

The fourth value of every frame is a reserved channel that is always ``0``.
A missing or reordered value shifts everything after it, so encoding never
reorders, drops or validates anything.
"""

from panelfx.exceptions import MalformedResponseError
from panelfx.models.animation import Frame, Panel, StreamAnimation

RESERVED_CHANNEL = 0


def encode_animation(animation: StreamAnimation) -> str:
    """
    Encode an animation into the device's positional text format.

    Args:
        animation: Panels and frames, in the order the device should read them

    Returns:
        Space-separated integers, no trailing delimiter. ``"0"`` for no panels.
    """
    values = [len(animation.panels)]
    for panel in animation.panels:
        values.extend((panel.id, len(panel.frames)))
        for frame in panel.frames:
            values.extend(
                (frame.red, frame.green, frame.blue, RESERVED_CHANNEL, frame.transition_time)
            )
    return " ".join(str(value) for value in values)


def decode_animation(data: str) -> StreamAnimation:
    """
    Parse positional animation text back into a StreamAnimation.

    The reserved channel is read and discarded.

    Args:
        data: Text in the format produced by encode_animation

    Returns:
        The decoded animation

    Raises:
        MalformedResponseError: On non-integer, missing or trailing values, or a
            negative panel or frame count
    """
    try:
        values = [int(token) for token in data.split()]
    except ValueError as e:
        raise MalformedResponseError("animation data", str(e)) from e

    if not values:
        raise MalformedResponseError("animation data", "no panel count")

    cursor = iter(values)

    def take(what: str) -> int:
        try:
            return next(cursor)
        except StopIteration:
            raise MalformedResponseError("animation data", f"truncated before {what}") from None

    def take_count(what: str) -> int:
        count = take(what)
        if count < 0:
            raise MalformedResponseError("animation data", f"negative {what}: {count}")
        return count

    animation = StreamAnimation()
    for _ in range(take_count("panel count")):
        panel = Panel(id=take("panel id"))
        for _ in range(take_count("frame count")):
            red, green, blue = take("red"), take("green"), take("blue")
            take("reserved channel")
            panel.frames.append(
                Frame(red=red, green=green, blue=blue, transition_time=take("transition time"))
            )
        animation.panels.append(panel)

    leftover = sum(1 for _ in cursor)
    if leftover:
        raise MalformedResponseError("animation data", f"{leftover} trailing values")

    return animation
