"""Wire protocol for the effects API: envelopes, status mapping and stream encoding."""

from .envelope import (
    Envelope,
    SelectEnvelope,
    WriteEnvelope,
    build_add,
    build_delete,
    build_display,
    build_display_temp,
    build_raw,
    build_rename,
    build_request,
    build_request_all,
    build_select,
    decode_effect_data,
    decode_effect_data_list,
    decode_string,
    decode_string_list,
    encode_select,
    encode_write,
)
from .status import Expect, check_status
from .stream import RESERVED_CHANNEL, decode_animation, encode_animation

__all__ = [
    # Envelopes
    "Envelope",
    "SelectEnvelope",
    "WriteEnvelope",
    "build_add",
    "build_delete",
    "build_display",
    "build_display_temp",
    "build_raw",
    "build_rename",
    "build_request",
    "build_request_all",
    "build_select",
    "encode_select",
    "encode_write",
    # Decoders
    "decode_effect_data",
    "decode_effect_data_list",
    "decode_string",
    "decode_string_list",
    # Status
    "Expect",
    "check_status",
    # Stream
    "RESERVED_CHANNEL",
    "decode_animation",
    "encode_animation",
]
