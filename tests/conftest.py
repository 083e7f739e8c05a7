"""Pytest fixtures for tests."""

import json

import pytest

from panelfx import DeviceContext, EffectsClient, TransportResponse

DEVICE_URL = "http://10.0.0.5:16021/api/v1"
TOKEN = "s3cr3t"
EFFECTS_URL = f"{DEVICE_URL}/{TOKEN}/effects"


class FakeTransport:
    """In-memory transport that records calls and replays queued responses."""

    def __init__(self):
        self.calls: list[tuple[str, str, object]] = []
        self._responses: list[TransportResponse] = []
        self.closed = False

    def queue(self, status_code: int, body=None) -> None:
        """Queue a response; non-bytes bodies are JSON encoded."""
        if body is None:
            content = b""
        elif isinstance(body, bytes):
            content = body
        else:
            content = json.dumps(body).encode()
        self._responses.append(TransportResponse(status_code=status_code, content=content))

    def get(self, url):
        self.calls.append(("GET", url, None))
        return self._responses.pop(0)

    def put(self, url, body):
        self.calls.append(("PUT", url, body))
        return self._responses.pop(0)

    def close(self):
        self.closed = True

    @property
    def last_body(self):
        return self.calls[-1][2]


@pytest.fixture
def transport():
    """Create an empty fake transport."""
    return FakeTransport()


@pytest.fixture
def context(transport):
    """Create a device context wired to the fake transport."""
    return DeviceContext(url=DEVICE_URL, token=TOKEN, transport=transport)


@pytest.fixture
def client(context):
    """Create an EffectsClient over the fake transport."""
    return EffectsClient(context)


@pytest.fixture
def flow_effect_json():
    """Effect definition as the device returns it."""
    return {
        "animName": "Flow",
        "animType": "plugin",
        "colorType": "HSB",
        "palette": [
            {"hue": 0, "saturation": 100, "brightness": 100, "probability": 0.5},
            {"hue": 120, "saturation": 100, "brightness": 80, "probability": 0.5},
        ],
        "pluginType": "color",
        "pluginUuid": "027842e4-e1d6-4a4c-a731-be74a1ebd4cf",
        "pluginOptions": [
            {"name": "transTime", "value": 24},
            {"name": "loop", "value": True},
            {"name": "linDirection", "value": "right"},
            {"name": "nColorsPerFrame", "value": 2.5},
        ],
        "hasOverlay": False,
        "version": "2.0",
    }
