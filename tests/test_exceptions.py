"""Tests for the exception hierarchy and translation helpers."""

import pytest
from pydantic import ValidationError

from panelfx.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    DefinitionFileError,
    DeviceError,
    EffectNotFoundError,
    EndpointNotFoundError,
    MalformedResponseError,
    NotFoundError,
    PanelFXError,
    TransportError,
    UnauthorizedError,
    UnexpectedResponseError,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)
from panelfx.models import DeviceConfig


class TestHierarchy:
    """Test every error can be caught through the base classes."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "error",
        [
            TransportError("http://x/***/effects"),
            UnauthorizedError(),
            EffectNotFoundError("Flow"),
            EndpointNotFoundError("/select"),
            UnexpectedResponseError(500, 204, "select effect"),
            MalformedResponseError("a JSON string", "bad"),
        ],
    )
    def test_device_errors(self, error):
        assert isinstance(error, DeviceError)
        assert isinstance(error, PanelFXError)

    @pytest.mark.unit
    def test_not_found_kinds_are_distinct(self):
        assert issubclass(EffectNotFoundError, NotFoundError)
        assert issubclass(EndpointNotFoundError, NotFoundError)
        assert not issubclass(EndpointNotFoundError, EffectNotFoundError)

    @pytest.mark.unit
    def test_str_is_user_message(self):
        error = EffectNotFoundError("Flow")
        assert str(error) == "Effect 'Flow' not found."

    @pytest.mark.unit
    def test_effect_not_found_without_name(self):
        assert EffectNotFoundError().user_message == "Effect not found."

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        message = UnauthorizedError().get_full_message()
        assert "Suggestion:" in message
        assert "config set --token" in message

    @pytest.mark.unit
    def test_technical_message_defaults_to_user_message(self):
        error = PanelFXError("something broke")
        assert error.technical_message == "something broke"
        assert error.recoverable is False


class TestDefinitionFileError:
    """Test errors for user-supplied effect and animation files."""

    @pytest.mark.unit
    def test_not_a_configuration_error(self):
        error = DefinitionFileError("anim.json", "animation", "  - panels: Field required")

        assert isinstance(error, PanelFXError)
        assert not isinstance(error, ConfigurationError)
        assert error.user_message == "Invalid animation file: anim.json"
        assert "panels: Field required" in error.recovery_hint
        assert "\"frames\"" in error.recovery_hint

    @pytest.mark.unit
    def test_effect_definition_hint(self):
        error = DefinitionFileError("flow.json", "effect definition", "  - animName: Field required")

        assert "panelfx show NAME" in error.recovery_hint


class TestWrapTransportError:
    """Test wrap_transport_error."""

    @pytest.mark.unit
    def test_keeps_type_and_message(self):
        error = wrap_transport_error(ConnectionError("refused"), "http://x/***/effects")

        assert isinstance(error, TransportError)
        assert error.original_error == "ConnectionError: refused"
        assert "http://x/***/effects" in error.technical_message


class TestWrapPydanticError:
    """Test wrap_pydantic_error."""

    @pytest.mark.unit
    def test_single_field(self):
        with pytest.raises(ValidationError) as exc_info:
            DeviceConfig(url="panel.local")

        error = wrap_pydantic_error(exc_info.value, "config.json")

        assert isinstance(error, ConfigValidationError)
        assert error.field == "url"
        assert "http://192.168.1.20:16021/api/v1" in error.recovery_hint
        assert "config.json" in error.recovery_hint

    @pytest.mark.unit
    def test_multiple_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            DeviceConfig(url="panel.local", timeout=-1)

        error = wrap_pydantic_error(exc_info.value, "config.json")

        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message

    @pytest.mark.unit
    def test_invalid_json(self):
        with pytest.raises(ValidationError) as exc_info:
            DeviceConfig.model_validate_json("{ nope")

        error = wrap_pydantic_error(exc_info.value, "config.json")

        assert isinstance(error, ConfigFileInvalidError)
        assert isinstance(error, ConfigurationError)


class TestFormatErrorForDisplay:
    """Test format_error_for_display."""

    @pytest.mark.unit
    def test_panelfx_error(self):
        message, hint = format_error_for_display(EffectNotFoundError("Flow"))

        assert message == "Effect 'Flow' not found."
        assert hint == "Run 'panelfx list' to see the effects stored on the device."

    @pytest.mark.unit
    def test_unexpected_response_has_no_hint(self):
        message, hint = format_error_for_display(UnexpectedResponseError(500, 204, "delete"))

        assert "HTTP 500" in message
        assert hint is None

    @pytest.mark.unit
    def test_other_exception(self):
        message, hint = format_error_for_display(ValueError("bad"))

        assert message == "ValueError: bad"
        assert hint is None
