"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel

from panelfx.exceptions import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from panelfx.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original", value=1), config_path)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), config_path)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()

        backup_data = PydanticPersistence.load_json(backup_path, SampleModel)
        assert backup_data.name == "original"

        current_data = PydanticPersistence.load_json(config_path, SampleModel)
        assert current_data.name == "modified"
        assert current_data.value == 2

    @pytest.mark.unit
    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="original"), config_path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified"), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    @pytest.mark.unit
    def test_first_save_has_no_backup(self, tmp_path: Path):
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(), config_path)

        assert not config_path.with_suffix(".json.bak").exists()

    @pytest.mark.unit
    def test_atomic_write_cleans_up_temp_file(self, tmp_path: Path):
        """Test that temporary file is cleaned up after successful write."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(SampleModel(name="test", value=123), config_path)

        assert not config_path.with_suffix(".json.tmp").exists()
        assert json.loads(config_path.read_text()) == {"name": "test", "value": 123}

    @pytest.mark.unit
    def test_creates_parent_directories(self, tmp_path: Path):
        config_path = tmp_path / "a" / "b" / "config.json"

        PydanticPersistence.save_json(SampleModel(), config_path)

        assert config_path.exists()

    @pytest.mark.unit
    def test_load_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    @pytest.mark.unit
    def test_load_json_or_default_missing_file(self, tmp_path: Path):
        """Test load_json_or_default with missing file."""
        config_path = tmp_path / "missing.json"

        result = PydanticPersistence.load_json_or_default(config_path, SampleModel)

        assert result == SampleModel()
        # Should NOT create file
        assert not config_path.exists()

    @pytest.mark.unit
    def test_load_json_or_default_with_factory(self, tmp_path: Path):
        result = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json",
            SampleModel,
            default_factory=lambda: SampleModel(name="custom", value=999),
        )

        assert result.name == "custom"
        assert result.value == 999

    @pytest.mark.unit
    def test_corrupted_file_raises(self, tmp_path: Path):
        """Test that load_json_or_default raises on corrupted files instead of defaulting."""
        config_path = tmp_path / "corrupted.json"
        config_path.write_text("{ invalid }", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json_or_default(config_path, SampleModel)

        assert exc_info.value.file_path == str(config_path)
        assert exc_info.value.recoverable is True

    @pytest.mark.unit
    def test_empty_file_raises(self, tmp_path: Path):
        config_path = tmp_path / "empty.json"
        config_path.write_text("   \n", encoding="utf-8")

        with pytest.raises(ConfigFileInvalidError):
            PydanticPersistence.load_json(config_path, SampleModel)

    @pytest.mark.unit
    def test_schema_mismatch_raises_validation_error(self, tmp_path: Path):
        config_path = tmp_path / "invalid_schema.json"
        config_path.write_text(json.dumps({"value": "not a number"}), encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            PydanticPersistence.load_json(config_path, SampleModel)

        assert exc_info.value.field == "value"
        assert isinstance(exc_info.value, ConfigurationError)

    @pytest.mark.unit
    def test_corrupted_file_not_overwritten_by_load(self, tmp_path: Path):
        config_path = tmp_path / "corrupted.json"
        config_path.write_text("{ invalid json }", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            PydanticPersistence.load_json_or_default(config_path, SampleModel)

        assert config_path.read_text() == "{ invalid json }"
