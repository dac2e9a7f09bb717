"""Unit tests for the Configuration Manager."""

import json

import pytest

from word_comments.config import (
    ConfigurationManager,
    ConfigurationError,
    ExtractionConfig,
    ValidationResult,
)


class TestLoadConfiguration:
    """Tests for loading extraction settings."""

    def test_defaults(self):
        manager = ConfigurationManager()

        assert manager.is_loaded is False
        assert manager.configuration.paragraphs_per_page == 25
        assert manager.configuration.max_thread_iterations == 10
        assert manager.configuration.include_resolved is True

    def test_load_from_dict(self):
        manager = ConfigurationManager()

        result = manager.load({"paragraphs_per_page": 40, "include_resolved": False})

        assert result.is_valid
        assert manager.is_loaded
        assert manager.configuration.paragraphs_per_page == 40
        assert manager.configuration.include_resolved is False
        assert manager.configuration.max_thread_iterations == 10

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"max_thread_iterations": 20}), encoding="utf-8")

        manager = ConfigurationManager()
        manager.load(config_file)

        assert manager.configuration.max_thread_iterations == 20

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationManager().load(tmp_path / "nope.json")
        assert "not found" in exc_info.value.message

    def test_invalid_json_file(self, tmp_path):
        config_file = tmp_path / "broken.json"
        config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigurationManager().load(config_file)

    def test_non_object_rejected(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().load([1, 2, 3])


class TestValidation:
    """Tests for configuration validation."""

    @pytest.mark.parametrize("data", [
        {"paragraphs_per_page": 0},
        {"paragraphs_per_page": "25"},
        {"max_thread_iterations": True},
        {"max_thread_iterations": -1},
        {"include_resolved": "yes"},
    ])
    def test_invalid_values(self, data):
        manager = ConfigurationManager()

        with pytest.raises(ConfigurationError) as exc_info:
            manager.load(data)

        assert not exc_info.value.validation_result.is_valid
        assert manager.is_loaded is False

    def test_unknown_field_warns(self):
        result = ConfigurationManager().load({"colour": "blue"})

        assert result.is_valid
        assert any("colour" in w for w in result.warnings)

    def test_metadata_is_not_a_setting(self):
        manager = ConfigurationManager()

        result = manager.load({"metadata": {"team": "editorial"}})

        assert any("metadata" in w for w in result.warnings)
        assert "metadata" not in manager.to_dict()

    def test_low_iteration_bound_warns(self):
        result = ConfigurationManager().load({"max_thread_iterations": 3})

        assert result.is_valid
        assert any("max_thread_iterations" in w for w in result.warnings)

    def test_validation_result_merge(self):
        a = ValidationResult(is_valid=True, warnings=["w1"])
        b = ValidationResult(is_valid=True)
        b.add_error("e1")

        merged = a.merge(b)

        assert merged.is_valid is False
        assert merged.errors == ["e1"]
        assert merged.warnings == ["w1"]


class TestPersistence:
    """Tests for directory load/save."""

    def test_save_and_load_directory(self, tmp_path):
        manager = ConfigurationManager()
        manager.load({"paragraphs_per_page": 30, "include_resolved": False})
        manager.save_to_directory(tmp_path)

        other = ConfigurationManager()
        result = other.load_from_directory(tmp_path)

        assert result.is_valid
        assert other.configuration == manager.configuration

    def test_load_directory_without_file(self, tmp_path):
        manager = ConfigurationManager()
        result = manager.load_from_directory(tmp_path)

        assert result.is_valid
        assert manager.configuration == ExtractionConfig()

    def test_load_directory_with_invalid_file(self, tmp_path):
        (tmp_path / "extraction.json").write_text(
            json.dumps({"paragraphs_per_page": 0}), encoding="utf-8"
        )

        result = ConfigurationManager().load_from_directory(tmp_path)

        assert not result.is_valid
        assert any("Configuration loading failed" in e for e in result.errors)

    def test_save_without_directory(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().save_to_directory()

    def test_reset(self):
        manager = ConfigurationManager()
        manager.load({"paragraphs_per_page": 50})
        manager.reset()

        assert manager.is_loaded is False
        assert manager.to_dict()["paragraphs_per_page"] == 25
