"""Configuration Manager implementation for the Word comments extractor.

This module provides functionality to load, validate, and save the
extraction settings from JSON files or plain dictionaries.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..threads.thread_builder import DEFAULT_MAX_ITERATIONS
from .models import ConfigurationError, ExtractionConfig, ValidationResult


CONFIG_FILENAME = "extraction.json"

KNOWN_FIELDS = {"paragraphs_per_page", "max_thread_iterations", "include_resolved"}


class ConfigurationManager:
    """
    Manager for extraction configuration.

    Handles loading, validation, and access to the ExtractionConfig.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional directory path for configuration files.
        """
        self._config_dir = Path(config_dir) if config_dir else None
        self._configuration = ExtractionConfig()
        self._is_loaded = False

    @property
    def configuration(self) -> ExtractionConfig:
        """Get the current extraction configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load(self, source: Union[str, Path, Dict[str, Any]]) -> ValidationResult:
        """
        Load and validate extraction settings.

        Supports loading from a JSON file path or a dictionary. Missing
        fields keep their defaults.

        Args:
            source: File path or dictionary.

        Returns:
            ValidationResult indicating success, possibly with warnings.

        Raises:
            ConfigurationError: If validation fails and configuration cannot be applied.
        """
        raw_data = self._parse_source(source)
        if not isinstance(raw_data, dict):
            raise ConfigurationError("Extraction configuration must be a JSON object")

        result = self.validate(raw_data)
        if not result.is_valid:
            raise ConfigurationError(
                "Extraction configuration validation failed",
                validation_result=result
            )

        defaults = ExtractionConfig()
        self._configuration = ExtractionConfig(
            paragraphs_per_page=raw_data.get("paragraphs_per_page", defaults.paragraphs_per_page),
            max_thread_iterations=raw_data.get("max_thread_iterations", defaults.max_thread_iterations),
            include_resolved=raw_data.get("include_resolved", defaults.include_resolved),
        )
        self._is_loaded = True
        return result

    def validate(self, data: Dict[str, Any]) -> ValidationResult:
        """Validate a raw configuration dictionary."""
        result = ValidationResult(is_valid=True)

        for key in data:
            if key not in KNOWN_FIELDS:
                result.add_warning(f"Unknown configuration field '{key}' is ignored")

        for int_field in ("paragraphs_per_page", "max_thread_iterations"):
            if int_field not in data:
                continue
            value = data[int_field]
            # bool is a subclass of int
            if not isinstance(value, int) or isinstance(value, bool):
                result.add_error(f"'{int_field}' must be an integer")
            elif value < 1:
                result.add_error(f"'{int_field}' must be at least 1")

        iterations = data.get("max_thread_iterations")
        if (
            isinstance(iterations, int)
            and not isinstance(iterations, bool)
            and 1 <= iterations < DEFAULT_MAX_ITERATIONS
        ):
            result.add_warning(
                f"'max_thread_iterations' of {iterations} is below the default "
                f"{DEFAULT_MAX_ITERATIONS}; long reply chains will be split into "
                f"separate threads"
            )

        if "include_resolved" in data and not isinstance(data["include_resolved"], bool):
            result.add_error("'include_resolved' must be a boolean")

        return result

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")

            try:
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}")

        return source

    def load_from_directory(self, config_dir: Union[str, Path]) -> ValidationResult:
        """
        Load ``extraction.json`` from a directory if it exists.

        Args:
            config_dir: Directory containing configuration files.

        Returns:
            ValidationResult for the loaded configuration.
        """
        config_dir = Path(config_dir)
        result = ValidationResult(is_valid=True)

        config_file = config_dir / CONFIG_FILENAME
        if config_file.exists():
            try:
                result = result.merge(self.load(config_file))
            except ConfigurationError as e:
                result.add_error(f"Configuration loading failed: {e.message}")
                if e.validation_result:
                    result = result.merge(e.validation_result)

        self._config_dir = config_dir
        return result

    def save_to_directory(
        self,
        config_dir: Optional[Union[str, Path]] = None
    ) -> None:
        """
        Save current configuration to a directory.

        Args:
            config_dir: Directory to save to. Uses current config_dir if None.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if not config_dir:
            raise ConfigurationError("No configuration directory specified")

        config_dir.mkdir(parents=True, exist_ok=True)
        with open(config_dir / CONFIG_FILENAME, "w", encoding="utf-8") as f:
            json.dump(self._configuration.to_dict(), f, indent=2, ensure_ascii=False)

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._configuration = ExtractionConfig()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as a dictionary."""
        return self._configuration.to_dict()
