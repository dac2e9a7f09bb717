"""Configuration management for the Word comments extractor."""

from .config_manager import ConfigurationManager
from .models import (
    ExtractionConfig,
    ConfigurationError,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "ExtractionConfig",
    "ConfigurationError",
    "ValidationResult",
]
