"""Data models for configuration management."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..models.comment import DEFAULT_PARAGRAPHS_PER_PAGE
from ..threads.thread_builder import DEFAULT_MAX_ITERATIONS


@dataclass
class ExtractionConfig:
    """
    Tunable settings for one extraction call.

    The defaults reproduce the behaviour other tools expect: 25 paragraphs
    per estimated page and at most 10 reply-propagation passes.
    """
    paragraphs_per_page: int = DEFAULT_PARAGRAPHS_PER_PAGE
    max_thread_iterations: int = DEFAULT_MAX_ITERATIONS
    include_resolved: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "paragraphs_per_page": self.paragraphs_per_page,
            "max_thread_iterations": self.max_thread_iterations,
            "include_resolved": self.include_resolved,
        }


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result
