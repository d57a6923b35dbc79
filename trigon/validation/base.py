"""Base classes for the side validation system"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from trigon.core.exceptions import TriangleValidationError


class ValidationResult:
    """Result of a validation operation"""

    def __init__(self, is_valid: bool = True, errors: Optional[List[TriangleValidationError]] = None):
        """
        Initialize validation result.

        Args:
            is_valid: Whether validation passed
            errors: List of validation errors if validation failed
        """
        self._errors = list(errors or [])
        self._is_valid = is_valid and not self._errors

    @property
    def is_valid(self) -> bool:
        """Check if validation passed"""
        return self._is_valid

    @property
    def errors(self) -> List[TriangleValidationError]:
        """Get list of validation errors"""
        return self._errors

    def add_error(self, error: TriangleValidationError) -> None:
        """
        Add a validation error.

        Args:
            error: Validation error to add
        """
        self._errors.append(error)
        self._is_valid = False

    def merge(self, other: "ValidationResult") -> None:
        """Append all errors of another result"""
        for error in other.errors:
            self.add_error(error)

    def raise_if_invalid(self) -> None:
        """
        Raise the first collected error.

        Raises:
            TriangleValidationError: If validation failed
        """
        if not self._is_valid and self._errors:
            raise self._errors[0]


class BaseValidator(ABC):
    """Abstract base class for all side validators (Interface)"""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a value.

        Args:
            value: Value to validate

        Returns:
            ValidationResult with validation status and errors
        """
        pass
