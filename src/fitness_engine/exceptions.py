"""
Custom exceptions for the fitness engine.

The calculations themselves never raise on missing data: they answer N/A,
0 or None. These exceptions cover data-integrity problems (a registry that
breaks the one-claim-per-name invariant, an unreadable registry export) and
invalid arguments. Each exception includes:
- A descriptive message
- An error code
- Optional details for debugging
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Registry errors
    REGISTRY_CONFLICT = "REGISTRY_CONFLICT"
    REGISTRY_DATA_INVALID = "REGISTRY_DATA_INVALID"
    EXERCISE_NOT_FOUND = "EXERCISE_NOT_FOUND"


class FitnessEngineError(Exception):
    """
    Base exception for all fitness engine errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for reports and CLI output."""
        result: Dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class ValidationError(FitnessEngineError):
    """Raised when an argument is outside what an operation accepts."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            details=error_details,
        )


# ============================================================================
# Registry Errors
# ============================================================================

class RegistryError(FitnessEngineError):
    """Base class for exercise registry errors."""


class RegistryConflictError(RegistryError):
    """Raised when two active exercises claim the same normalized or legacy name."""

    def __init__(
        self,
        name: str,
        existing_id: str,
        incoming_id: str,
    ) -> None:
        super().__init__(
            message=(
                f"Exercise name '{name}' is already claimed by '{existing_id}'; "
                f"cannot also assign it to '{incoming_id}'"
            ),
            code=ErrorCode.REGISTRY_CONFLICT,
            details={
                "name": name,
                "existing_id": existing_id,
                "incoming_id": incoming_id,
            },
        )
        self.name = name
        self.existing_id = existing_id
        self.incoming_id = incoming_id


class RegistryDataError(RegistryError):
    """Raised when a registry export cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if source:
            error_details["source"] = source
        super().__init__(
            message=message,
            code=ErrorCode.REGISTRY_DATA_INVALID,
            details=error_details,
        )


class ExerciseNotFoundError(RegistryError):
    """Raised by strict lookups when no registry record matches a name or id."""

    def __init__(self, name: str) -> None:
        super().__init__(
            message=f"Exercise not found: {name}",
            code=ErrorCode.EXERCISE_NOT_FOUND,
            details={"name": name},
        )
        self.name = name
