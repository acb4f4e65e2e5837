"""Domain error classes.

Protocol-agnostic errors that represent pricing and catalog failures.
These errors are translated to HTTP responses by the entrypoint adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be translated to
    any protocol (currently only HTTP).
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """User-correctable input error.

    Raised before any catalog lookup happens.

    Examples:
        - installment_months not in the allowed set
        - Unknown contract type or join type
        - Negative amortization term

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "installment_months", "message": "Must be one of [0, 12, 24, 36]"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Examples:
        - Device with ID not found (or not exposed)
        - Plan with ID not found (or not exposed)

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Device", "Plan")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class CombinationUnavailableError(NotFoundError):
    """No exposed subsidy entry exists for a (device, plan, join type) triple.

    The engine never substitutes a zero or default subsidy for a missing
    combination.
    """

    def __init__(self, device_id: str, plan_id: str, join_type: str) -> None:
        super().__init__(
            resource="Subsidy",
            identifier=f"{device_id}/{plan_id}/{join_type}",
            device_id=device_id,
            plan_id=plan_id,
            join_type=join_type,
        )
        self.message = (
            f"Combination unavailable: device '{device_id}', plan '{plan_id}', "
            f"join type '{join_type}'"
        )
        self.args = (self.message,)


class DataIntegrityError(DomainError):
    """Catalog snapshot is missing required data or is inconsistent.

    The engine refuses to compute against such a snapshot. Fatal for that
    snapshot, reported upward and never retried by the engine.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "DATA_INTEGRITY_ERROR"

    def __init__(self, message: str, problems: list[str] | None = None, **context: Any) -> None:
        """Create a data integrity error.

        Args:
            message: Summary of the integrity failure
            problems: Individual problems found in the snapshot
            **context: Additional context
        """
        self.problems = problems or []
        super().__init__(message, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        result = super().to_dict()
        if self.problems:
            result["problems"] = self.problems
        return result
