"""Domain exception hierarchy for type-safe error handling.

This module provides the base exception hierarchy for all directory errors.
Exceptions carry a machine-readable error code and structured context so
callers (the identity-framework side of the directory) can decide how to
surface a failure.

Lookups never raise: a missing principal or role is an absent result.
``NotFoundError`` is reserved for commands that target a record by id.

Example:
    >>> from warden.foundation.domain.exceptions import ValidationError
    >>> raise ValidationError("claims.type", "Claim type cannot be empty")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConflictError",
    "DomainError",
    "DuplicateLoginError",
    "NotFoundError",
    "ValidationError",
]


class DomainError(Exception):
    """Base class for all domain errors.

    Attributes:
        error_code: Machine-readable error code for client handling.
        message: Human-readable error description.
        context: Structured debugging information (record ids, field names).

    Example:
        >>> raise DomainError("Operation failed", context={"principal_id": "123"})
        DomainError: Operation failed (principal_id=123)
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional context.

        Args:
            message: Human-readable error description.
            context: Structured debugging information. Keys should be snake_case.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class NotFoundError(DomainError):
    """Raised when a command targets a record that does not exist.

    Attributes:
        error_code: "RESOURCE_NOT_FOUND" (class constant).
        resource_type: Type of missing resource ("Principal", "Role").
        resource_id: Identifier of missing resource.

    Example:
        >>> raise NotFoundError("Principal", "5b0c7c1e")
        NotFoundError: Principal not found: 5b0c7c1e
    """

    error_code: str = "RESOURCE_NOT_FOUND"

    def __init__(
        self,
        resource_type: str,
        resource_id: str,
        **extra_context: Any,
    ) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type} not found: {resource_id}"
        context = {
            "resource_type": resource_type,
            "resource_id": str(resource_id),
            **extra_context,
        }
        super().__init__(message, context)


class ValidationError(DomainError):
    """Raised when a record, claim or login fails construction rules.

    Attributes:
        error_code: "VALIDATION_ERROR" (class constant).
        field: Field path that failed validation (dot notation allowed).
        reason: Human-readable validation failure reason.

    Example:
        >>> raise ValidationError("id", "Principal id cannot be empty")
        ValidationError: Validation failed for 'id': Principal id cannot be empty
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        field: str,
        reason: str,
        **extra_context: Any,
    ) -> None:
        self.field = field
        self.reason = reason
        message = f"Validation failed for '{field}': {reason}"
        context = {
            "field": field,
            "reason": reason,
            **extra_context,
        }
        super().__init__(message, context)


class ConflictError(DomainError):
    """Raised when an operation conflicts with current directory state.

    Use for duplicate role names and duplicate record ids.

    Attributes:
        error_code: "CONFLICT" (class constant).
        reason: Description of the conflict.

    Example:
        >>> raise ConflictError("Role already exists", normalized_name="ADMIN")
        ConflictError: Conflict: Role already exists (normalized_name=ADMIN)
    """

    error_code: str = "CONFLICT"

    def __init__(
        self,
        reason: str,
        **context: Any,
    ) -> None:
        self.reason = reason
        message = f"Conflict: {reason}"
        super().__init__(message, context)


class DuplicateLoginError(ConflictError):
    """Raised when a (login_provider, provider_key) pair is already linked.

    The pair must be unique on a principal and across the principal set.
    Inherits from ConflictError so callers can handle both alike.

    Attributes:
        error_code: "DUPLICATE_LOGIN" (class constant).
        login_provider: Provider of the rejected login.
        provider_key: Provider-specific key of the rejected login.
    """

    error_code: str = "DUPLICATE_LOGIN"

    def __init__(self, login_provider: str, provider_key: str, **context: Any) -> None:
        self.login_provider = login_provider
        self.provider_key = provider_key
        super().__init__(
            f"Login '{login_provider}' is already linked",
            login_provider=login_provider,
            **context,
        )
