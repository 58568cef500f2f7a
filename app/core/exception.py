from typing import Any

from app.schemas.error import ErrorCategory


class CustomException(Exception):
    """
    Base exception class for all custom application exceptions.

    Carries a category only; the HTTP status is decided by the
    exception handling middleware.
    """

    def __init__(self, message: str, category: ErrorCategory):
        super().__init__(message)
        self.message = message
        self.category = category


class ResourceNotFoundException(CustomException):
    """Exception raised when a requested resource is not found"""

    def __init__(self, resource_name: str, identifier: Any, field: str = "id"):
        super().__init__(
            message=f"{resource_name} not found with {field} = {identifier}",
            category=ErrorCategory.NOT_FOUND
        )


class ForeignKeyNotEnteredException(CustomException):
    """Exception raised when the store rejects a write for a missing or invalid required field"""

    def __init__(self, expected_body: str):
        super().__init__(
            message=f"body request should have: {expected_body}",
            category=ErrorCategory.FOREIGN_KEY
        )


class DeleteIntegrityViolationException(CustomException):
    """Exception raised when dependent records still reference the entity being deleted"""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            category=ErrorCategory.DELETE_INTEGRITY
        )


class DuplicateResourceException(CustomException):
    """Exception raised when attempting to create a resource that already exists"""

    def __init__(self, resource_name: str, identifier: Any = None):
        if identifier is not None:
            message = f"{resource_name} with identifier '{identifier}' already exists."
        else:
            message = f"{resource_name} already exists."

        super().__init__(
            message=message,
            category=ErrorCategory.RESOURCE_CONFLICT
        )


class BadRequestException(CustomException):
    """Exception raised for malformed or invalid requests"""

    def __init__(self, message: str = "The request is invalid or malformed."):
        super().__init__(
            message=message,
            category=ErrorCategory.BAD_REQUEST
        )
