"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class InvalidArgumentError(DomainException, ValueError):
    """
    Raised when an operation receives an unusable argument.

    Covers empty or missing strings, missing object references and
    violated value constraints (e.g. a visibility window ending before
    it starts).
    """

    def __init__(self, message: str = "Invalid argument", argument: str = None):
        super().__init__(message, code="INVALID_ARGUMENT")
        self.argument = argument


class InvalidStateError(DomainException):
    """Raised when an operation is not allowed in the entity's current state."""

    def __init__(self, message: str = "Invalid state"):
        super().__init__(message, code="INVALID_STATE")
