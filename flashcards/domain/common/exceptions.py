"""
Domain layer exceptions.

These exceptions are raised when a domain object cannot be built from
the data it was given. They are not caught inside the domain; callers
translate them into whatever surface they own.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Carries a human-readable message and an optional mapping of details
    so callers can report errors uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when hydrating an entity from untrusted data fails.

    Example: a flashcard payload with an empty question.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value
