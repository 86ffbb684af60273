"""Domain layer exceptions for admissions business rule violations."""


class DomainException(Exception):
    """
    Base exception for the admissions domain.

    Raised when an entity would end up in a state the business does not
    allow, e.g. a user without roles or a student without a name.
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is constructed in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class BusinessRuleViolationException(DomainException):
    """Raised when a mutation breaks a business rule."""

    def __init__(self, message: str):
        super().__init__(message, error_code="BUSINESS_RULE_VIOLATION")


class ForbiddenRoleAssignmentException(DomainException):
    """Raised when a role may not be granted through the requested operation."""

    def __init__(self, message: str = "Admin role cannot be assigned"):
        super().__init__(message, error_code="FORBIDDEN_ROLE_ASSIGNMENT")
