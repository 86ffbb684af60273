"""Domain exceptions - business rule violations."""

from admissions.domain.exceptions.domain_exceptions import (
    BusinessRuleViolationException,
    DomainException,
    ForbiddenRoleAssignmentException,
    InvalidEntityStateException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "BusinessRuleViolationException",
    "ForbiddenRoleAssignmentException",
]
