"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UserNotFoundError(ApplicationError):
    """Raised when a user account is not found."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="USER_NOT_FOUND")


class EmailAlreadyExistsError(ApplicationError):
    """Raised when an account with the same email is already registered."""

    def __init__(self, message: str = "Email already registered"):
        super().__init__(message, error_code="EMAIL_ALREADY_EXISTS")


class EmployeeNotFoundError(ApplicationError):
    def __init__(self, message: str = "Employee not found"):
        super().__init__(message, error_code="EMPLOYEE_NOT_FOUND")


class StudentNotFoundError(ApplicationError):
    def __init__(self, message: str = "Student not found"):
        super().__init__(message, error_code="STUDENT_NOT_FOUND")


class ApplicationNotFoundError(ApplicationError):
    def __init__(self, message: str = "Application not found"):
        super().__init__(message, error_code="APPLICATION_NOT_FOUND")


class InvalidCredentialsError(ApplicationError):
    """Raised when login credentials are invalid."""

    def __init__(self, message: str = "Credentials incorrect"):
        super().__init__(message, error_code="INVALID_CREDENTIALS")


class AccountSuspendedError(ApplicationError):
    """Raised when a suspended account tries to authenticate."""

    def __init__(self, message: str = "Account is suspended"):
        super().__init__(message, error_code="ACCOUNT_SUSPENDED")


class InvalidTokenError(ApplicationError):
    """Raised when a token is invalid, malformed or expired."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, error_code="INVALID_TOKEN")


class UnauthorizedError(ApplicationError):
    """Raised when user is not authenticated."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, error_code="UNAUTHORIZED")


class InsufficientPermissionsError(ApplicationError):
    """Raised when an authenticated user lacks the role a route requires."""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message, error_code="INSUFFICIENT_PERMISSIONS")
