from typing import Optional, Any


class UsersApiError(Exception):
    """
    Base exception for the users API.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotConnectedError(UsersApiError):
    """
    Raised when the store is used before connect() or after disconnect().
    """
    def __init__(self, message: str = "Database not connected", details: Optional[Any] = None):
        super().__init__(message, code="NOT_CONNECTED", status_code=503, details=details)


class ResourceNotFoundError(UsersApiError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "User not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)


class DuplicateEmailError(UsersApiError):
    """
    Raised when a create or update would give two users the same email.
    """
    def __init__(self, message: str = "User with this email already exists", details: Optional[Any] = None):
        super().__init__(message, code="DUPLICATE_EMAIL", status_code=409, details=details)


class InvalidJSONError(UsersApiError):
    """
    Raised when a request body cannot be decoded into a JSON object.
    """
    def __init__(self, message: str = "Invalid JSON", details: Optional[Any] = None):
        super().__init__(message, code="INVALID_JSON", status_code=400, details=details)
