"""
Custom exceptions for DocuSign Wrapper.
"""

from typing import Optional, Dict, Any


class DocuSignError(Exception):
    """Base exception for all DocuSign Wrapper errors."""
    
    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(DocuSignError):
    """Raised when the configuration is missing or invalid."""
    pass


class APIError(DocuSignError):
    """Raised when the API returns an error or cannot be reached."""
    
    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        details: Optional[str] = None
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.response_data = response_data or {}


class AuthenticationError(APIError):
    """Raised when DocuSign rejects the supplied credentials."""
    
    def __init__(self, message: str, details: Optional[str] = None, **kwargs):
        kwargs.setdefault("status_code", 401)
        super().__init__(message, details=details, **kwargs)


class AccountNotAccessibleError(AuthenticationError):
    """Raised when the requested account is not listed in login information."""
    
    def __init__(self, account_id: str):
        super().__init__(
            f"Unable to access specified Account ID: {account_id}",
            status_code=None
        )
        self.account_id = account_id


class PermissionDeniedError(APIError):
    """Raised when the user lacks access to a resource."""
    pass


class NotFoundError(APIError):
    """Raised when a resource does not exist."""
    pass


class ValidationError(APIError):
    """Raised when DocuSign rejects the request parameters."""
    
    def __init__(self, message: str, details: Optional[str] = None, **kwargs):
        kwargs.setdefault("status_code", 400)
        super().__init__(message, details=details, **kwargs)
