"""
Base exceptions for page-driver.
"""


class PageDriverError(Exception):
    """
    Base exception for all page-driver errors.
    
    All custom exceptions inherit from this class, making it easy
    to catch any error from the library.
    
    Attributes:
        message: Human-readable error message
        details: Optional additional error details
    """
    
    code: str = "E-PAGE-DRIVER"
    
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message
    
    def to_dict(self) -> dict:
        """Serialize the error for the driver status payload."""
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


class ConfigurationError(PageDriverError):
    """
    Error in configuration.
    
    Raised when there's an issue with settings, environment variables,
    or configuration files.
    """
    code = "E-CONFIGURATION"


class CommandValidationError(PageDriverError):
    """
    A command payload could not be turned into a command object.
    
    Raised by the command parser when the payload has an unknown type
    or fields that fail validation.
    """
    code = "E-COMMAND-VALIDATION"
    
    def __init__(self, message: str, command_type: str | None = None, errors: list | None = None):
        super().__init__(message, {"command_type": command_type, "errors": errors or []})
        self.command_type = command_type
        self.errors = errors or []
