"""
Custom exceptions for the file manager.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class InvalidInputError(BaseAppError):
    """Exception raised for malformed commands or unusable arguments."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class OSInfoError(BaseAppError):
    """Exception raised when host information cannot be read."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
