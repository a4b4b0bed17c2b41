"""Centralized exception classes for template-manager.

This module provides a hierarchy of exceptions for loading the template
catalog and for the presentation helpers built on top of it. Queries against
a built catalog never raise.
"""


class TemplateManagerError(Exception):
    """Base exception for all template-manager errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: User-friendly error message.
            details: Additional technical details for debugging.
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigurationError(TemplateManagerError):
    """Raised when configuration is missing or invalid."""

    pass


class ManifestError(ConfigurationError):
    """Raised when a manifest file cannot be read or validated."""

    pass


class FetchError(TemplateManagerError):
    """Raised when a content source cannot retrieve a path.

    The loader treats this as a per-row failure: the row is dropped and
    the load carries on with the rest of the manifest.
    """

    def __init__(self, path: str, message: str, details: str | None = None):
        super().__init__(message, details)
        self.path = path


class TemplateNotFoundError(TemplateManagerError, KeyError):
    """Raised when a template id is not in the catalog."""

    def __str__(self) -> str:
        return TemplateManagerError.__str__(self)


class ClipboardError(TemplateManagerError):
    """Raised when the system clipboard cannot be written."""

    pass
