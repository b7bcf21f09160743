"""Custom exception hierarchy for itbi-declaration."""


class DeclarationError(Exception):
    """Base exception for all itbi-declaration errors."""


class ConfigurationError(DeclarationError):
    """Raised when configuration is invalid or missing."""


class UnknownFieldError(DeclarationError):
    """Raised when a form field name does not exist."""


class InvalidFieldValueError(DeclarationError):
    """Raised when a value can never be stored in a field."""


class InvalidStepError(DeclarationError):
    """Raised when navigating to a step outside the wizard."""


class ExportNotAllowedError(DeclarationError):
    """Raised when an export is requested while it is disabled."""


class ConsentRequiredError(ExportNotAllowedError):
    """Raised when exporting before the declarant gave consent."""


class ExportInProgressError(ExportNotAllowedError):
    """Raised when an export is requested while another one runs."""


class ExportError(DeclarationError):
    """Raised when the document engine fails to produce the artifact."""
