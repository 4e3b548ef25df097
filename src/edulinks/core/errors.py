class EdulinksError(Exception):
    """Base error for all user-facing edulinks exceptions."""


class ConfigurationError(EdulinksError):
    """Raised when configuration is invalid or incomplete."""


class StoreError(EdulinksError):
    """Raised when the record directory cannot be read or written."""


class LinkImportError(EdulinksError):
    """Raised when a bulk import file cannot be loaded."""


class InvalidLinkError(EdulinksError):
    """Raised when a new link is missing its title or URL."""
