"""Base exceptions for boardplacer."""


class BoardPlacerError(Exception):
    """Base exception for all boardplacer errors."""


class ConfigurationError(BoardPlacerError):
    """Invocation configuration is invalid. Raised before any remote call."""


class InvalidProjectUrlError(ConfigurationError):
    """Project URL does not match the expected GitHub project URL format."""


class UnsupportedOwnerTypeError(ConfigurationError):
    """Project URL owner type is neither 'orgs' nor 'users'."""


class MissingInputError(ConfigurationError):
    """A required action input was not provided."""
