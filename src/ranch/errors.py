class RanchError(Exception):
    """Base error for ranch domain exceptions."""


class InvalidInputError(RanchError, ValueError):
    """Raised when user input cannot be parsed into the expected value."""


class SettingsError(RanchError):
    """Raised when a settings file or roster entry is malformed."""
