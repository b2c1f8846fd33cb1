"""
Custom exceptions for the scoped variable store.
"""


class VariableNameError(ValueError):
    """Raised when a variable is created or set with an empty or whitespace name."""

    pass


class ConfigurationError(Exception):
    """Raised when a variables snapshot file cannot be read or is malformed."""

    pass
