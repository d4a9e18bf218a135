"""Custom exception hierarchy for searchprep."""


class SearchPrepError(Exception):
    """Base exception for all searchprep errors."""


class InvalidArgumentError(SearchPrepError):
    """A required argument was missing or of the wrong shape."""


class ConfigurationError(SearchPrepError):
    """Error in system configuration."""
