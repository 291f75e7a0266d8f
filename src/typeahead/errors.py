"""Exceptions raised by typeahead."""


class TypeaheadError(Exception):
    """Base class for typeahead errors."""


class FetchError(TypeaheadError):
    """Raised when the suggestion endpoint answers with a non-success status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Server responded with status {status}")
        self.status = status


class ConfigError(TypeaheadError):
    """Raised when a configuration file cannot be read."""
