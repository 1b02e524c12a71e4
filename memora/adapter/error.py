"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class TagSuggestionError(ProviderError):
    """The tag suggestion service failed or answered with garbage."""

    pass


class MediaStorageError(AdapterError):
    """Reading or writing stored media failed."""

    pass
