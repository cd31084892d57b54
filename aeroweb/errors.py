"""Aeroweb client exceptions."""


class AerowebError(Exception):
    """Base exception for all Aeroweb client errors."""


class InvalidOptionsError(AerowebError):
    """Raised before any request when an option set breaks a cardinality bound."""


class DeserializeError(AerowebError):
    """Raised when a response body does not match the endpoint schema."""


class FetchError(AerowebError):
    """Raised when the HTTP exchange itself fails (network, timeout, status)."""


class InvalidApiKeyError(AerowebError):
    """Raised when the provider answers with its credential rejection marker."""

    def __init__(self) -> None:
        super().__init__("The API key was rejected by the provider")
