"""Exception hierarchy for CEPFinder."""

from typing import Optional


class CEPFinderError(Exception):
    """Base exception for all CEPFinder errors."""


class MissingInputError(CEPFinderError, ValueError):
    """Raised when a lookup has no postal code to query."""


class UnknownAttributeError(CEPFinderError, AttributeError):
    """Raised when a field name is not one of the recognized fields."""

    def __init__(self, name: str):
        super().__init__(f"Unknown attribute: {name!r}")
        self.name = name


class InvalidArgumentError(CEPFinderError, TypeError):
    """Raised when a setter receives other than exactly one value."""


class TransportError(CEPFinderError):
    """Raised when a lookup fails without a usable HTTP response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
