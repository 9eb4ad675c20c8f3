"""
CEPFinder - Brazilian postal code (CEP) lookup client

Queries the ViaCEP web service and exposes the address as typed fields,
JSON or XML.
"""

from .exceptions import (
    CEPFinderError,
    InvalidArgumentError,
    MissingInputError,
    TransportError,
    UnknownAttributeError,
)
from .finder import AddressRecord, resolve_field

__version__ = "0.1.0"

__all__ = [
    "AddressRecord",
    "resolve_field",
    "CEPFinderError",
    "InvalidArgumentError",
    "MissingInputError",
    "TransportError",
    "UnknownAttributeError",
]
