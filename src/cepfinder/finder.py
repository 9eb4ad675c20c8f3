"""
Address record backed by the ViaCEP lookup service.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, Optional

import requests

from . import serializers
from .config import API_URL, FIELD_ALIASES, FIELDS, WIRE_TO_FIELD
from .exceptions import (
    InvalidArgumentError,
    MissingInputError,
    TransportError,
    UnknownAttributeError,
)

logger = logging.getLogger(__name__)


def _field(name: str) -> property:
    """Build a read/write property for a recognized field."""

    def getter(self: "AddressRecord") -> Optional[str]:
        return self._values[name]

    def setter(self: "AddressRecord", value: Optional[str]) -> None:
        self._values[name] = value

    return property(getter, setter, doc=f"ViaCEP '{FIELDS[name]}' value.")


def resolve_field(name: str) -> str:
    """
    Resolve a field name or alias to its canonical attribute name.

    Matching is case-insensitive and accepts both the attribute name
    (``postal_code``, ``postalCode``) and the ViaCEP key (``cep``).

    Raises:
        UnknownAttributeError: If the name is not a recognized field.

    Examples:
        >>> resolve_field("localidade")
        'city'
        >>> resolve_field("IbgeCode")
        'ibge_code'
    """
    key = str(name).lower()
    try:
        return FIELD_ALIASES[key]
    except KeyError:
        raise UnknownAttributeError(name) from None


class AddressRecord:
    """
    Address fields for one postal code, filled in by a ViaCEP lookup.

    Creating a record does not touch the network; call :meth:`lookup` to
    fetch the address. Fields can then be read through the typed properties,
    the name-keyed :meth:`get`/:meth:`set` pair, or the serializers.

    Args:
        postal_code: Postal code used when :meth:`lookup` gets no argument.
        session: HTTP session used for lookups. A new ``requests.Session``
                 is created when omitted.

    Examples:
        >>> record = AddressRecord("01001000")
        >>> record.lookup()  # doctest: +SKIP
        200
        >>> record.city  # doctest: +SKIP
        'São Paulo'
    """

    postal_code = _field("postal_code")
    street = _field("street")
    complement = _field("complement")
    neighborhood = _field("neighborhood")
    city = _field("city")
    state = _field("state")
    unit = _field("unit")
    ibge_code = _field("ibge_code")
    gia_code = _field("gia_code")

    def __init__(
        self,
        postal_code: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self._values: Dict[str, Optional[str]] = dict.fromkeys(FIELDS)
        self._values["postal_code"] = postal_code
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(postal_code={self.postal_code!r})"

    def __enter__(self) -> "AddressRecord":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this record created it."""
        if self._owns_session:
            self._session.close()

    def lookup(self, postal_code: Optional[str] = None) -> int:
        """
        Query ViaCEP and copy the returned address onto this record.

        Args:
            postal_code: Postal code to query. Falls back to the stored one
                         when empty or omitted.

        Returns:
            HTTP status code of the response. An error status (4xx/5xx) is
            returned as-is and leaves every field unchanged.

        Raises:
            MissingInputError: If no postal code is available.
            TransportError: If no response was received, or the body is not
                            a JSON object. Fields are left unchanged.
        """
        cep = postal_code or self.postal_code
        if not cep:
            raise MissingInputError("No postal code given for lookup.")

        url = API_URL.format(cep=cep)
        logger.debug("Requesting %s", url)

        try:
            response = self._session.get(url)
            response.raise_for_status()
        except requests.HTTPError as e:
            if e.response is None:
                raise TransportError(f"Lookup of {cep} failed: {e}") from e
            logger.warning(
                "Lookup of %s returned HTTP %s", cep, e.response.status_code
            )
            return e.response.status_code
        except requests.RequestException as e:
            raise TransportError(f"Lookup of {cep} failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON in response for {cep}", response.status_code
            ) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"Unexpected response for {cep}: expected a JSON object",
                response.status_code,
            )

        for key, value in payload.items():
            if key in WIRE_TO_FIELD:
                self._values[WIRE_TO_FIELD[key]] = value

        logger.debug("Lookup of %s returned HTTP %s", cep, response.status_code)
        return response.status_code

    @property
    def result(self) -> Dict[str, Optional[str]]:
        """Snapshot of all recognized fields, in fixed order."""
        return dict(self._values)

    def get(self, name: str) -> Optional[str]:
        """
        Return the value of a field by name.

        Raises:
            UnknownAttributeError: If ``name`` is not a recognized field.
        """
        return self._values[resolve_field(name)]

    def set(self, name: str, *values: Any) -> None:
        """
        Set the value of a field by name.

        Raises:
            UnknownAttributeError: If ``name`` is not a recognized field.
            InvalidArgumentError: If not given exactly one value.
        """
        field = resolve_field(name)
        if len(values) != 1:
            raise InvalidArgumentError(
                f"set() takes exactly one value for {name!r} ({len(values)} given)"
            )
        self._values[field] = values[0]

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Return a copy of the result snapshot."""
        return self.result

    def to_json(self) -> str:
        """Serialize the result snapshot as a JSON object."""
        return serializers.to_json(self.result)

    def to_xml(self) -> ET.Element:
        """Serialize the result snapshot as an XML element rooted at ``<localidade>``."""
        return serializers.to_xml(self.result)

    def to_xml_string(self) -> str:
        """Render the result snapshot as an XML document with declaration."""
        return serializers.to_xml_string(self.result)
