"""
Serialization of address snapshots to JSON and XML.
"""

import json
import re
import xml.etree.ElementTree as ET
from typing import Any, Iterable, Mapping, Tuple

from .config import XML_ROOT_TAG

_NUMERIC = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def to_json(data: Mapping[str, Any]) -> str:
    """
    Serialize a snapshot mapping as a JSON object.

    Args:
        data: Mapping of field name to value.

    Returns:
        JSON text with keys in the mapping's order.

    Examples:
        >>> to_json({"city": "São Paulo", "unit": None})
        '{"city": "São Paulo", "unit": null}'
    """
    return json.dumps(dict(data), ensure_ascii=False)


def to_xml(data: Mapping[str, Any], root_tag: str = XML_ROOT_TAG) -> ET.Element:
    """
    Convert a snapshot mapping to an XML element tree.

    Each entry becomes a child element named after its key. Nested mappings
    and sequences are converted recursively; numeric keys and sequence
    indexes become elements named ``item<index>``.

    Args:
        data: Mapping of field name to value.
        root_tag: Tag of the root element.

    Returns:
        Root element of the document.

    Examples:
        >>> root = to_xml({"city": "São Paulo"})
        >>> root.find("city").text
        'São Paulo'
    """
    root = ET.Element(root_tag)
    _append_children(root, _items(data))
    return root


def to_xml_string(data: Mapping[str, Any], root_tag: str = XML_ROOT_TAG) -> str:
    """Render a snapshot mapping as an XML document with declaration."""
    root = to_xml(data, root_tag)
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0"?>\n{body}\n'


def _items(value: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _is_numeric(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    return bool(_NUMERIC.match(str(key).strip()))


def _append_children(parent: ET.Element, items: Iterable[Tuple[Any, Any]]) -> None:
    for key, value in items:
        tag = f"item{key}" if _is_numeric(key) else str(key)

        if _is_container(value):
            _append_children(ET.SubElement(parent, tag), _items(value))
        else:
            child = ET.SubElement(parent, tag)
            child.text = "" if value is None else str(value)
