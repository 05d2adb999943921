"""
parser.py
---------
Turns raw PowerShell output into typed records.

Two output shapes are handled:

* structured listings (``ConvertTo-Json``), which are a JSON array of
  records, or a bare object when exactly one record exists;
* line-oriented listings (``-ExpandProperty``), one value per non-empty line.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from nicconfig.errors import unparseable_output
from nicconfig.model.models import AdapterSummary

LOG = logging.getLogger(__name__)

REPLACEMENT_CHAR = "\ufffd"


def _decode_json(text: str, what: str) -> Any:
    # Windows PowerShell may prefix UTF-8 console output with a BOM.
    cleaned = text.lstrip("\ufeff").strip()
    try:
        return json.loads(cleaned)
    except ValueError as e:
        raise unparseable_output(text, what) from e


def parse_structured_listing(text: str, what: str = "structured listing") -> List[Dict[str, Any]]:
    """
    Return the records of a ``ConvertTo-Json`` listing.

    An array of records is tried first, then a single bare object; anything
    else raises ``UnparseableOutput`` carrying the raw text.
    """
    data = _decode_json(text, what)
    if isinstance(data, list):
        return [record for record in data if isinstance(record, dict)]
    if isinstance(data, dict):
        return [data]
    raise unparseable_output(text, what)


# ------------------------------------------------------------
# Adapter enumeration
# ------------------------------------------------------------
def friendly_label(name: str, status: str, description: str = "") -> str:
    """
    '<name> (<status>)', or '<description> (<status>)' when the short name
    came back garbled (contains U+FFFD).
    """
    if REPLACEMENT_CHAR in name:
        return f"{description or name} ({status})"
    return f"{name} ({status})"


def _adapter_summary(record: Dict[str, Any]) -> Optional[AdapterSummary]:
    name = record.get("Name")
    status = record.get("Status")
    if not isinstance(name, str) or not isinstance(status, str):
        return None
    description = record.get("InterfaceDescription")
    if not isinstance(description, str):
        description = name
    return AdapterSummary(id=name, display_label=friendly_label(name, status, description))


def parse_adapter_listing(text: str) -> List[AdapterSummary]:
    data = _decode_json(text, "adapter listing")

    if isinstance(data, list):
        adapters = []
        for record in data:
            summary = _adapter_summary(record) if isinstance(record, dict) else None
            if summary is None:
                LOG.debug("Skipping adapter record without Name/Status: %r", record)
                continue
            adapters.append(summary)
        return adapters

    if isinstance(data, dict):
        summary = _adapter_summary(data)
        if summary is not None:
            return [summary]

    raise unparseable_output(text, "adapter listing")


# ------------------------------------------------------------
# IPv4 address query
# ------------------------------------------------------------
def parse_address(text: str) -> Tuple[str, int]:
    """Return (IPAddress, PrefixLength) from the first record of an address listing."""
    records = parse_structured_listing(text, "IPv4 address listing")
    if not records:
        raise unparseable_output(text, "IPv4 address listing")

    first = records[0]
    address = first.get("IPAddress")
    prefix = first.get("PrefixLength")
    if not isinstance(address, str) or not address:
        raise unparseable_output(text, "IPv4 address")
    if isinstance(prefix, bool) or not isinstance(prefix, int):
        raise unparseable_output(text, "subnet prefix length")
    return address, prefix


# ------------------------------------------------------------
# Line-oriented listings
# ------------------------------------------------------------
def parse_lines(text: str) -> List[str]:
    """Each non-empty trimmed line is one value; empty output is an empty list."""
    return [line.strip() for line in text.lstrip("\ufeff").splitlines() if line.strip()]
