"""
handlers.py
-----------
Request/response entry points for the UI layer.

Each handler runs one manager operation and returns a plain dict:

    {"success": True, "data": ...}
    {"success": False, "error": {"type", "code", "message", "context"}}

so that a front end can render a specific message from ``error["type"]``
without catching exceptions itself.
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import ValidationError

from nicconfig.controller.manager import AdapterConfigManager
from nicconfig.errors import InvalidRequest, NicConfigError
from nicconfig.model.gateway import CommandGateway
from nicconfig.model.models import Ipv4Configuration


def _ok(data: Any) -> Dict[str, Any]:
    return {"success": True, "data": data}


def _failed(err: NicConfigError) -> Dict[str, Any]:
    return {"success": False, "error": err.to_dict()}


def get_network_adapters(gateway: Optional[CommandGateway] = None) -> Dict[str, Any]:
    try:
        adapters = AdapterConfigManager(gateway).list_adapters()
    except NicConfigError as e:
        return _failed(e)
    return _ok([a.model_dump() for a in adapters])


def get_current_config(adapter_id: str, gateway: Optional[CommandGateway] = None) -> Dict[str, Any]:
    try:
        config = AdapterConfigManager(gateway).read_config(adapter_id)
    except NicConfigError as e:
        return _failed(e)
    return _ok(config.model_dump())


def apply_adapter_ipv4_config(
    payload: Union[Ipv4Configuration, Mapping[str, Any]],
    gateway: Optional[CommandGateway] = None,
) -> Dict[str, Any]:
    """Apply a configuration given as a model or as the UI's field mapping (``ip`` is accepted for ``address``)."""
    try:
        if isinstance(payload, Ipv4Configuration):
            desired = payload
        else:
            try:
                desired = Ipv4Configuration.model_validate(payload)
            except ValidationError as e:
                fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
                raise InvalidRequest(code=36, msg="Configuration request is malformed", context={"fields": fields}) from e
        confirmation = AdapterConfigManager(gateway).apply_config(desired)
    except NicConfigError as e:
        return _failed(e)
    return _ok(confirmation.model_dump())
