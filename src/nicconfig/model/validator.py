from nicconfig.errors import (
    InvalidAddress,
    InvalidDns1,
    InvalidDns2,
    InvalidGateway,
    InvalidMask,
    MissingAdapter,
)
from nicconfig.model.models import Ipv4Configuration
from nicconfig.model.subnet import is_valid_dotted_quad

_FORMAT_HINT = "use the xxx.xxx.xxx.xxx format"


def validate_config(config: Ipv4Configuration) -> None:
    """
    Check a desired configuration before anything is applied.

    Raises the first failing check, in field order. Address and mask are
    required; gateway and DNS servers may be left empty. No cross-field checks.
    """
    if not config.adapter.strip():
        raise MissingAdapter(code=30, msg="Select a network adapter")

    if not config.address.strip():
        raise InvalidAddress(code=31, msg="IP address must not be empty", context={"field": "address"})
    if not is_valid_dotted_quad(config.address):
        raise InvalidAddress(code=31, msg=f"IP address is malformed, {_FORMAT_HINT}", context={"field": "address"})

    if not config.mask.strip():
        raise InvalidMask(code=32, msg="Subnet mask must not be empty", context={"field": "mask"})
    if not is_valid_dotted_quad(config.mask):
        raise InvalidMask(code=32, msg=f"Subnet mask is malformed, {_FORMAT_HINT}", context={"field": "mask"})

    optional = (
        ("gateway", InvalidGateway, 33, "Gateway address"),
        ("dns1", InvalidDns1, 34, "Primary DNS server"),
        ("dns2", InvalidDns2, 35, "Secondary DNS server"),
    )
    for field, error, code, label in optional:
        if not is_valid_dotted_quad(getattr(config, field)):
            raise error(code=code, msg=f"{label} is malformed, {_FORMAT_HINT} or leave it empty", context={"field": field})
