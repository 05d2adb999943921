import re

from nicconfig.errors import invalid_prefix_length

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
DOTTED_QUAD_RE = re.compile(rf"{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}")


def prefix_to_mask(prefix_length: int) -> str:
    """Convert a CIDR prefix length (0-32) to a dotted-quad subnet mask."""
    if isinstance(prefix_length, bool) or not isinstance(prefix_length, int):
        raise invalid_prefix_length(prefix_length)
    if not 0 <= prefix_length <= 32:
        raise invalid_prefix_length(prefix_length)

    bits = (0xFFFFFFFF << (32 - prefix_length)) & 0xFFFFFFFF
    return ".".join(str((bits >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def is_valid_dotted_quad(value) -> bool:
    """
    True for a well-formed IPv4 dotted quad, or for a blank string (setting omitted).
    Never raises.
    """
    if not isinstance(value, str):
        return False
    if not value.strip():
        return True
    return DOTTED_QUAD_RE.fullmatch(value) is not None
