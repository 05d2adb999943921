"""
commands.py
-----------
PowerShell / netsh command text for every query and mutation the manager issues.

Adapter names are user-visible strings and are never trusted: each one is
embedded as a PowerShell single-quoted literal, inside which nothing is
expanded and the only special characters are the quotes themselves.
Addresses are only interpolated after they have passed dotted-quad validation.
"""

# PowerShell treats the typographic single quotes as quote characters too.
_PS_SINGLE_QUOTES = ("'", "\u2018", "\u2019", "\u201a", "\u201b")


def ps_quote(value: str) -> str:
    """Return ``value`` as one PowerShell single-quoted literal token."""
    escaped = "".join(ch + ch if ch in _PS_SINGLE_QUOTES else ch for ch in value)
    return f"'{escaped}'"


# ------------------------------------------------------------
# Queries
# ------------------------------------------------------------
def list_adapters_command() -> str:
    return "Get-NetAdapter | Select-Object Name, Status, InterfaceDescription | ConvertTo-Json -Compress"


def address_query_command(adapter: str) -> str:
    return (
        f"Get-NetIPAddress -InterfaceAlias {ps_quote(adapter)} -AddressFamily IPv4 "
        "| Select-Object IPAddress, PrefixLength | ConvertTo-Json -Compress"
    )


def next_hop_query_command(adapter: str) -> str:
    return (
        f"Get-NetRoute -InterfaceAlias {ps_quote(adapter)} -DestinationPrefix '0.0.0.0/0' "
        "| Select-Object -ExpandProperty NextHop"
    )


def dns_query_command(adapter: str) -> str:
    return (
        f"Get-DnsClientServerAddress -InterfaceAlias {ps_quote(adapter)} -AddressFamily IPv4 "
        "| Select-Object -ExpandProperty ServerAddresses"
    )


# ------------------------------------------------------------
# Mutations (netsh, run through the same interpreter)
# ------------------------------------------------------------
def set_address_command(adapter: str, address: str, mask: str, gateway: str = "") -> str:
    cmd = f"netsh interface ip set address name={ps_quote(adapter)} static {address} {mask}"
    if gateway.strip():
        cmd += f" {gateway}"
    return cmd


def set_primary_dns_command(adapter: str, dns: str) -> str:
    return f"netsh interface ip set dns name={ps_quote(adapter)} static {dns}"


def add_secondary_dns_command(adapter: str, dns: str, index: int = 2) -> str:
    return f"netsh interface ip add dns name={ps_quote(adapter)} {dns} index={index}"
