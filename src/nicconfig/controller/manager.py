"""
manager.py
----------
Lists adapters, reads an adapter's IPv4 configuration and applies a new one.

Every operation is a short, strictly sequential run of gateway commands. The
manager keeps no state between calls and takes no locks: callers must not
configure the same adapter from two threads at once.

Applying is not transactional. If the address step succeeds and a DNS step
fails, the new address stays in place and the DNS step's failure is reported.
"""

import logging
from typing import List, Optional

from nicconfig.config import get_settings
from nicconfig.errors import (
    ApplyStepFailure,
    GatewayError,
    MissingAdapter,
    gateway_non_zero_exit,
)
from nicconfig.model import commands, parser
from nicconfig.model.gateway import CommandGateway, PowerShellGateway
from nicconfig.model.models import AdapterSummary, ApplyConfirmation, CommandResult, Ipv4Configuration
from nicconfig.model.subnet import prefix_to_mask
from nicconfig.model.validator import validate_config

LOG = logging.getLogger(__name__)

STEP_ADDRESS = "Address"
STEP_PRIMARY_DNS = "PrimaryDns"
STEP_SECONDARY_DNS = "SecondaryDns"


class AdapterConfigManager:
    def __init__(self, gateway: Optional[CommandGateway] = None):
        self.gateway = gateway if gateway is not None else PowerShellGateway.from_settings(get_settings())

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------
    def _run_checked(self, command: str) -> CommandResult:
        """Run a command whose failure is fatal to the current operation."""
        result = self.gateway.run(command)
        if not result.success:
            raise gateway_non_zero_exit(command, result.returncode, result.error_text)
        return result

    def _run_best_effort(self, command: str, what: str) -> Optional[CommandResult]:
        """Run an enrichment query; any failure is logged and yields None."""
        try:
            result = self.gateway.run(command)
        except GatewayError as e:
            LOG.warning("Could not query %s: %s", what, e)
            return None
        if not result.success:
            LOG.warning("Could not query %s: %s", what, result.error_text or f"exit code {result.returncode}")
            return None
        return result

    # ------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------
    def list_adapters(self) -> List[AdapterSummary]:
        result = self._run_checked(commands.list_adapters_command())
        adapters = parser.parse_adapter_listing(result.stdout_text)
        LOG.info("Found %d adapters", len(adapters))
        return adapters

    def read_config(self, adapter_id: str) -> Ipv4Configuration:
        """
        Read the live IPv4 configuration of one adapter.

        Address and mask are mandatory; the gateway and DNS lookups are best
        effort and come back empty when they fail.
        """
        if not adapter_id or not adapter_id.strip():
            raise MissingAdapter(code=30, msg="Select a network adapter")

        result = self._run_checked(commands.address_query_command(adapter_id))
        address, prefix = parser.parse_address(result.stdout_text)
        mask = prefix_to_mask(prefix)

        gateway = ""
        route = self._run_best_effort(commands.next_hop_query_command(adapter_id), "default gateway")
        if route is not None:
            hops = parser.parse_lines(route.stdout_text)
            gateway = hops[0] if hops else ""

        dns = []
        servers = self._run_best_effort(commands.dns_query_command(adapter_id), "DNS servers")
        if servers is not None:
            dns = parser.parse_lines(servers.stdout_text)[:2]

        return Ipv4Configuration(
            adapter=adapter_id,
            address=address,
            mask=mask,
            gateway=gateway,
            dns1=dns[0] if len(dns) > 0 else "",
            dns2=dns[1] if len(dns) > 1 else "",
        )

    def apply_config(self, desired: Ipv4Configuration) -> ApplyConfirmation:
        validate_config(desired)

        adapter = desired.adapter
        steps: List[str] = []

        self._apply_step(
            STEP_ADDRESS,
            commands.set_address_command(adapter, desired.address, desired.mask, desired.gateway.strip()),
        )
        steps.append(STEP_ADDRESS)

        if desired.dns1.strip():
            self._apply_step(STEP_PRIMARY_DNS, commands.set_primary_dns_command(adapter, desired.dns1))
            steps.append(STEP_PRIMARY_DNS)

            if desired.dns2.strip():
                self._apply_step(STEP_SECONDARY_DNS, commands.add_secondary_dns_command(adapter, desired.dns2))
                steps.append(STEP_SECONDARY_DNS)
        elif desired.dns2.strip():
            LOG.warning("Secondary DNS server ignored because no primary DNS server was given")

        return ApplyConfirmation(adapter=adapter, steps=steps)

    def _apply_step(self, step: str, command: str) -> None:
        try:
            result = self.gateway.run(command)
        except GatewayError as e:
            raise ApplyStepFailure(step, e.msg, command, cause=e) from e
        if not result.success:
            raise ApplyStepFailure(step, result.error_text or f"exit code {result.returncode}", command)
        LOG.info("%s step applied", step)
