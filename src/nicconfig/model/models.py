"""
models.py
---------
Typed records exchanged between the gateway, the parser and the manager.

All models are frozen: a configuration read from the OS or built from user
input is never mutated after construction.
"""

from __future__ import annotations

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class AdapterSummary(BaseModel):
    """One enumerated adapter, as shown in an adapter picker."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Interface alias; the key used by every other command.")
    display_label: str = Field(..., description="Human-friendly '<name> (<status>)' label.")


class Ipv4Configuration(BaseModel):
    """
    IPv4 settings of a single adapter.

    ``gateway``, ``dns1`` and ``dns2`` are empty when the setting is not
    configured (read) or should be left out (apply). ``dns2`` is only applied
    together with ``dns1``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    adapter: str = ""
    address: str = Field(default="", validation_alias=AliasChoices("address", "ip"))
    mask: str = ""
    gateway: str = ""
    dns1: str = ""
    dns2: str = ""


class ApplyConfirmation(BaseModel):
    model_config = ConfigDict(frozen=True)

    adapter: str
    steps: List[str] = Field(default_factory=list, description="Apply steps that ran, in order.")
    message: str = "IPv4 configuration applied"


class CommandResult(BaseModel):
    """Raw outcome of one external command. No interpretation of content."""

    model_config = ConfigDict(frozen=True)

    command: str
    success: bool
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def stdout_text(self) -> str:
        # Mis-encoded bytes become U+FFFD instead of raising.
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")

    @property
    def error_text(self) -> str:
        """stderr, or stdout when the tool reported its failure there (netsh does)."""
        return self.stderr_text.strip() or self.stdout_text.strip()
