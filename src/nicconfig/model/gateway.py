"""
gateway.py
----------
Runs one PowerShell command and hands back the raw result.

No interpretation of content and no retries. A process that cannot be
started raises ``GatewayLaunchFailure``; a process that ran and exited
non-zero comes back as ``CommandResult(success=False)`` so that each caller
decides whether the failure is fatal.
"""

import logging
import subprocess
from typing import List, Optional, Protocol

import psutil

from nicconfig.config import Settings
from nicconfig.errors import gateway_launch_failure, gateway_timeout
from nicconfig.model.models import CommandResult

LOG = logging.getLogger(__name__)

# Adapter names can fall outside the console code page; force UTF-8 so that
# mis-decoding shows up as U+FFFD downstream instead of failing.
UTF8_PRELUDE = (
    "$OutputEncoding = [System.Text.Encoding]::UTF8; "
    "[Console]::OutputEncoding = [System.Text.Encoding]::UTF8; "
)

# Keeps a console window from flashing up when called from a desktop app.
_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0)


class CommandGateway(Protocol):
    def run(self, command: str) -> CommandResult:
        ...


class PowerShellGateway:
    """Executes commands through ``powershell -Command``."""

    def __init__(self, executable: str = "powershell", timeout: Optional[float] = None):
        self.executable = executable
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "PowerShellGateway":
        return cls(executable=settings.powershell_executable, timeout=settings.command_timeout_seconds)

    def argv(self, command: str) -> List[str]:
        return [self.executable, "-NoProfile", "-NonInteractive", "-Command", UTF8_PRELUDE + command]

    def run(self, command: str) -> CommandResult:
        LOG.debug("Running command: %s", command)
        try:
            proc = subprocess.Popen(
                self.argv(command),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                creationflags=_CREATION_FLAGS,
            )
        except OSError as e:
            raise gateway_launch_failure(command, e) from e

        try:
            stdout, stderr = proc.communicate(timeout=self.timeout)
        except subprocess.TimeoutExpired:
            kill_process_tree(proc.pid)
            proc.communicate()
            raise gateway_timeout(command, self.timeout)

        if proc.returncode != 0:
            LOG.debug("Command exited with %s", proc.returncode)
        return CommandResult(
            command=command,
            success=proc.returncode == 0,
            returncode=proc.returncode,
            stdout=stdout or b"",
            stderr=stderr or b"",
        )


def kill_process_tree(pid: int) -> None:
    """Kill ``pid`` and every descendant (netsh runs as a child of PowerShell)."""
    try:
        parent = psutil.Process(pid)
        procs = parent.children(recursive=True) + [parent]
    except psutil.NoSuchProcess:
        return

    for p in procs:
        try:
            p.kill()
        except psutil.NoSuchProcess:
            pass
    _, alive = psutil.wait_procs(procs, timeout=5)
    for p in alive:
        LOG.warning("Process %s did not exit after kill", p.pid)
