"""
errors.py
---------
Error taxonomy for adapter configuration.

Every failure the manager can report is a ``NicConfigError`` subclass carrying a
stable ``code`` (also used as the CLI exit status), a user-facing ``msg`` and a
``context`` dict that the request handlers serialize for the UI.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(eq=False)
class NicConfigError(Exception):
    code: int = 1
    msg: str = "error"
    cause: Optional[BaseException] = None
    context: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.msg = (self.msg or "").strip() or self.__class__.__name__
        super().__init__(self.msg)
        self.args = (self.msg,)

    def user_message(self, *, include_cause: bool = False) -> str:
        if include_cause and self.cause is not None:
            return f"{self.msg} (cause: {type(self.cause).__name__}: {self.cause})"
        return self.msg

    def __str__(self) -> str:
        return self.user_message()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "code": self.code,
            "message": self.msg,
            "context": dict(self.context or {}),
        }


# ------------------------------------------------------------
# External command failures
# ------------------------------------------------------------
class GatewayError(NicConfigError):
    """An external command could not be run or reported failure."""


class GatewayLaunchFailure(GatewayError):
    """The OS could not start the command interpreter."""


class GatewayTimeout(GatewayError):
    """The command started but ran past the configured deadline; its process tree was killed."""


class GatewayNonZeroExit(GatewayError):
    """The command ran but exited with a non-zero status."""


class UnparseableOutput(NicConfigError):
    """Command output matched neither the structured nor the line-oriented form."""


class InvalidPrefixLength(NicConfigError):
    pass


# ------------------------------------------------------------
# Validation failures (raised before any command is issued)
# ------------------------------------------------------------
class ConfigValidationError(NicConfigError):
    pass


class MissingAdapter(ConfigValidationError):
    pass


class InvalidAddress(ConfigValidationError):
    pass


class InvalidMask(ConfigValidationError):
    pass


class InvalidGateway(ConfigValidationError):
    pass


class InvalidDns1(ConfigValidationError):
    pass


class InvalidDns2(ConfigValidationError):
    pass


class InvalidRequest(ConfigValidationError):
    pass


class InvalidSettings(NicConfigError):
    """A NICCONFIG_* environment or .env value failed validation."""


class ApplyStepFailure(NicConfigError):
    """
    One step of an apply sequence failed.

    Steps that completed before the failure stay applied; ``step`` names the
    one that failed and ``command`` is the exact text that was executed.
    """

    def __init__(self, step: str, detail: str, command: str = "", cause: Optional[BaseException] = None):
        self.step = step
        self.detail = detail
        self.command = command
        super().__init__(
            code=40,
            msg=f"{step} step failed: {detail.strip() or 'no error output'}",
            cause=cause,
            context={"step": step, "command": command},
        )


def gateway_launch_failure(command: str, exc: BaseException) -> GatewayLaunchFailure:
    return GatewayLaunchFailure(
        code=10, msg=f"Failed to launch command interpreter: {exc}", cause=exc, context={"command": command}
    )


def gateway_timeout(command: str, timeout_s: float) -> GatewayTimeout:
    return GatewayTimeout(
        code=11, msg=f"Command timed out after {timeout_s:g}s", context={"command": command, "timeout": timeout_s}
    )


def gateway_non_zero_exit(command: str, returncode: int, stderr: str) -> GatewayNonZeroExit:
    return GatewayNonZeroExit(
        code=12,
        msg=f"Command failed with exit code {returncode}: {stderr.strip() or 'no error output'}",
        context={"command": command, "returncode": returncode, "stderr": stderr},
    )


def unparseable_output(raw: str, what: str = "command output") -> UnparseableOutput:
    return UnparseableOutput(code=20, msg=f"Could not parse {what}", context={"raw": raw})


def invalid_prefix_length(value: Any) -> InvalidPrefixLength:
    return InvalidPrefixLength(code=21, msg=f"Invalid subnet prefix length: {value!r}", context={"prefix_length": value})
