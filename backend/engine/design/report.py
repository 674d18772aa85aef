"""Validation report and its ordered diagnostics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .current import CurrentCheck
from .loading import RatioStatus
from .stringing import ElectricalConfig
from .voltage import VoltageLimits


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUCCESS = "success"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"severity": self.severity.value, "text": self.text}


class DiagnosticLog:
    """Accumulates diagnostics in order while a design is being checked."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []

    def error(self, text: str) -> None:
        self._items.append(Diagnostic(Severity.ERROR, text))

    def warning(self, text: str) -> None:
        self._items.append(Diagnostic(Severity.WARNING, text))

    def success(self, text: str) -> None:
        self._items.append(Diagnostic(Severity.SUCCESS, text))

    def freeze(self) -> tuple[Diagnostic, ...]:
        return tuple(self._items)


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of the electrical checks.

    ``is_valid`` is False only for hard blockers: inverted voltage limits
    or an unsolvable string distribution.  Current overload and loading
    imbalance appear as warnings in ``messages``.
    """

    is_valid: bool
    ac_dc_ratio: float
    ratio_status: RatioStatus
    electrical_config: tuple[ElectricalConfig, ...]
    voltage_check: VoltageLimits
    current_check: CurrentCheck
    messages: tuple[Diagnostic, ...]

    def messages_with(self, severity: Severity) -> list[Diagnostic]:
        return [m for m in self.messages if m.severity == severity]

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "ac_dc_ratio": self.ac_dc_ratio,
            "ratio_status": self.ratio_status.value,
            "electrical_config": [c.to_dict() for c in self.electrical_config],
            "voltage_check": self.voltage_check.to_dict(),
            "current_check": self.current_check.to_dict(),
            "messages": [m.to_dict() for m in self.messages],
        }
