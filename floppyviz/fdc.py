"""Register state of a WD1793 floppy disk controller and its textual display."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

TITLE = "WD1793 FDC Status"
MINIMUM_SIZE = (300, 200)
SIZE_HINT = (300, 200)

_REGISTER_LABELS = {
    "status": "Status",
    "command": "Command",
    "track": "Track",
    "sector": "Sector",
    "data": "Data",
}


def format_binary(value: int) -> str:
    """Return the 8-bit value as eight binary digits, most significant first."""
    return f"{value & 0xFF:08b}"


def format_hex(value: int) -> str:
    """Return the 8-bit value as a two-digit lower-case hex literal."""
    return f"0x{value & 0xFF:02x}"


class RegisterRow(NamedTuple):
    """One register line of the controller display."""

    name: str
    value: int
    binary: str
    hex: str


class Indicator(NamedTuple):
    """A status lamp of the controller display."""

    name: str
    active: bool


@dataclass
class FdcState:
    """The five 8-bit controller registers plus the INT and DRQ lines.

    Register values are truncated to eight bits on assignment.
    """

    status: int = 0
    command: int = 0
    track: int = 0
    sector: int = 0
    data: int = 0
    interrupt: bool = False
    data_request: bool = False

    def __setattr__(self, name: str, value) -> None:
        if name in _REGISTER_LABELS:
            value = int(value) & 0xFF
        elif name in ("interrupt", "data_request"):
            value = bool(value)
        super().__setattr__(name, value)

    def register_rows(self) -> list[RegisterRow]:
        """Return the registers in display order with their formatted values."""
        return [
            RegisterRow(label, getattr(self, field), format_binary(getattr(self, field)),
                        format_hex(getattr(self, field)))
            for field, label in _REGISTER_LABELS.items()
        ]

    def indicators(self) -> list[Indicator]:
        """Return the interrupt and data-request indicators in display order."""
        return [
            Indicator("INT", self.interrupt),
            Indicator("DRQ", self.data_request),
        ]