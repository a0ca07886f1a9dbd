"""Shared identifiers and small value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["UeId", "DrbId", "Leg", "Endpoint"]

UeId = int
DrbId = int


class Leg(IntEnum):
    """Radio leg of a DAPS bearer."""

    SOURCE = 0
    TARGET = 1


@dataclass(frozen=True)
class Endpoint:
    """An IP address and port pair."""

    ip: str = ""
    port: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port}")