"""Parser for the minimal GTP-U framing used on F1-U."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["G_PDU", "HEADER_LEN", "GtpuPdu", "parse_gtpu"]

G_PDU = 0xFF
HEADER_LEN = 8


@dataclass(frozen=True)
class GtpuPdu:
    """A G-PDU: tunnel endpoint id and its payload."""

    teid: int
    payload: bytes


def parse_gtpu(data: bytes) -> GtpuPdu | None:
    """Parse ``[flags msg_type len(2) teid(4)] payload``.

    Returns None for anything that is not a complete G-PDU.
    """
    if len(data) < HEADER_LEN:
        return None
    if data[1] != G_PDU:
        return None
    length = int.from_bytes(data[2:4], "big")
    if HEADER_LEN + length > len(data):
        return None
    teid = int.from_bytes(data[4:8], "big")
    return GtpuPdu(teid=teid, payload=bytes(data[HEADER_LEN:HEADER_LEN + length]))