"""Parser for the compact F1-C control message format."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["CtrlMsgType", "CtrlMsg", "parse_ctrl_msg"]

_MSG_LEN = 6


class CtrlMsgType(IntEnum):
    """Control message kinds."""

    UE_CONTEXT_SETUP = 0
    RRC_RECONFIG = 1
    DAPS_START = 2
    DAPS_SWITCH_TO_TARGET = 3
    DAPS_END = 4


@dataclass(frozen=True)
class CtrlMsg:
    """A control message; ``type`` stays a plain int when it is not a known kind."""

    type: CtrlMsgType | int
    ue: int
    drb: int = 1


def parse_ctrl_msg(data: bytes) -> CtrlMsg | None:
    """Parse ``[type(1) ue(4) drb(1)]``; returns None when too short."""
    if len(data) < _MSG_LEN:
        return None
    raw_type = data[0]
    try:
        msg_type: CtrlMsgType | int = CtrlMsgType(raw_type)
    except ValueError:
        msg_type = raw_type
    ue = int.from_bytes(data[1:5], "big")
    return CtrlMsg(type=msg_type, ue=ue, drb=data[5])