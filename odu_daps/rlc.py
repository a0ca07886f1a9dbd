"""Simplified RLC entities: SDU buffering and segmentation per bearer leg."""

from __future__ import annotations

import threading
from collections import deque
from typing import NamedTuple

from odu_daps.common import Leg

__all__ = ["RlcEntity", "BearerKey", "RlcBearer"]


class RlcEntity:
    """A transmit queue of SDUs that hands out MAC-sized chunks."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sn = 0
        self._tx_queue: deque[bytes] = deque()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tx_queue)

    def rx_sdu(self, sdu: bytes) -> None:
        """Queue one SDU for transmission."""
        with self._lock:
            self._tx_queue.append(bytes(sdu))
            self._sn += 1

    def pop_for_mac_pdu(self, max_bytes: int) -> bytes:
        """Take up to ``max_bytes`` from the head SDU, segmenting if needed."""
        with self._lock:
            if not self._tx_queue:
                return b""
            front = self._tx_queue[0]
            if len(front) <= max_bytes:
                return self._tx_queue.popleft()
            self._tx_queue[0] = front[max_bytes:]
            return front[:max_bytes]

    def flush(self) -> None:
        """Discard everything queued."""
        with self._lock:
            self._tx_queue.clear()


class BearerKey(NamedTuple):
    """Identifies one leg of one radio bearer of one UE."""

    ue: int
    drb: int
    leg: Leg


class RlcBearer:
    """All RLC entities of the DU, keyed by UE, DRB and leg."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entities: dict[BearerKey, RlcEntity] = {}

    def _get_or_create(self, ue: int, drb: int, leg: Leg) -> RlcEntity:
        key = BearerKey(ue, drb, Leg(leg))
        entity = self._entities.get(key)
        if entity is None:
            entity = self._entities[key] = RlcEntity()
        return entity

    def rx_downlink_sdu(self, ue: int, drb: int, leg: Leg, sdu: bytes) -> None:
        """Queue a downlink SDU on the given leg."""
        with self._lock:
            self._get_or_create(ue, drb, leg).rx_sdu(sdu)

    def build_mac_pdu(self, ue: int, drb: int, leg: Leg, max_bytes: int) -> bytes:
        """Pull up to ``max_bytes`` for the MAC from the given leg."""
        with self._lock:
            return self._get_or_create(ue, drb, leg).pop_for_mac_pdu(max_bytes)

    def flush_source_buffers(self, ue: int, drb: int) -> None:
        """Drop everything queued on the source leg of a bearer."""
        with self._lock:
            entity = self._entities.get(BearerKey(ue, drb, Leg.SOURCE))
            if entity is not None:
                entity.flush()