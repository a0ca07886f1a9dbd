"""Per-UE contexts and the registry that maps F1-U tunnels to UEs."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from odu_daps import log

__all__ = ["DapsBearerState", "UeContext", "UEContextManager"]


@dataclass
class DapsBearerState:
    """DAPS state of one data radio bearer."""

    active_source: bool = True
    active_target: bool = False
    switched_to_target: bool = False


@dataclass
class UeContext:
    """State kept for one UE; guard the maps with ``lock``."""

    ue: int
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    teid_to_drb: dict[int, int] = field(default_factory=dict)
    daps: dict[int, DapsBearerState] = field(default_factory=dict)


class UEContextManager:
    """Thread-safe registry of UE contexts and downlink TEID bindings."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ues: dict[int, UeContext] = {}
        self._teid_map: dict[int, tuple[int, int]] = {}

    def ensure_ue(self, ue: int) -> None:
        """Create a context for ``ue`` unless one exists."""
        with self._lock:
            if ue in self._ues:
                return
            self._ues[ue] = UeContext(ue=ue)
        log.info("UE context created: ue=%d", ue)

    def bind_f1u_teid(self, ue: int, drb: int, teid: int) -> None:
        """Route downlink tunnel ``teid`` to ``ue``/``drb``, creating the UE if needed."""
        self.ensure_ue(ue)
        with self._lock:
            self._teid_map[teid] = (ue, drb)
        ctx = self.get(ue)
        if ctx is not None:
            with ctx.lock:
                ctx.teid_to_drb[teid] = drb
        log.info("Bound TEID: teid=%d -> ue=%d drb=%d", teid, ue, drb)

    def lookup_f1u_teid(self, teid: int) -> tuple[int, int] | None:
        """Return ``(ue, drb)`` bound to ``teid``, or None."""
        with self._lock:
            return self._teid_map.get(teid)

    def get(self, ue: int) -> UeContext | None:
        """Return the context of ``ue``, or None."""
        with self._lock:
            return self._ues.get(ue)