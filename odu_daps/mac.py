"""MAC scheduling of DAPS bearer legs and the glue from DAPS control to it."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

from odu_daps import log
from odu_daps.common import Leg

__all__ = [
    "TTI_SECONDS",
    "MAC_PDU_BYTES",
    "SCHEDULED_DRB",
    "UeMacState",
    "MacScheduler",
    "MacDapsGlue",
]

TTI_SECONDS = 0.001
MAC_PDU_BYTES = 1200
SCHEDULED_DRB = 1


@dataclass
class UeMacState:
    """Which legs of a UE the scheduler serves."""

    schedule_source: bool = True
    schedule_target: bool = False


class MacScheduler:
    """Pulls MAC PDUs from the RLC for every known UE once per TTI."""

    def __init__(self, rlc=None, uecm=None) -> None:
        self._rlc = rlc
        self._uecm = uecm
        self._lock = threading.Lock()
        self._states: dict[int, UeMacState] = {}
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self, rlc, uecm) -> None:
        """Run the TTI loop in a background thread."""
        if self._thread is not None:
            raise RuntimeError("MAC scheduler already running")
        self._rlc = rlc
        self._uecm = uecm
        self._stop.clear()
        self._thread = threading.Thread(target=self._tti_loop, name="mac-tti", daemon=True)
        self._thread.start()
        log.info("MAC scheduler started")

    def stop(self) -> None:
        """Stop the TTI loop and wait for it to finish."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        log.info("MAC scheduler stopped")

    def set_target_active(self, ue: int, drb: int, active: bool) -> None:
        """Enable or disable scheduling of the target leg of ``ue``."""
        with self._lock:
            self._states.setdefault(ue, UeMacState()).schedule_target = active

    def switch_to_target(self, ue: int, drb: int) -> None:
        """Serve only the target leg of ``ue`` from now on."""
        with self._lock:
            state = self._states.setdefault(ue, UeMacState())
            state.schedule_source = False
            state.schedule_target = True

    def ue_state(self, ue: int) -> UeMacState | None:
        """Return a copy of the scheduling state of ``ue``, or None."""
        with self._lock:
            state = self._states.get(ue)
            return replace(state) if state is not None else None

    def run_tti(self) -> list[tuple[int, Leg, bytes]]:
        """Schedule one TTI; return the non-empty PDUs as ``(ue, leg, pdu)``."""
        if self._rlc is None:
            raise RuntimeError("MAC scheduler has no RLC bearer")
        with self._lock:
            snapshot = {ue: replace(state) for ue, state in self._states.items()}

        scheduled: list[tuple[int, Leg, bytes]] = []
        for ue, state in snapshot.items():
            legs = ((Leg.SOURCE, state.schedule_source), (Leg.TARGET, state.schedule_target))
            for leg, enabled in legs:
                if not enabled:
                    continue
                pdu = self._rlc.build_mac_pdu(ue, SCHEDULED_DRB, leg, MAC_PDU_BYTES)
                if pdu:
                    log.debug("MAC(TTI): ue=%d %s bytes=%d", ue, leg.name, len(pdu))
                    scheduled.append((ue, leg, pdu))
        return scheduled

    def _tti_loop(self) -> None:
        while not self._stop.wait(TTI_SECONDS):
            self.run_tti()


class MacDapsGlue:
    """Forwards DAPS state changes to the MAC scheduler."""

    def __init__(self, scheduler: MacScheduler) -> None:
        self._scheduler = scheduler

    def on_daps_state_change(self, ue: int, drb: int, target_active: bool) -> None:
        """Reflect whether the target leg is active."""
        log.info(
            "MAC glue: daps_state_change ue=%d drb=%d targetActive=%d",
            ue,
            drb,
            int(target_active),
        )
        self._scheduler.set_target_active(ue, drb, target_active)

    def on_switch_to_target(self, ue: int, drb: int) -> None:
        """Move scheduling to the target leg only."""
        log.info("MAC glue: switch_to_target ue=%d drb=%d", ue, drb)
        self._scheduler.switch_to_target(ue, drb)