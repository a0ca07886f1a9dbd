"""Dual Active Protocol Stack handover control for the DU."""

from __future__ import annotations

from odu_daps import log
from odu_daps.common import Leg
from odu_daps.ue_context import DapsBearerState

__all__ = ["DapsManager"]


class DapsManager:
    """Keeps per-bearer DAPS state and routes downlink SDUs to the right legs."""

    def __init__(self, uecm, rlc, mac) -> None:
        self._uecm = uecm
        self._rlc = rlc
        self._mac = mac

    def start_daps(self, ue: int, drb: int) -> None:
        """Open the DAPS window: source and target both active."""
        ctx = self._uecm.get(ue)
        if ctx is None:
            return
        with ctx.lock:
            state = ctx.daps.setdefault(drb, DapsBearerState())
            state.active_source = True
            state.active_target = True
            state.switched_to_target = False
            log.info("DAPS START: ue=%d drb=%d (source+target active)", ue, drb)
            self._mac.on_daps_state_change(ue, drb, True)

    def switch_to_target(self, ue: int, drb: int) -> None:
        """Move the bearer to the target leg; ignored unless the target is active."""
        ctx = self._uecm.get(ue)
        if ctx is None:
            return
        with ctx.lock:
            state = ctx.daps.setdefault(drb, DapsBearerState())
            if not state.active_target:
                log.warn(
                    "DAPS switch requested but target not active: ue=%d drb=%d", ue, drb
                )
                return
            state.switched_to_target = True
            log.info("DAPS SWITCH->TARGET: ue=%d drb=%d", ue, drb)
            self._mac.on_switch_to_target(ue, drb)

    def end_daps(self, ue: int, drb: int) -> None:
        """Close the DAPS window: keep the target only and flush the source leg."""
        ctx = self._uecm.get(ue)
        if ctx is None:
            return
        with ctx.lock:
            state = ctx.daps.setdefault(drb, DapsBearerState())
            state.active_source = False
            state.active_target = True
            state.switched_to_target = True
            log.info("DAPS END: ue=%d drb=%d (target only)", ue, drb)
            self._mac.on_daps_state_change(ue, drb, True)
            self._rlc.flush_source_buffers(ue, drb)

    def on_f1u_downlink_pdu(self, ue: int, drb: int, payload: bytes) -> tuple[Leg, ...]:
        """Queue a downlink SDU on the legs the DAPS state selects; return those legs."""
        ctx = self._uecm.get(ue)
        if ctx is None:
            return ()
        with ctx.lock:
            state = ctx.daps.get(drb)
            if state is None:
                src, tgt, switched = True, False, False
            else:
                src, tgt, switched = (
                    state.active_source,
                    state.active_target,
                    state.switched_to_target,
                )

        if tgt and (switched or not src):
            legs: tuple[Leg, ...] = (Leg.TARGET,)
        elif src and tgt and not switched:
            legs = (Leg.SOURCE, Leg.TARGET)
        else:
            legs = (Leg.SOURCE,)
        for leg in legs:
            self._rlc.rx_downlink_sdu(ue, drb, leg, payload)
        return legs