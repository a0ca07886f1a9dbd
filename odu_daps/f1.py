"""F1-U and F1-C receive paths: parse packets and drive the DU components."""

from __future__ import annotations

import threading

from odu_daps import log
from odu_daps.ctrlmsg import CtrlMsg, CtrlMsgType, parse_ctrl_msg
from odu_daps.gtpu import parse_gtpu

__all__ = ["F1uDataplane", "F1cControlplane"]

_BURST = 32
_IDLE_WAIT = 0.001


class _RxWorker:
    """Polls a port in a background thread and hands each packet to ``handle_packet``."""

    _label = "receiver"

    def __init__(self) -> None:
        self._port = None
        self._uecm = None
        self._daps = None
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def _begin(self, port, uecm, daps) -> None:
        if self._thread is not None:
            raise RuntimeError(f"{self._label} already running")
        self._port = port
        self._uecm = uecm
        self._daps = daps
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._rx_loop, name=self._label, daemon=True)
        self._thread.start()
        log.info("%s started", self._label)

    def _end(self) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        log.info("%s stopped", self._label)

    def _require_started(self) -> None:
        if self._uecm is None or self._daps is None:
            raise RuntimeError(f"{self._label} not started")

    def _rx_loop(self) -> None:
        while not self._stop_event.is_set():
            packets = self._port.rx_burst(_BURST)
            if not packets:
                self._stop_event.wait(_IDLE_WAIT)
                continue
            for data in packets:
                self.handle_packet(data)  # type: ignore[attr-defined]


class F1uDataplane(_RxWorker):
    """Receives GTP-U downlink traffic and feeds it to the DAPS manager."""

    _label = "F1-U dataplane"

    def start(self, port, uecm, daps) -> None:
        """Begin receiving G-PDUs from ``port``."""
        self._begin(port, uecm, daps)

    def stop(self) -> None:
        """Stop receiving and wait for the thread to finish."""
        self._end()

    def handle_packet(self, data: bytes) -> tuple[int, int] | None:
        """Deliver one G-PDU; return the ``(ue, drb)`` it went to, or None."""
        self._require_started()
        pdu = parse_gtpu(data)
        if pdu is None:
            return None
        mapping = self._uecm.lookup_f1u_teid(pdu.teid)
        if mapping is None:
            return None
        ue, drb = mapping
        self._daps.on_f1u_downlink_pdu(ue, drb, pdu.payload)
        return mapping


class F1cControlplane(_RxWorker):
    """Receives control messages and applies them to UE contexts and DAPS state."""

    _label = "F1-C controlplane"

    def start(self, port, uecm, daps) -> None:
        """Begin receiving control messages from ``port``."""
        self._begin(port, uecm, daps)

    def stop(self) -> None:
        """Stop receiving and wait for the thread to finish."""
        self._end()

    def handle_packet(self, data: bytes) -> CtrlMsg | None:
        """Apply one control message; return it, or None if it did not parse."""
        self._require_started()
        msg = parse_ctrl_msg(data)
        if msg is None:
            return None
        if msg.type == CtrlMsgType.UE_CONTEXT_SETUP:
            self._uecm.ensure_ue(msg.ue)
        elif msg.type == CtrlMsgType.DAPS_START:
            self._daps.start_daps(msg.ue, msg.drb)
        elif msg.type == CtrlMsgType.DAPS_SWITCH_TO_TARGET:
            self._daps.switch_to_target(msg.ue, msg.drb)
        elif msg.type == CtrlMsgType.DAPS_END:
            self._daps.end_daps(msg.ue, msg.drb)
        return msg