"""Command-line entry point running the DU DAPS runtime."""

from __future__ import annotations

import argparse
import signal
import threading
import time
from contextlib import ExitStack

from odu_daps import log
from odu_daps.common import Endpoint
from odu_daps.daps import DapsManager
from odu_daps.f1 import F1cControlplane, F1uDataplane
from odu_daps.log import LogLevel
from odu_daps.mac import MacDapsGlue, MacScheduler
from odu_daps.ports import PortConfig, UdpPort
from odu_daps.rlc import RlcBearer
from odu_daps.ue_context import UEContextManager

__all__ = ["main"]

_DEMO_UE = 1001
_DEMO_DRB = 1
_DEMO_TEID = 0xAABBCCDD
_POLL_SECONDS = 0.2


def _endpoint(text: str) -> Endpoint:
    host, sep, port = text.rpartition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected HOST:PORT, got {text!r}")
    try:
        return Endpoint(host, int(port))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid endpoint {text!r}: {exc}") from exc


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="odu-daps", description="O-DU DAPS runtime")
    parser.add_argument("--f1u-bind", type=_endpoint, default=Endpoint("127.0.0.1", 2152),
                        help="F1-U (GTP-U) listen address, HOST:PORT")
    parser.add_argument("--f1c-bind", type=_endpoint, default=Endpoint("127.0.0.1", 38472),
                        help="F1-C control listen address, HOST:PORT")
    parser.add_argument("--log-level", choices=[lvl.name for lvl in LogLevel], default="INFO")
    parser.add_argument("--duration", type=float, default=None,
                        help="stop after this many seconds instead of waiting for Ctrl+C")
    return parser


def _wait(stop: threading.Event, duration: float | None) -> None:
    deadline = None if duration is None else time.monotonic() + duration
    while not stop.is_set():
        if deadline is None:
            stop.wait(_POLL_SECONDS)
            continue
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return
        stop.wait(min(_POLL_SECONDS, remaining))


def main(argv=None) -> int:
    """Run the runtime until interrupted; return the process exit status."""
    args = _parser().parse_args(argv)
    log.set_level(LogLevel[args.log_level])

    stop = threading.Event()
    previous_handler = None
    in_main_thread = threading.current_thread() is threading.main_thread()
    if in_main_thread:
        previous_handler = signal.signal(signal.SIGINT, lambda *_: stop.set())

    try:
        with ExitStack() as stack:
            f1u_port = UdpPort(PortConfig(port_id=0), args.f1u_bind)
            f1c_port = UdpPort(PortConfig(port_id=1), args.f1c_bind)
            try:
                f1u_port.open()
                stack.callback(f1u_port.close)
                f1c_port.open()
                stack.callback(f1c_port.close)
            except OSError as exc:
                log.error("port setup failed: %s", exc)
                return 1

            uecm = UEContextManager()
            rlc = RlcBearer()
            mac = MacScheduler()
            daps = DapsManager(uecm, rlc, MacDapsGlue(mac))

            mac.start(rlc, uecm)
            stack.callback(mac.stop)

            uecm.ensure_ue(_DEMO_UE)
            uecm.bind_f1u_teid(_DEMO_UE, _DEMO_DRB, _DEMO_TEID)

            f1u = F1uDataplane()
            f1c = F1cControlplane()
            f1u.start(f1u_port, uecm, daps)
            stack.callback(f1u.stop)
            f1c.start(f1c_port, uecm, daps)
            stack.callback(f1c.stop)

            log.info("O-DU DAPS runtime started. Press Ctrl+C to stop.")
            _wait(stop, args.duration)
            log.info("Shutting down...")
        return 0
    finally:
        if in_main_thread and previous_handler is not None:
            signal.signal(signal.SIGINT, previous_handler)