"""Packet ports carrying F1 traffic over UDP datagrams."""

from __future__ import annotations

import socket
from collections.abc import Iterable
from dataclasses import dataclass

from odu_daps import log
from odu_daps.common import Endpoint

__all__ = ["PortConfig", "UdpPort"]

_MAX_DATAGRAM = 65535


@dataclass(frozen=True)
class PortConfig:
    """Identity and queue sizing of a port."""

    port_id: int = 0
    rxq: int = 0
    txq: int = 0
    nb_rx_desc: int = 1024
    nb_tx_desc: int = 1024


class UdpPort:
    """A non-blocking, burst-oriented packet port on a UDP socket."""

    def __init__(
        self,
        config: PortConfig | None = None,
        local: Endpoint | None = None,
        remote: Endpoint | None = None,
    ) -> None:
        self.config = config or PortConfig()
        self.local = local or Endpoint("127.0.0.1", 0)
        self.remote = remote
        self._sock: socket.socket | None = None

    @property
    def port_id(self) -> int:
        return self.config.port_id

    @property
    def is_up(self) -> bool:
        return self._sock is not None

    @property
    def local_address(self) -> Endpoint:
        """The address the open socket is bound to."""
        if self._sock is None:
            raise RuntimeError(f"port {self.port_id} is not open")
        host, port = self._sock.getsockname()[:2]
        return Endpoint(host, port)

    def open(self) -> None:
        """Bind the socket; raises OSError when that fails."""
        if self._sock is not None:
            return
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.setblocking(False)
            sock.bind((self.local.ip, self.local.port))
        except OSError:
            sock.close()
            log.error("port %d: bind to %s:%d failed", self.port_id, self.local.ip, self.local.port)
            raise
        self._sock = sock
        bound = self.local_address
        log.info("Port %d started on %s:%d", self.port_id, bound.ip, bound.port)

    def rx_burst(self, max_burst: int) -> list[bytes]:
        """Return up to ``max_burst`` datagrams that are already waiting."""
        sock = self._sock
        if sock is None:
            return []
        packets: list[bytes] = []
        while len(packets) < max_burst:
            try:
                data, _ = sock.recvfrom(_MAX_DATAGRAM)
            except (BlockingIOError, InterruptedError):
                break
            except ConnectionResetError:
                continue
            packets.append(data)
        return packets

    def tx_burst(self, packets: Iterable[bytes]) -> int:
        """Send datagrams to the remote endpoint; return how many went out."""
        sock = self._sock
        if sock is None:
            return 0
        if self.remote is None:
            raise ValueError(f"port {self.port_id} has no remote endpoint")
        address = (self.remote.ip, self.remote.port)
        sent = 0
        for packet in packets:
            try:
                sock.sendto(packet, address)
            except BlockingIOError:
                break
            sent += 1
        return sent

    def close(self) -> None:
        """Close the socket; further bursts move nothing."""
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> UdpPort:
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()