import time

import pytest

from odu_daps.common import Endpoint
from odu_daps.ports import PortConfig, UdpPort


def _receive(port, count, max_burst=32, timeout=2.0):
    packets = []
    deadline = time.monotonic() + timeout
    while len(packets) < count and time.monotonic() < deadline:
        packets.extend(port.rx_burst(max_burst))
        if len(packets) < count:
            time.sleep(0.005)
    return packets


def test_port_config_defaults():
    cfg = PortConfig()
    assert (cfg.port_id, cfg.rxq, cfg.txq) == (0, 0, 0)
    assert cfg.nb_rx_desc == 1024
    assert cfg.nb_tx_desc == 1024


def test_closed_port_moves_nothing():
    port = UdpPort(PortConfig(port_id=3), remote=Endpoint("127.0.0.1", 9))
    assert port.rx_burst(32) == []
    assert port.tx_burst([b"x"]) == 0
    assert port.port_id == 3


def test_local_address_requires_open():
    with pytest.raises(RuntimeError):
        UdpPort().local_address


def test_round_trip():
    with UdpPort(local=Endpoint("127.0.0.1", 0)) as rx:
        with UdpPort(local=Endpoint("127.0.0.1", 0), remote=rx.local_address) as tx:
            assert tx.tx_burst([b"one", b"two"]) == 2
            assert _receive(rx, 2) == [b"one", b"two"]


def test_rx_burst_respects_max_burst():
    with UdpPort() as rx, UdpPort(remote=rx.local_address) as tx:
        tx.tx_burst([b"a", b"b", b"c"])
        time.sleep(0.05)
        first = rx.rx_burst(2)
        rest = _receive(rx, 1)
        assert first == [b"a", b"b"]
        assert rest == [b"c"]


def test_tx_without_remote_raises():
    with UdpPort() as port:
        with pytest.raises(ValueError):
            port.tx_burst([b"x"])


def test_context_exit_closes():
    with UdpPort() as port:
        assert port.is_up
    assert not port.is_up
    assert port.rx_burst(4) == []


def test_open_conflicting_address_raises():
    with UdpPort() as first:
        second = UdpPort(local=first.local_address)
        with pytest.raises(OSError):
            second.open()
        assert not second.is_up