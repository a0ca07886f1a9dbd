from odu_daps.common import Leg
from odu_daps.rlc import BearerKey, RlcBearer, RlcEntity


def test_entity_empty_returns_empty():
    assert RlcEntity().pop_for_mac_pdu(100) == b""


def test_entity_fifo_order():
    e = RlcEntity()
    e.rx_sdu(b"first")
    e.rx_sdu(b"second")
    assert e.pop_for_mac_pdu(100) == b"first"
    assert e.pop_for_mac_pdu(100) == b"second"
    assert len(e) == 0


def test_entity_exact_fit_pops_whole_sdu():
    e = RlcEntity()
    e.rx_sdu(b"abcd")
    assert e.pop_for_mac_pdu(4) == b"abcd"
    assert len(e) == 0


def test_entity_segments_large_sdu():
    e = RlcEntity()
    sdu = bytes(range(10))
    e.rx_sdu(sdu)
    parts = [e.pop_for_mac_pdu(4) for _ in range(3)]
    assert parts == [sdu[:4], sdu[4:8], sdu[8:]]
    assert b"".join(parts) == sdu
    assert e.pop_for_mac_pdu(4) == b""


def test_entity_accepts_bytearray_copy():
    e = RlcEntity()
    buf = bytearray(b"xyz")
    e.rx_sdu(buf)
    buf[0] = ord("q")
    assert e.pop_for_mac_pdu(10) == b"xyz"


def test_entity_flush():
    e = RlcEntity()
    e.rx_sdu(b"a")
    e.rx_sdu(b"b")
    e.flush()
    assert len(e) == 0
    assert e.pop_for_mac_pdu(10) == b""


def test_bearer_key_is_hashable_tuple():
    assert {BearerKey(1, 1, Leg.SOURCE): "s"}[BearerKey(1, 1, Leg.SOURCE)] == "s"
    assert BearerKey(1, 1, Leg.SOURCE) != BearerKey(1, 1, Leg.TARGET)


def test_bearer_legs_are_independent():
    b = RlcBearer()
    b.rx_downlink_sdu(1001, 1, Leg.SOURCE, b"src")
    b.rx_downlink_sdu(1001, 1, Leg.TARGET, b"tgt")
    assert b.build_mac_pdu(1001, 1, Leg.TARGET, 1200) == b"tgt"
    assert b.build_mac_pdu(1001, 1, Leg.SOURCE, 1200) == b"src"


def test_bearer_build_on_unknown_is_empty():
    assert RlcBearer().build_mac_pdu(5, 2, Leg.SOURCE, 1200) == b""


def test_flush_source_keeps_target():
    b = RlcBearer()
    b.rx_downlink_sdu(7, 1, Leg.SOURCE, b"s")
    b.rx_downlink_sdu(7, 1, Leg.TARGET, b"t")
    b.flush_source_buffers(7, 1)
    assert b.build_mac_pdu(7, 1, Leg.SOURCE, 1200) == b""
    assert b.build_mac_pdu(7, 1, Leg.TARGET, 1200) == b"t"


def test_flush_only_affects_named_bearer():
    b = RlcBearer()
    b.rx_downlink_sdu(7, 1, Leg.SOURCE, b"one")
    b.rx_downlink_sdu(7, 2, Leg.SOURCE, b"two")
    b.flush_source_buffers(7, 1)
    assert b.build_mac_pdu(7, 2, Leg.SOURCE, 1200) == b"two"


def test_flush_unknown_bearer_leaves_others():
    b = RlcBearer()
    b.rx_downlink_sdu(1, 1, Leg.SOURCE, b"keep")
    b.flush_source_buffers(99, 1)
    assert b.build_mac_pdu(1, 1, Leg.SOURCE, 1200) == b"keep"