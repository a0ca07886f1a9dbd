import pytest

from odu_daps import log
from odu_daps.log import LogLevel
from odu_daps.ue_context import DapsBearerState, UEContextManager, UeContext


@pytest.fixture
def uecm():
    log.set_level(LogLevel.ERROR)
    yield UEContextManager()
    log.set_level(LogLevel.INFO)


def test_get_unknown_is_none(uecm):
    assert uecm.get(1) is None


def test_ensure_ue_creates_context(uecm):
    uecm.ensure_ue(1001)
    ctx = uecm.get(1001)
    assert ctx.ue == 1001
    assert ctx.teid_to_drb == {}
    assert ctx.daps == {}


def test_ensure_ue_is_idempotent(uecm):
    uecm.ensure_ue(1001)
    first = uecm.get(1001)
    first.daps[1] = DapsBearerState(active_target=True)
    uecm.ensure_ue(1001)
    assert uecm.get(1001) is first
    assert uecm.get(1001).daps[1].active_target is True


def test_bind_creates_ue_and_maps(uecm):
    uecm.bind_f1u_teid(1001, 1, 0xAABBCCDD)
    assert uecm.lookup_f1u_teid(0xAABBCCDD) == (1001, 1)
    assert uecm.get(1001).teid_to_drb == {0xAABBCCDD: 1}


def test_lookup_unknown_teid(uecm):
    uecm.bind_f1u_teid(1001, 1, 10)
    assert uecm.lookup_f1u_teid(11) is None


def test_rebind_teid_moves_mapping(uecm):
    uecm.bind_f1u_teid(1, 1, 10)
    uecm.bind_f1u_teid(2, 3, 10)
    assert uecm.lookup_f1u_teid(10) == (2, 3)
    assert uecm.get(2).teid_to_drb[10] == 3


def test_bind_logs_when_info_enabled(capsys):
    log.set_level(LogLevel.INFO)
    try:
        UEContextManager().bind_f1u_teid(5, 2, 77)
    finally:
        log.set_level(LogLevel.INFO)
    err = capsys.readouterr().err
    assert "[INFO] UE context created: ue=5\n" in err
    assert "[INFO] Bound TEID: teid=77 -> ue=5 drb=2\n" in err


def test_daps_bearer_state_fresh_is_source_only():
    st = DapsBearerState()
    assert (st.active_source, st.active_target, st.switched_to_target) == (True, False, False)


def test_contexts_compare_ignoring_lock():
    assert UeContext(ue=3) == UeContext(ue=3)
    assert UeContext(ue=3) != UeContext(ue=4)