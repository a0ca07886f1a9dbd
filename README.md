# odu-daps

A compact O-DU (O-RAN Distributed Unit) runtime that models Dual Active
Protocol Stack (DAPS) handover. While a DAPS window is open, downlink
traffic for a bearer is delivered on both the source and the target leg;
after the switch, only the target leg is fed and scheduled.

The runtime is built from a handful of cooperating pieces:

- **F1-U data plane** (`odu_daps.f1.F1uDataplane`): polls a port for GTP-U
  G-PDUs, maps the TEID to a UE and DRB, and hands the payload to the DAPS
  manager.
- **F1-C control plane** (`odu_daps.f1.F1cControlplane`): polls a port for
  compact control messages (UE context setup, DAPS start, switch to
  target, DAPS end).
- **DAPS manager** (`odu_daps.daps.DapsManager`): keeps per-DRB DAPS state
  and decides which leg(s) each downlink SDU goes to.
- **UE contexts** (`odu_daps.ue_context.UEContextManager`): UE contexts and
  the TEID → (UE, DRB) bindings.
- **RLC** (`odu_daps.rlc.RlcBearer`, `RlcEntity`): per UE/DRB/leg transmit
  queues with simple segmentation to a MAC grant size.
- **MAC** (`odu_daps.mac.MacScheduler`, `MacDapsGlue`): a 1 ms TTI loop
  that pulls up to 1200-byte PDUs for DRB 1 from the source and/or target
  leg according to each UE's state.

Packets arrive as UDP datagrams on `odu_daps.ports.UdpPort` (configured
with `PortConfig` and `odu_daps.common.Endpoint`), so no special network
drivers are needed. No third-party libraries are required.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the runtime

```
odu-daps
```

This opens the F1-U and F1-C UDP ports, starts both receivers and the MAC
scheduler, seeds a demo UE (1001) with DRB 1 bound to TEID `0xAABBCCDD`,
and runs until interrupted with Ctrl+C, after which every component is
stopped and the ports are closed. The exit status is 1 if a port cannot be
bound. Progress is logged to standard error as `[LEVEL] message` lines.

Options:

| Option                  | Default            | Meaning                                        |
|-------------------------|--------------------|------------------------------------------------|
| `--f1u-bind HOST:PORT`  | `127.0.0.1:2152`   | address the F1-U (GTP-U) port listens on       |
| `--f1c-bind HOST:PORT`  | `127.0.0.1:38472`  | address the F1-C control port listens on       |
| `--log-level LEVEL`     | `INFO`             | one of `DEBUG`, `INFO`, `WARN`, `ERROR`        |
| `--duration SECONDS`    | none               | stop after this many seconds instead of Ctrl+C |

## Wire formats

**F1-U (GTP-U, G-PDU only)** — parsed by `odu_daps.gtpu.parse_gtpu`

| Bytes | Field                        |
|-------|------------------------------|
| 0     | flags                        |
| 1     | message type (must be 0xFF)  |
| 2–3   | payload length, big-endian   |
| 4–7   | TEID, big-endian             |
| 8…    | payload                      |

Packets shorter than 8 bytes, of another message type, or whose declared
length runs past the end of the packet are ignored. Packets whose TEID is
not bound are dropped.

**F1-C control messages** — parsed by `odu_daps.ctrlmsg.parse_ctrl_msg`

| Bytes | Field                           |
|-------|---------------------------------|
| 0     | message type (`CtrlMsgType`)    |
| 1–4   | UE id, big-endian               |
| 5     | DRB id                          |

Message types: `UE_CONTEXT_SETUP` (0), `RRC_RECONFIG` (1),
`DAPS_START` (2), `DAPS_SWITCH_TO_TARGET` (3), `DAPS_END` (4).
Messages shorter than 6 bytes are ignored. `RRC_RECONFIG` and unknown
types are parsed (an unknown type stays a plain `int`) but change nothing.

## Using the pieces as a library

The parsers work on `bytes` and return `None` for anything they reject:

```python
from odu_daps.gtpu import parse_gtpu
from odu_daps.ctrlmsg import parse_ctrl_msg

pdu = parse_gtpu(bytes([0x30, 0xFF, 0x00, 0x02, 0xAA, 0xBB, 0xCC, 0xDD, 0x01, 0x02]))
print(hex(pdu.teid), pdu.payload)   # 0xaabbccdd b'\x01\x02'

msg = parse_ctrl_msg(bytes([2, 0x00, 0x00, 0x03, 0xE9, 1]))
print(msg.type.name, msg.ue, msg.drb)   # DAPS_START 1001 1
```

Wiring the DAPS path by hand:

```python
from odu_daps.common import Leg
from odu_daps.ue_context import UEContextManager
from odu_daps.rlc import RlcBearer
from odu_daps.mac import MacScheduler, MacDapsGlue
from odu_daps.daps import DapsManager

uecm = UEContextManager()
rlc = RlcBearer()
sched = MacScheduler(rlc, uecm)
daps = DapsManager(uecm, rlc, MacDapsGlue(sched))

uecm.bind_f1u_teid(1001, 1, 0xAABBCCDD)

daps.start_daps(1001, 1)                     # source + target active
daps.on_f1u_downlink_pdu(1001, 1, b"hello")  # returns (Leg.SOURCE, Leg.TARGET)
print(sched.run_tti())                       # [(1001, Leg.SOURCE, b'hello'), (1001, Leg.TARGET, b'hello')]

daps.switch_to_target(1001, 1)
daps.end_daps(1001, 1)                       # target only, source flushed
print(sched.ue_state(1001))                  # UeMacState(schedule_source=False, schedule_target=True)
```

`F1uDataplane.handle_packet` and `F1cControlplane.handle_packet` apply a
single packet directly once the component has been started, which is
handy for feeding traffic without sockets.

Log verbosity is controlled through `odu_daps.log.set_level` with a
`LogLevel` (`DEBUG`, `INFO`, `WARN`, `ERROR`); the default is `INFO`.

## What this package does not do

- It does not speak real F1AP or SCTP: control messages use only the
  six-byte format above, carried in UDP datagrams.
- The GTP-U parser handles only the plain eight-byte header; optional
  fields and extension headers are not understood.
- Nothing is sent toward a UE or radio: the MAC loop pulls PDUs from the
  RLC each TTI and discards them (logged at `DEBUG`). `UdpPort.tx_burst`
  exists but the runtime never calls it.
- The RLC keeps no sequence-numbered headers, reordering or
  retransmission; it only queues and segments SDUs.