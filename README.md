# rftclient

A small client for reliable file transfer (RFT) over UDP. It reads a file,
cuts it into fixed-size datagrams and sends them to a server with a
Go-Back-N sliding window, resending whatever has not been acknowledged when
its retransmission timer runs out.

## Installation

```
pip install .
```

## Command line

```
rft-client -f FILENAME -h HOSTNAME [-p PORT] [-d DEBUG_LEVEL]
```

- `-f` the file to send (required)
- `-h` the server's host name or IPv4 address (required)
- `-p` the server's UDP port, 12345 by default
- `-d` how much to log, 3 by default: 6 and up shows trace output, 5 debug,
  4 info, 3 warnings, 2 errors, 1 fatal errors only, 0 nothing

On a bad command line the usage line is printed to standard output, the
reason to standard error, and the exit status is 1. Log messages go to
standard error. The command exits with 0 once every datagram has been
acknowledged, and with 1 if the file cannot be opened, the host name cannot
be resolved or the network fails.

## Protocol

- Each datagram carries a sequence number, an acknowledgement number and a
  checksum (16 bits each), a payload length (8 bits) and a payload field of
  255 bytes, of which the first `payload_length` bytes are used.
- Data datagrams are numbered from 1; sequence numbers wrap at 16 bits.
- A datagram with an empty payload marks the end of the file.
- At most 10 datagrams are outstanding at once (`client.WINDOW_SIZE`).
- Acknowledgements are cumulative: an `ack_num` of n confirms every datagram
  up to and including n. Acknowledgements whose checksum does not match are
  dropped.
- When the 15 ms timer (`client.TIMEOUT_MS`) expires, every unacknowledged
  datagram is sent again.
- The checksum is the 16-bit wrapping sum of the sequence number, the
  acknowledgement number, the payload length and the payload bytes, each
  payload byte taken as a signed 8-bit value.

## Library use

```python
from rftclient.datagram import Datagram, compute_checksum, validate_checksum
from rftclient.timer import Timer
from rftclient.transport import UnreliableTransport

packet = Datagram(seq_num=1, payload_length=5, data=b"hello")
packet.checksum = compute_checksum(packet)
assert validate_checksum(packet)

timer = Timer(15)
with UnreliableTransport("localhost", 12345) as transport:
    transport.send(packet)
    timer.start()
    reply = transport.receive()  # None when nothing is waiting
    if reply is None and timer.timeout():
        transport.send(packet)
```

- `rftclient.datagram`: `Datagram` validates its fields on creation, pads
  `data` to the full payload size and exposes the used bytes as `payload`.
  `Datagram.pack()` and `Datagram.unpack()` turn a datagram into its wire
  form (`DATAGRAM_SIZE` bytes, little-endian) and back; `unpack` raises
  `ValueError` on input of the wrong length. `str()` of a datagram gives a
  one-line summary.
- `rftclient.timer`: `Timer(milliseconds)` with `start()`, `stop()`,
  `timeout()` and a `running` property. `Timer.set_duration()` raises
  `RuntimeError` while the timer is running.
- `rftclient.transport`: `UnreliableTransport(hostname, port)` resolves the
  host to an IPv4 address; `send()` sends one datagram, `receive()` returns a
  waiting datagram without blocking, or `None`. It is a context manager and
  closes its socket on `close()` or on leaving the `with` block.
- `rftclient.client`: `parse_args(argv)` returns an `Options` object or
  raises `UsageError`; `main(argv=None)` runs the command and returns its
  exit status.
- `rftclient.log`: `configure(level)` sets the log level and returns the
  package's logger; `get_logger()` returns that logger, set to level 3 if it
  has not been configured yet.

## What it does not do

This package is only the sending side. It has no server or receiver: to
transfer a file you need a server elsewhere that acknowledges datagrams as
described above and writes out what it receives.

## Tests

```
pip install .[test]
pytest
```