"""Fixed-size datagram exchanged between the file-transfer client and server."""

from __future__ import annotations

import struct
from dataclasses import dataclass

MAX_PAYLOAD_LENGTH = 255

# seqNum, ackNum, checksum (uint16 each), payloadLength (uint8), data (255 bytes)
_WIRE = struct.Struct(f"<HHHB{MAX_PAYLOAD_LENGTH}s")
DATAGRAM_SIZE = _WIRE.size

_UINT16_MAX = 0xFFFF


@dataclass
class Datagram:
    """One datagram; ``data`` is always stored padded to the full payload size."""

    seq_num: int = 0
    ack_num: int = 0
    checksum: int = 0
    payload_length: int = MAX_PAYLOAD_LENGTH
    data: bytes = b""

    def __post_init__(self) -> None:
        for name in ("seq_num", "ack_num", "checksum"):
            value = getattr(self, name)
            if not 0 <= value <= _UINT16_MAX:
                raise ValueError(f"{name} must fit in 16 bits, got {value}")
        if not 0 <= self.payload_length <= MAX_PAYLOAD_LENGTH:
            raise ValueError(
                f"payload_length must be between 0 and {MAX_PAYLOAD_LENGTH}, "
                f"got {self.payload_length}"
            )
        data = bytes(self.data)
        if len(data) > MAX_PAYLOAD_LENGTH:
            raise ValueError(
                f"data may hold at most {MAX_PAYLOAD_LENGTH} bytes, got {len(data)}"
            )
        self.data = data.ljust(MAX_PAYLOAD_LENGTH, b"\0")

    @property
    def payload(self) -> bytes:
        """The bytes covered by ``payload_length``."""
        return self.data[: self.payload_length]

    def pack(self) -> bytes:
        """Encode the datagram into its fixed-size wire form."""
        return _WIRE.pack(
            self.seq_num, self.ack_num, self.checksum, self.payload_length, self.data
        )

    @classmethod
    def unpack(cls, data: bytes) -> Datagram:
        """Decode a datagram from its wire form."""
        if len(data) != DATAGRAM_SIZE:
            raise ValueError(
                f"a datagram is {DATAGRAM_SIZE} bytes long, got {len(data)}"
            )
        seq_num, ack_num, checksum, payload_length, payload = _WIRE.unpack(data)
        return cls(seq_num, ack_num, checksum, payload_length, payload)

    def __str__(self) -> str:
        text = "".join(chr(byte) for byte in self.data if byte)
        return (
            f"seqNum: {self.seq_num} ackNum: {self.ack_num} "
            f"payloadLength: {self.payload_length} "
            f"computeChecksum: {self.checksum} data: {text}"
        )


def compute_checksum(datagram: Datagram) -> int:
    """16-bit wrapping sum of the header fields and the payload bytes taken as signed."""
    total = datagram.seq_num + datagram.ack_num + datagram.payload_length
    total += sum(byte - 256 if byte >= 128 else byte for byte in datagram.payload)
    return total & _UINT16_MAX


def validate_checksum(datagram: Datagram) -> bool:
    """True when the stored checksum matches the computed one."""
    return compute_checksum(datagram) == datagram.checksum