"""Wire format of the file server: service packets, data packets and progress."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

CHUNK_SIZE = 32
PAYLOAD_SIZE = CHUNK_SIZE - 1
CALCULATING_PROGRESS_INTERVAL = 500

PORT = 12035
# FAT 8.3 limit: 8 bytes of name, the dot and 3 bytes of extension.
FILE_NAME_BUFFER_SIZE = 8 + 1 + 3

UPLOAD_PACKET_TYPE = 0x01
DOWNLOAD_PACKET_TYPE = 0x02
DATA_PACKET_TYPE = 0xDD

MOUNT_POINT = "/sdcard"
BUFFER_UPLOAD_FILE_SIZE = 8192
BUFFER_DOWNLOAD_FILE_SIZE = 8192

_FILE_SIZE = struct.Struct("<I")


class ProtocolError(ValueError):
    """A packet does not follow the wire format."""


class ConnectType(IntEnum):
    """What the client asked for in its service packet."""

    UPLOAD = 0
    DOWNLOAD = 1
    ERROR = -1


@dataclass(frozen=True)
class ServicePacket:
    """The first packet of a connection."""

    connect_type: ConnectType
    file_name: str
    file_size: int = 0


def _decode_name(raw: bytes) -> str:
    name = raw[:FILE_NAME_BUFFER_SIZE].split(b"\0", 1)[0]
    if not name:
        raise ProtocolError("service packet carries no file name")
    return name.decode("utf-8", errors="replace")


def parse_service_packet(buffer: bytes) -> ServicePacket:
    """Decode the service packet that opens every connection."""
    if not buffer:
        raise ProtocolError("empty service packet")
    packet_type, body = buffer[0], bytes(buffer[1:])
    if packet_type == UPLOAD_PACKET_TYPE:
        if len(body) < _FILE_SIZE.size:
            raise ProtocolError("upload packet too short for a file size")
        (file_size,) = _FILE_SIZE.unpack_from(body)
        return ServicePacket(
            ConnectType.UPLOAD, _decode_name(body[_FILE_SIZE.size:]), file_size
        )
    if packet_type == DOWNLOAD_PACKET_TYPE:
        return ServicePacket(ConnectType.DOWNLOAD, _decode_name(body))
    raise ProtocolError(f"bad flag in service packet: {packet_type:#04x}")


def build_data_packet(payload: bytes) -> bytes:
    """Frame up to one chunk of file data, zero padded to CHUNK_SIZE."""
    if len(payload) > PAYLOAD_SIZE:
        raise ValueError(f"payload longer than {PAYLOAD_SIZE} bytes")
    return bytes([DATA_PACKET_TYPE]) + bytes(payload).ljust(PAYLOAD_SIZE, b"\0")


def max_packets(file_size: int) -> int:
    """Number of data packets needed to carry a file of the given size."""
    if file_size < 0:
        raise ValueError("file size cannot be negative")
    return (file_size + PAYLOAD_SIZE - 1) // PAYLOAD_SIZE


def progress_percent(counter: int, total_packets: int) -> int:
    """Percentage of packets done, capped at 100."""
    if total_packets <= 0:
        return 0
    return min(counter * 100 // total_packets, 100)