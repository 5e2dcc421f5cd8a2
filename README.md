# sdfileserver

The building blocks of a small TCP file server that stores uploaded files in a directory and sends them back on request. Transfers use a compact protocol of fixed-size chunks. The package provides three parts:

- the wire format (`sdfileserver.protocol`)
- a text model of the status panel (`sdfileserver.display`)
- a storage directory that is mounted for one connection at a time (`sdfileserver.storage`)

## Installation

```
pip install .
```

## Protocol

Every packet is 32 bytes long (`CHUNK_SIZE`). The default port is 12035 (`PORT`).

**Service packet.** The client sends this first.
- Upload: byte `0x01`, then the file size as a little-endian 4-byte unsigned integer, then the file name in up to 12 bytes (an 8.3 FAT name).
- Download: byte `0x02`, then the file name in up to 12 bytes.

The file name ends at the first zero byte.

**Data packets.** Each one is byte `0xDD` followed by 31 payload bytes. A short payload is zero-padded.

```python
from sdfileserver.protocol import (
    ConnectType, parse_service_packet, build_data_packet,
    max_packets, progress_percent,
)

packet = parse_service_packet(b"\x02notes.txt")
assert packet.connect_type is ConnectType.DOWNLOAD
assert packet.file_name == "notes.txt"

frame = build_data_packet(b"hello")  # 32 bytes, starts with 0xDD
total = max_packets(100)             # 4 packets of 31 bytes
progress_percent(2, total)           # 50
```

`parse_service_packet` raises `ProtocolError` in these cases:
- the packet is empty
- the type flag is unknown
- an upload packet is too short to hold a file size
- the file name is empty

`build_data_packet` raises `ValueError` if the payload is longer than 31 bytes.

## Status panel

`StatusDisplay` holds a grid of text rows, each 16 characters wide. There are 8 rows by default. It can be used safely from several threads.

```python
from sdfileserver.display import StatusDisplay, DisplayState, LoadStatus

display = StatusDisplay()
display.show_intro(True)
display.show_cnt_status(DisplayState.YES)
display.show_status_load(LoadStatus.UPLOAD)
display.show_file_size(1024)
display.show_progress_status(42)
display.show_file_name("report.txt")
print("\n".join(display.lines()))
```

## Storage

`Storage` wraps an existing directory, which defaults to `/sdcard`. It must be mounted before `path_for` is used. It can also be used as a context manager:

```python
from sdfileserver.storage import Storage

with Storage("/srv/files") as storage:
    path = storage.path_for("notes.txt")
```

`mount` and `unmount` raise `MountError` in three cases:
- the directory is missing
- the storage is already mounted
- the storage is not mounted

`path_for` raises `ValueError` for names that are empty or that contain a path separator.

## What this package does not do

This package has no network server and no command to start one. It does not open sockets, accept connections or move file data over the network. Those parts are left to the application that uses these building blocks.

## Running the tests

```
pip install .[test]
pytest
```