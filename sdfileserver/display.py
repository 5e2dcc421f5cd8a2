"""A text model of the status screen the server keeps up to date."""

from __future__ import annotations

import threading
from enum import Enum, IntEnum

COLUMNS = 16
DEFAULT_ROWS = 8

INTRO_ROW = 0
ESP_IP_STATUS_ROW = 1
CNT_STATUS_ROW = 2
MNT_STATUS_ROW = 3
LOADING_STATUS_ROW = 4
FILE_SIZE_ROW = 5
PERCENT_STATUS_ROW = 6
FILE_NAME_ROW = 7


class DisplayState(IntEnum):
    """Yes/no/error flag shown for the connection and the mount."""

    YES = 0
    NO = 1
    ERROR = 2


class LoadStatus(IntEnum):
    """Direction of the current transfer."""

    UPLOAD = 0
    DOWNLOAD = 1
    VOID = -1


class _Mark(Enum):
    YES = "Y"
    NO = "N"
    ERROR = "ERROR"


_LOAD_TEXT = {
    LoadStatus.UPLOAD: "SRVR <- CLNT",
    LoadStatus.DOWNLOAD: "SRVR -> CLNT",
    LoadStatus.VOID: "SRVR    CLNT",
}


def _state_mark(status) -> str:
    try:
        return _Mark[DisplayState(status).name].value
    except (ValueError, TypeError):
        return "-"


class StatusDisplay:
    """A grid of text rows, each COLUMNS characters wide."""

    def __init__(self, rows: int = DEFAULT_ROWS) -> None:
        if rows <= FILE_NAME_ROW:
            raise ValueError(f"display needs at least {FILE_NAME_ROW + 1} rows")
        self._rows = [" " * COLUMNS] * rows
        self._lock = threading.Lock()

    def lines(self) -> tuple[str, ...]:
        """Current contents of every row."""
        with self._lock:
            return tuple(self._rows)

    def __str__(self) -> str:
        return "\n".join(self.lines())

    def clear(self) -> None:
        """Blank every row."""
        with self._lock:
            self._rows = [" " * COLUMNS] * len(self._rows)

    def show_text(self, row: int, text: str) -> None:
        """Write text to a row, cut or padded with spaces to the row width."""
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row {row} out of range")
        with self._lock:
            self._rows[row] = text[:COLUMNS].ljust(COLUMNS)

    def show_intro(self, clear_screen: bool) -> None:
        """Draw the start-up screen with every status reset."""
        if clear_screen:
            self.clear()
        self.show_text(INTRO_ROW, "  Server up")
        self.show_mnt_status(None)
        self.show_cnt_status(None)
        self.show_status_load(LoadStatus.VOID)
        self.show_file_size(0)
        self.show_progress_status(0)
        self.show_file_name("-")

    def show_esp_ip(self, esp_ip: str) -> None:
        self.show_text(ESP_IP_STATUS_ROW, esp_ip)

    def show_mnt_status(self, status) -> None:
        self.show_text(MNT_STATUS_ROW, f"MNT: {_state_mark(status)}")

    def show_cnt_status(self, status) -> None:
        self.show_text(CNT_STATUS_ROW, f"CNT: {_state_mark(status)}")

    def show_status_load(self, status) -> None:
        """Show the transfer direction; unknown values leave the row as is."""
        try:
            text = _LOAD_TEXT[LoadStatus(status)]
        except ValueError:
            return
        self.show_text(LOADING_STATUS_ROW, text)

    def show_file_size(self, file_size: int) -> None:
        self.show_text(FILE_SIZE_ROW, f"FILE: {file_size} B")

    def show_progress_status(self, progress: int) -> None:
        if not 0 <= progress <= 255:
            raise ValueError("progress must fit in one byte")
        self.show_text(PERCENT_STATUS_ROW, f"LOAD: {progress}%")

    def show_file_name(self, file_name: str) -> None:
        self.show_text(FILE_NAME_ROW, f"NAME: {file_name[:9]}")