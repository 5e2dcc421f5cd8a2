"""The directory files are served from, mounted for one connection at a time."""

from __future__ import annotations

import os
from pathlib import Path

from .protocol import MOUNT_POINT


class MountError(OSError):
    """The storage could not be mounted or unmounted."""


class Storage:
    """A directory that must be mounted before files in it are used."""

    def __init__(self, mount_point: str | os.PathLike = MOUNT_POINT) -> None:
        self.mount_point = Path(mount_point)
        self._mounted = False

    def mount(self) -> None:
        """Make the storage available; it is never created or formatted."""
        if self._mounted:
            raise MountError(f"{self.mount_point} is already mounted")
        if not self.mount_point.is_dir():
            raise MountError(f"{self.mount_point} is not a directory")
        self._mounted = True

    def unmount(self) -> None:
        if not self._mounted:
            raise MountError(f"{self.mount_point} is not mounted")
        self._mounted = False

    def is_mounted(self) -> bool:
        return self._mounted

    def path_for(self, file_name: str) -> Path:
        """Path of a file directly under the mount point."""
        if not self._mounted:
            raise MountError(f"{self.mount_point} is not mounted")
        if (
            not file_name
            or file_name in (".", "..")
            or "/" in file_name
            or "\\" in file_name
            or "\0" in file_name
        ):
            raise ValueError(f"invalid file name: {file_name!r}")
        return self.mount_point / file_name

    def __enter__(self) -> Storage:
        self.mount()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._mounted:
            self.unmount()