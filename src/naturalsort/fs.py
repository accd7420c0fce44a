from __future__ import annotations

import io
import threading
from pathlib import Path
from typing import BinaryIO, Protocol


class Filesystem(Protocol):
    def create(self, path: str) -> BinaryIO: ...

    def open(self, path: str) -> BinaryIO: ...

    def exists(self, path: str) -> bool: ...


class RealFilesystem:
    def create(self, path: str) -> BinaryIO:
        return Path(path).open("wb")

    def open(self, path: str) -> BinaryIO:
        return Path(path).open("rb")

    def exists(self, path: str) -> bool:
        return bool(path) and Path(path).exists()


class _VirtualFile(io.BytesIO):
    def __init__(self, owner: VirtualFilesystem, path: str) -> None:
        super().__init__()
        self._owner = owner
        self._path = path

    def close(self) -> None:
        if not self.closed:
            self._owner._commit(self._path, self.getvalue())
        super().close()


class VirtualFilesystem:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._files: dict[str, bytes] = {}

    def create(self, path: str) -> BinaryIO:
        # Creating truncates, as on disk.
        self._commit(path, b"")
        return _VirtualFile(self, path)

    def open(self, path: str) -> BinaryIO:
        with self._lock:
            try:
                data = self._files[path]
            except KeyError:
                raise FileNotFoundError(path) from None
        return io.BytesIO(data)

    def exists(self, path: str) -> bool:
        with self._lock:
            return path in self._files

    def _commit(self, path: str, data: bytes) -> None:
        with self._lock:
            self._files[path] = data
