"""Simple text file access."""

from __future__ import annotations

import os

from core2d.log import Core2DError, err


class IoFile:
    """An open file with seek, size and whole-content read helpers."""

    def __init__(self, path: str | os.PathLike, mode: str = "r") -> None:
        self.path = os.fspath(path)
        try:
            self._file = open(self.path, mode)
        except OSError as exc:
            err(f"Could not open file: {self.path}")
            raise Core2DError(f"Could not open file: {self.path}") from exc

    def __enter__(self) -> IoFile:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._file.closed

    def append(self, text: str) -> None:
        """Write text at the cursor."""
        self._file.write(text)

    def size(self) -> int:
        """Return the file length and leave the cursor at the start."""
        self.seek(0, os.SEEK_END)
        length = self.tell()
        self.rewind()
        return length

    def tell(self) -> int:
        return self._file.tell()

    def seek(self, offset: int = 0, origin: int = os.SEEK_SET) -> None:
        self._file.seek(offset, origin)

    def rewind(self) -> None:
        self._file.seek(0, os.SEEK_SET)

    def read(self):
        """Return the whole content of the file."""
        self.size()
        return self._file.read()

    def close(self) -> None:
        self._file.close()


def quick_write(path: str | os.PathLike, text: str) -> None:
    """Replace the file's content with ``text``."""
    with IoFile(path, "w") as file:
        file.append(text)


def quick_read(path: str | os.PathLike) -> str:
    """Return the file's whole content."""
    with IoFile(path, "r") as file:
        return file.read()