"""Directory listing and a simple file read/write timing test."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Iterator, NamedTuple, Optional

_CHUNK = 512
_WRITE_CHUNKS = 2048


class _Entry(NamedTuple):
    path: Path
    depth: int
    is_dir: bool
    size: Optional[int]

    def __str__(self) -> str:
        if self.is_dir:
            return f"  DIR : {self.path.name}"
        return f"  FILE: {self.path.name}  SIZE: {self.size}"


class _IoResult(NamedTuple):
    bytes_read: Optional[int]
    read_ms: float
    bytes_written: int
    write_ms: float


def list_dir(path: str | Path, levels: int = 0) -> Iterator[_Entry]:
    """Yield the entries of a directory, descending ``levels`` more levels."""
    root = Path(path)
    if not root.exists():
        raise FileNotFoundError(str(root))
    if not root.is_dir():
        raise NotADirectoryError(str(root))
    yield from _walk(root, levels, 0)


def _walk(root: Path, levels: int, depth: int) -> Iterator[_Entry]:
    for child in sorted(root.iterdir(), key=lambda p: p.name):
        if child.is_dir():
            yield _Entry(child, depth, True, None)
            if levels:
                yield from _walk(child, levels - 1, depth + 1)
        else:
            yield _Entry(child, depth, False, child.stat().st_size)


def benchmark_file_io(path: str | Path) -> _IoResult:
    """Time reading a file in 512-byte chunks, then overwrite it with 1 MiB.

    ``bytes_read`` is None when the file could not be opened for reading.
    """
    buffer = bytearray(_CHUNK)
    bytes_read: Optional[int] = None
    read_ms = 0.0
    try:
        with open(path, "rb") as stream:
            start = time.perf_counter()
            bytes_read = 0
            while n := stream.readinto(buffer):
                bytes_read += n
            read_ms = (time.perf_counter() - start) * 1000.0
    except OSError:
        pass

    with open(path, "wb") as stream:
        start = time.perf_counter()
        for _ in range(_WRITE_CHUNKS):
            stream.write(buffer)
        write_ms = (time.perf_counter() - start) * 1000.0
    return _IoResult(bytes_read, read_ms, _CHUNK * _WRITE_CHUNKS, write_ms)