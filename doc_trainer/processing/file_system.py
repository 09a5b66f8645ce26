"""File access used for image resolution and copying."""

from pathlib import Path
from typing import Protocol, Union


class FileSystem(Protocol):
    """Byte-level reader and writer injected into the parsers."""

    def read_bytes(self, path: Union[str, Path]) -> bytes:
        ...

    def write_bytes(self, path: Union[str, Path], data: bytes) -> None:
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def read_bytes(self, path: Union[str, Path]) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Union[str, Path], data: bytes) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
