"""Read-only file trees and the single-page-app fallback resolver."""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Tuple, Type, Union

from werkzeug.security import safe_join


@dataclass
class OpenedFile:
    """An open file handed out by a file tree. The caller must close it."""

    name: str
    stream: BinaryIO
    size: int
    mtime: Optional[float] = None

    def close(self) -> None:
        self.stream.close()

    def __enter__(self) -> "OpenedFile":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class FileTree(Protocol):
    def open(self, path: str) -> OpenedFile:
        """Open ``path`` for reading, raising ``OSError`` on failure."""
        ...


class DirectoryTree:
    """A file tree rooted at a directory on disk.

    Paths are interpreted relative to ``root`` whether or not they carry a
    leading slash. Directories resolve to their ``index`` document.
    """

    def __init__(self, root: Union[str, Path], index: str = "index.html"):
        self.root = Path(root)
        self.index = index

    def _resolve(self, path: str) -> str:
        relative = path.strip("/")
        full = safe_join(str(self.root), relative) if relative else str(self.root)
        if full is None:
            raise FileNotFoundError(errno.ENOENT, "Path escapes tree root", path)
        return full

    def is_dir(self, path: str) -> bool:
        try:
            return os.path.isdir(self._resolve(path))
        except FileNotFoundError:
            return False

    def open(self, path: str) -> OpenedFile:
        full = self._resolve(path)

        if os.path.isdir(full):
            full = os.path.join(full, self.index)
            if not os.path.isfile(full):
                raise IsADirectoryError(errno.EISDIR, "Directory has no index document", path)

        try:
            stream = open(full, "rb")
        except ValueError:
            # embedded NUL and similar names the OS cannot represent
            raise FileNotFoundError(errno.ENOENT, "Invalid path", path) from None
        try:
            st = os.fstat(stream.fileno())
        except OSError:
            stream.close()
            raise
        return OpenedFile(
            name=os.path.basename(full),
            stream=stream,
            size=st.st_size,
            mtime=st.st_mtime,
        )

    def __repr__(self) -> str:
        return f"DirectoryTree({str(self.root)!r})"


class FallbackTree:
    """Resolve every failed lookup to a fixed fallback document.

    A single-page app routes on the client, so any path that is not a real
    asset is answered with the app's entry document. Only a failure to open
    the fallback itself reaches the caller.
    """

    def __init__(
        self,
        tree: FileTree,
        fallback_path: str,
        fallback_on: Tuple[Type[BaseException], ...] = (OSError,),
    ):
        self._tree = tree
        self._fallback_path = fallback_path
        self._fallback_on = fallback_on

    @property
    def tree(self) -> FileTree:
        return self._tree

    @property
    def fallback_path(self) -> str:
        return self._fallback_path

    def open(self, path: str) -> OpenedFile:
        try:
            return self._tree.open(path)
        except self._fallback_on:
            return self._tree.open(self._fallback_path)
