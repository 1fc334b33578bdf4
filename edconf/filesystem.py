#!/usr/bin/env python3

"""Access to directories and config files, as seen by the resolver."""

import os
import posixpath
from typing import Dict, Mapping, Optional, Protocol, Set

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
]


class FileSystem(Protocol):
    """What the resolver needs to know about the files around a path."""

    def dir_exists(self, path: str) -> bool: ...

    def parent_of(self, path: str) -> Optional[str]: ...

    def config_exists(self, directory: str, filename: str) -> bool: ...

    def read_config(self, directory: str, filename: str) -> str: ...


class LocalFileSystem:
    """Reads config files from disk."""

    def dir_exists(self, path: str) -> bool:
        return os.path.isdir(path)

    def parent_of(self, path: str) -> Optional[str]:
        parent = os.path.dirname(path)
        # dirname("/") == "/" and dirname("name") == ""
        if not parent or parent == path:
            return None
        return parent

    def config_exists(self, directory: str, filename: str) -> bool:
        return os.path.isfile(os.path.join(directory, filename))

    def read_config(self, directory: str, filename: str) -> str:
        with open(os.path.join(directory, filename), "r", encoding="utf-8") as f:
            return f.read()


class MemoryFileSystem:
    """Serves config files from a mapping of path to contents.

    Useful for editors resolving unsaved buffers, and for tests. Paths use /
    as separator; every ancestor of a config file counts as an existing
    directory.
    """

    def __init__(self, files: Mapping[str, str]) -> None:
        self.files: Dict[str, str] = dict(files)
        self.directories: Set[str] = set()
        for path in self.files:
            parent = self.parent_of(path)
            while parent is not None:
                self.directories.add(parent)
                parent = self.parent_of(parent)

    def dir_exists(self, path: str) -> bool:
        return path in self.directories

    def parent_of(self, path: str) -> Optional[str]:
        parent = posixpath.dirname(path)
        if not parent or parent == path:
            return None
        return parent

    def config_exists(self, directory: str, filename: str) -> bool:
        return posixpath.join(directory, filename) in self.files

    def read_config(self, directory: str, filename: str) -> str:
        path = posixpath.join(directory, filename)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(path) from None
