#!/usr/bin/env python3

import logging
import os
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from .errors import ParseError
from .filesystem import FileSystem, LocalFileSystem
from .normalize import normalize_properties
from .observer import DEFAULT_OBSERVER, ResolveObserver
from .sections import parse_config
from .version import VERSION, check_version

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "Resolver",
    "merge_prefer_left",
    "resolve",
    "get_properties",
]

DEFAULT_CONFIG_FILENAME = ".editorconfig"


def merge_prefer_left(
    nearer: Mapping[str, str], farther: Mapping[str, str]
) -> Dict[str, str]:
    """Merge two property maps, keeping the nearer value for shared keys.

    Keys keep the position they have in `farther`; keys only `nearer` has
    follow in their own order.
    """
    merged = dict(farther)
    merged.update(nearer)
    return merged


class Resolver:
    """Finds the EditorConfig properties that apply to a file.

    A Resolver holds no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        config_filename: str = DEFAULT_CONFIG_FILENAME,
        version: str = VERSION,
        filesystem: Optional[FileSystem] = None,
    ) -> None:
        self.config_filename = config_filename
        self.version = version
        self.filesystem: FileSystem = (
            filesystem if filesystem is not None else LocalFileSystem()
        )

    def resolve(
        self,
        file_path: str,
        stop_dirs: Iterable[str] = (),
        observer: Optional[ResolveObserver] = None,
    ) -> List[Tuple[str, str]]:
        """Resolve the properties of a file.

        Walks up from the file's directory, applying every config file found
        until one declares root=true, a stop directory is reached, or there is
        no parent left.

        Args:
            file_path: Full path of the file, usually the one being edited
            stop_dirs: Directories where the walk ends even without root=true
            observer: Optional hooks called along the way

        Returns:
            The (key, value) pairs, in the order they were first declared

        Raises:
            VersionError: If this resolver asks for a newer version than supported
            ParseError: If a config file on the way contains malformed lines
        """
        check_version(self.version)
        if observer is None:
            observer = DEFAULT_OBSERVER

        if not observer.process_file(file_path):
            logging.debug(f"Observer skipped {file_path}")
            return []

        match_path = file_path.replace(os.sep, "/")
        stop: Set[str] = {os.path.normpath(d) for d in stop_dirs}
        logging.debug(
            f"Resolving {file_path} (config file {self.config_filename}, stop dirs {sorted(stop)})"
        )

        properties: Dict[str, str] = {}
        directory = self.filesystem.parent_of(file_path)
        while directory is not None:
            if not observer.process_dir(directory):
                logging.debug(f"Observer stopped the walk at {directory}")
                break

            is_root, dir_options = self._load_directory(directory, match_path, observer)
            properties = merge_prefer_left(properties, dir_options)

            if is_root:
                logging.debug(f"Found root=true in {directory}, stopping")
                break
            if os.path.normpath(directory) in stop:
                logging.debug(f"Reached stop directory {directory}")
                break

            directory = self.filesystem.parent_of(directory)

        result = normalize_properties(properties)
        observer.finished(file_path)
        logging.debug(f"Resolved {len(result)} properties for {file_path}")
        return list(result.items())

    def _load_directory(
        self, directory: str, match_path: str, observer: ResolveObserver
    ) -> Tuple[bool, Dict[str, str]]:
        if not self.filesystem.dir_exists(directory):
            return False, {}
        if not self.filesystem.config_exists(directory, self.config_filename):
            return False, {}

        config_path = os.path.join(directory, self.config_filename)
        if not observer.process_config(config_path):
            logging.debug(f"Observer skipped {config_path}")
            return False, {}

        logging.debug(f"Parsing {config_path}")
        text = self.filesystem.read_config(directory, self.config_filename)
        try:
            source = parse_config(text, observer)
            options = source.options_for(match_path, directory, observer)
        except ParseError as e:
            logging.debug(f"Failed to parse {config_path}: {e}")
            raise e.with_path(config_path) from None

        return source.is_root, options


def resolve(
    file_path: str,
    stop_dirs: Iterable[str] = (),
    observer: Optional[ResolveObserver] = None,
    *,
    config_filename: str = DEFAULT_CONFIG_FILENAME,
    version: str = VERSION,
    filesystem: Optional[FileSystem] = None,
) -> List[Tuple[str, str]]:
    """Resolve the properties of a file with a one-off Resolver.

    See Resolver.resolve for the arguments.
    """
    resolver = Resolver(config_filename, version, filesystem)
    return resolver.resolve(file_path, stop_dirs, observer)


def get_properties(
    file_path: str,
    stop_dirs: Iterable[str] = (),
    *,
    config_filename: str = DEFAULT_CONFIG_FILENAME,
    filesystem: Optional[FileSystem] = None,
) -> Dict[str, str]:
    """Return the properties of a file as a dict."""
    return dict(
        resolve(
            file_path,
            stop_dirs,
            config_filename=config_filename,
            filesystem=filesystem,
        )
    )
