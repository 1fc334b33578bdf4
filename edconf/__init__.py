#!/usr/bin/env python3

from .errors import EditorConfigError, ParseError, PatternError, VersionError
from .filesystem import FileSystem, LocalFileSystem, MemoryFileSystem
from .glob_pattern import CompiledMatcher, NumericRange, make_matcher, pattern_matches
from .main import cli, configure_logging
from .normalize import normalize_properties
from .observer import ResolveObserver
from .resolver import Resolver, get_properties, resolve
from .sections import ConfigSource, Section, parse_config
from .version import VERSION

__all__ = [
    "VERSION",
    "Resolver",
    "resolve",
    "get_properties",
    "pattern_matches",
    "make_matcher",
    "CompiledMatcher",
    "NumericRange",
    "parse_config",
    "ConfigSource",
    "Section",
    "normalize_properties",
    "ResolveObserver",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "EditorConfigError",
    "ParseError",
    "PatternError",
    "VersionError",
    "configure_logging",
    "cli",
]
