#!/usr/bin/env python3

"""Parser for the .editorconfig file format."""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import ParseError, PatternError
from .glob_pattern import make_matcher
from .observer import DEFAULT_OBSERVER, ResolveObserver

__all__ = [
    "Section",
    "ConfigSource",
    "parse_config",
    "strip_inline_comment",
]

LINE_BREAK = re.compile(r"\r\n|\r|\n")

# The header ends at the last ] that leaves only non-comment characters before it
SECTION_PATTERN = re.compile(r"\s*\[((?:[^#;]|\\#|\\;)+)\].*")
OPTION_PATTERN = re.compile(r"\s*([^:=\s][^:=]*)\s*[:=]\s*(.*)")

BOM = "\ufeff"


@dataclass
class Section:
    """A section header and the options declared under it."""

    header: str
    options: Dict[str, str] = field(default_factory=dict)
    line: str = ""  # The header line as written

    def matches(self, path: str, base_dir: str) -> bool:
        return make_matcher(self.header, base_dir).matches(path)


@dataclass
class ConfigSource:
    """A parsed config file."""

    is_root: bool
    sections: List[Section]

    def options_for(
        self,
        path: str,
        base_dir: str,
        observer: ResolveObserver = DEFAULT_OBSERVER,
    ) -> Dict[str, str]:
        """Merge the options of every section matching a path.

        Args:
            path: Full path of the file being resolved, using / as separator
            base_dir: Directory containing the config file
            observer: Receives each option before it is recorded

        Returns:
            The merged options; later sections override earlier ones

        Raises:
            ParseError: If a header cannot be compiled relative to base_dir
        """
        options: Dict[str, str] = {}
        bad_headers: List[str] = []
        for section in self.sections:
            try:
                matched = section.matches(path, base_dir)
            except PatternError as e:
                logging.debug(f"Cannot compile section header {section.line}: {e}")
                bad_headers.append(section.line)
                continue

            logging.debug(
                f"Section [{section.header}] {'matches' if matched else 'does not match'} {path}"
            )
            if not matched:
                continue

            for key, value in section.options.items():
                if observer.process_option(key, value):
                    options[key] = value

        if bad_headers:
            raise ParseError(bad_headers)
        return options


def strip_inline_comment(value: str) -> str:
    """Remove a trailing ' ;' or ' #' comment from an option value."""
    comment_pos = value.find(" ;")
    if comment_pos < 0:
        comment_pos = value.find(" #")
    return value[:comment_pos] if comment_pos >= 0 else value


def parse_config(
    text: str, observer: ResolveObserver = DEFAULT_OBSERVER
) -> ConfigSource:
    """Parse the contents of one config file.

    Every line is scanned even after a malformed one, so the error names all
    of them.

    Args:
        text: The decoded file contents
        observer: Receives each trimmed line and may skip it

    Returns:
        A ConfigSource with the root flag and the sections in file order

    Raises:
        ParseError: If any line is neither blank, a comment, a section
            header nor an option
    """
    malformed: List[str] = []
    is_root = False
    sections: List[Section] = []
    section: Optional[Section] = None

    for line in LINE_BREAK.split(text):
        line = line.strip()
        if line.startswith(BOM):
            line = line[1:].lstrip()

        if not observer.process_line(line):
            continue
        if not line or line[0] in "#;":
            continue

        header_match = SECTION_PATTERN.fullmatch(line)
        if header_match:
            header = header_match.group(1).replace("\\#", "#").replace("\\;", ";")
            section = Section(header=header, line=line)
            try:
                make_matcher(header, "/")
            except PatternError as e:
                logging.debug(f"Malformed section header {line}: {e}")
                malformed.append(line)
                continue
            sections.append(section)
            continue

        option_match = OPTION_PATTERN.fullmatch(line)
        if option_match:
            key = option_match.group(1).strip().lower()
            value = option_match.group(2)
            if value == '""':
                value = ""

            if section is None:
                # Only root= means anything outside a section
                if key == "root":
                    is_root = value.lower() == "true"
            else:
                section.options[key] = strip_inline_comment(value)
            continue

        malformed.append(line)

    if malformed:
        raise ParseError(malformed)

    return ConfigSource(is_root=is_root, sections=sections)
