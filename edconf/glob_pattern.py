"""
EditorConfig glob implementation: translates section headers to regular expressions.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import PatternError

__all__ = [
    "NumericRange",
    "CompiledMatcher",
    "translate_pattern",
    "anchor_pattern",
    "make_matcher",
    "pattern_matches",
]

NUMERIC_RANGE = re.compile(r"([+-]?[0-9]+)\.\.([+-]?[0-9]+)")
GLOB_SPECIAL = re.compile(r"([\\*?\[\]{},])")


@dataclass(frozen=True)
class NumericRange:
    """Inclusive bounds for one {n..m} capture."""

    min: int
    max: int

    def __contains__(self, number: int) -> bool:
        return self.min <= number <= self.max


@dataclass(frozen=True)
class CompiledMatcher:
    """A compiled section header.

    The regular expression only checks the shape of the path; numeric ranges
    are validated separately, one per capturing group, in order.
    """

    pattern: str  # The anchored glob this matcher was built from
    regex: "re.Pattern[str]"
    ranges: Tuple[NumericRange, ...]

    def matches(self, path: str) -> bool:
        """Test whether a full path matches this header.

        Args:
            path: The path to test, using / as separator

        Returns:
            True if the path matches and every numeric capture is in range
        """
        found = self.regex.fullmatch(path)
        if found is None:
            return False

        for index, numeric_range in enumerate(self.ranges):
            number = found.group(index + 1)
            # "007" is not a spelling of 7
            if number is None or number.startswith("0"):
                return False
            if int(number) not in numeric_range:
                return False
        return True


def _find_char(pattern: str, char: str, stop_at: str, start: int) -> Tuple[bool, int]:
    """Scan for an unescaped `char` before the next unescaped `stop_at`.

    Returns:
        (True, index of char) if found, else (False, index of stop_at or len(pattern))
    """
    j = start
    n = len(pattern)
    escaped = False
    while j < n and (pattern[j] != stop_at or escaped):
        if pattern[j] == char and not escaped:
            return True, j
        escaped = pattern[j] == "\\" and not escaped
        j += 1
    return False, j


def _count_unescaped(pattern: str, char: str) -> int:
    count = 0
    escaped = False
    for c in pattern:
        if c == char and not escaped:
            count += 1
        escaped = c == "\\" and not escaped
    return count


def _numeric_range(body: str) -> Optional[NumericRange]:
    bounds = NUMERIC_RANGE.fullmatch(body)
    if bounds is None:
        return None
    return NumericRange(int(bounds.group(1)), int(bounds.group(2)))


def _escape_literal(c: str) -> str:
    if c == " " or c.isalpha() or c.isdigit() or c in "_-":
        return c
    if c == "\n":
        return "\\n"
    return "\\" + c


def _translate(pattern: str, ranges: List[NumericRange]) -> str:
    i, n = 0, len(pattern)
    result: List[str] = []

    brace_level = 0
    # {a,b} alternation is only enabled when unescaped braces are balanced
    matching_braces = _count_unescaped(pattern, "{") == _count_unescaped(pattern, "}")

    # Handle escaped characters
    escaped = False

    while i < n:
        c = pattern[i]
        i += 1

        if escaped:
            # If character was escaped with backslash, add it literally
            result.append(re.escape(c))
            escaped = False
            continue

        if c == "\\":
            escaped = True

        elif c == "*":
            if i < n and pattern[i] == "*":
                # ** matches any string, separators included
                result.append(".*")
                i += 1
            else:
                result.append("[^/]*")

        elif c == "?":
            result.append(".")

        elif c == "[":
            slash_found, j = _find_char(pattern, "/", "]", i)
            if slash_found or j >= n:
                # Classes never span a separator; an unclosed [ is literal
                result.append("\\[")
            elif pattern[i] in "!^":
                i += 1
                result.append("[^")
            else:
                result.append("[")

        elif c == "]":
            result.append("]")

        elif c == "{":
            comma_found, j = _find_char(pattern, ",", "}", i)
            if not comma_found and j < n:
                # {num1..num2} or a single choice like {foo}
                brace_content = pattern[i:j]
                numeric_range = _numeric_range(brace_content)
                if numeric_range is not None:
                    result.append("([0-9]+)")
                    ranges.append(numeric_range)
                else:
                    result.append("\\{" + _translate(brace_content, ranges) + "\\}")
                i = j + 1
            elif matching_braces:
                result.append("(?:")
                brace_level += 1
            else:
                result.append("\\{")

        elif c == ",":
            if brace_level > 0:
                result.append("|")
                while i < n and pattern[i] == " ":
                    i += 1
            else:
                result.append(",")

        elif c == "/":
            if pattern.startswith("**/", i):
                # /**/ matches zero or more directories
                result.append("(?:/|/.*/)")
                i += 3
            else:
                result.append("/")

        elif c == "}":
            if brace_level > 0:
                result.append(")")
                brace_level -= 1
            else:
                result.append("}")

        else:
            result.append(_escape_literal(c))

    return "".join(result)


def translate_pattern(pattern: str) -> Tuple[str, List[NumericRange]]:
    """
    Translate an EditorConfig glob pattern to a regular expression pattern.

    Args:
        pattern: The glob pattern to translate

    Returns:
        The regular expression (to be used with fullmatch) and the numeric
        ranges of its capturing groups, in group order
    """
    ranges: List[NumericRange] = []
    return _translate(pattern, ranges), ranges


def anchor_pattern(pattern: str, base_dir: str) -> str:
    """Anchor a section header to the directory of its config file.

    Headers containing a / are relative to base_dir; the others match at any
    depth below it. The directory itself is always matched literally.
    """
    base = base_dir.replace(os.sep, "/")
    if not base.endswith("/"):
        base += "/"
    base = GLOB_SPECIAL.sub(r"\\\1", base)

    if "/" in pattern:
        if pattern.startswith("/"):
            pattern = pattern[1:]
        return base + pattern
    return base + "**/" + pattern


def make_matcher(pattern: str, base_dir: str) -> CompiledMatcher:
    """
    Compile a section header into a matcher.

    Args:
        pattern: The glob pattern from the section header
        base_dir: Directory containing the config file the header came from

    Returns:
        A CompiledMatcher for full paths

    Raises:
        PatternError: If the translated pattern is not a valid regular expression
    """
    anchored = anchor_pattern(pattern, base_dir)
    regex_pattern, ranges = translate_pattern(anchored)
    logging.debug(f"Translated glob '{anchored}' to regex '{regex_pattern}'")
    for numeric_range in ranges:
        logging.debug(f"numeric range: {{{numeric_range.min}..{numeric_range.max}}}")

    try:
        regex = re.compile(regex_pattern)
    except re.error as e:
        raise PatternError(f"Invalid pattern '{pattern}': {e}") from e

    return CompiledMatcher(pattern=anchored, regex=regex, ranges=tuple(ranges))


def pattern_matches(base_dir: str, pattern: str, path: str) -> bool:
    """
    Test whether a path matches a section header pattern.

    Args:
        base_dir: Directory the pattern is relative to
        pattern: The glob pattern to match against
        path: The full path to test

    Returns:
        True if the path matches the pattern, False otherwise
    """
    matcher = make_matcher(pattern, base_dir)
    return matcher.matches(path.replace(os.sep, "/"))
