#!/usr/bin/env python3

from typing import Dict, Mapping

__all__ = [
    "LOWERCASE_VALUE_KEYS",
    "normalize_properties",
]

# Options whose values are case-insensitive
LOWERCASE_VALUE_KEYS = (
    "end_of_line",
    "indent_style",
    "indent_size",
    "insert_final_newline",
    "trim_trailing_whitespace",
    "charset",
)


def normalize_properties(properties: Mapping[str, str]) -> Dict[str, str]:
    """Apply the EditorConfig post-processing rules to resolved properties.

    Args:
        properties: The merged properties of the whole cascade

    Returns:
        A new dict with known values lowercased and tab_width/indent_size
        filled in from each other
    """
    result = dict(properties)

    for key in LOWERCASE_VALUE_KEYS:
        if key in result:
            result[key] = result[key].lower()

    indent_size = result.get("indent_size")
    if indent_size is not None and indent_size != "tab" and "tab_width" not in result:
        result["tab_width"] = indent_size

    tab_width = result.get("tab_width")
    if indent_size == "tab" and tab_width is not None:
        result["indent_size"] = tab_width

    return result
