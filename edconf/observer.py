#!/usr/bin/env python3

"""Hooks for editors that want to watch (or steer) a resolution."""

__all__ = [
    "ResolveObserver",
    "DEFAULT_OBSERVER",
]


class ResolveObserver:
    """Receives control at each step of a resolution.

    Every hook returns True to continue. Subclass and override the hooks you
    care about; the defaults never interfere.
    """

    def process_file(self, path: str) -> bool:
        """Called once before resolving `path`; False returns no properties."""
        return True

    def process_dir(self, directory: str) -> bool:
        """Called before looking into `directory`; False ends the walk."""
        return True

    def process_config(self, config_path: str) -> bool:
        """Called before parsing a discovered config file; False skips it."""
        return True

    def process_line(self, line: str) -> bool:
        """Called with each trimmed line; False skips the line."""
        return True

    def process_option(self, key: str, value: str) -> bool:
        """Called before recording an option of a matching section; False drops it.

        Options are offered once per key and matching section, with the last
        value assigned in that section, after the whole file has been parsed.
        Repeated assignments of a key within a section are not reported.
        """
        return True

    def finished(self, path: str) -> None:
        """Called after `path` has been resolved."""


DEFAULT_OBSERVER = ResolveObserver()
