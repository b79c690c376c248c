"""Configuration loader for linter settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

from naming_linter.domain.constants import DEFAULT_ENUM_BASES, DEFAULT_INTERFACE_BASES


class ConfigurationLoader:
    """
    Immutable configuration for which classes the naming rules look at.

    Created by Infrastructure from (config_dict, tool_section). Domain does not
    read the filesystem; Infrastructure calls ConfigFileLoader.load_config_from_fs()
    and constructs ConfigurationLoader(config_dict, tool_section) at composition root.
    The naming heuristics themselves are fixed and have no settings here.
    """

    KNOWN_KEYS = frozenset({"enum_bases", "interface_bases", "exclude_paths"})

    def __init__(
        self,
        config_dict: dict[str, object] | None = None,
        tool_section: dict[str, object] | None = None,
    ) -> None:
        """Set config once at construction. No mutable state after init."""
        self._config: dict[str, object] = dict(config_dict or {})
        self._tool_section: dict[str, object] = dict(tool_section or {})
        if self._config:
            self.validate_config(self._config)
        self._enum_bases = self._string_tuple("enum_bases", DEFAULT_ENUM_BASES)
        self._interface_bases = self._string_tuple(
            "interface_bases", DEFAULT_INTERFACE_BASES)
        self._exclude_paths = self._string_tuple("exclude_paths", ())

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about unknown keys and values that are not lists of strings."""
        for key, value in config.items():
            if key not in self.KNOWN_KEYS:
                logging.warning(
                    "Configuration Warning: unknown [tool.naming-linter] key '%s' ignored.", key)
                continue
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                logging.warning(
                    "Configuration Warning: '%s' must be a list of strings; using default.", key)

    def _string_tuple(self, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
        raw = self._config.get(key)
        if isinstance(raw, list) and all(isinstance(v, str) for v in raw):
            return tuple(raw)
        return default

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def tool_section(self) -> dict[str, object]:
        """Return the full [tool] section from pyproject.toml."""
        return self._tool_section

    @property
    def enum_bases(self) -> tuple[str, ...]:
        """Base-class names whose subclasses are checked as enums."""
        return self._enum_bases

    @property
    def interface_bases(self) -> tuple[str, ...]:
        """Base-class names whose subclasses are checked as interfaces."""
        return self._interface_bases

    @property
    def exclude_paths(self) -> tuple[str, ...]:
        """Path fragments to skip, e.g. fixtures with deliberate violations."""
        return self._exclude_paths

    def is_excluded(self, path: str) -> bool:
        normalized = path.replace("\\", "/")
        return any(fragment and fragment in normalized for fragment in self._exclude_paths)
