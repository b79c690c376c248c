"""Load [tool.naming-linter] and [tool] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml, walking up from start."""

    SECTION = "naming-linter"

    @staticmethod
    def load_config_from_fs(
        start: Path | None = None,
    ) -> tuple[dict[str, object], dict[str, object]]:
        """Load [tool.naming-linter] and [tool] from pyproject.toml. Returns (config_dict, tool_section)."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logging.warning("Could not read %s: %s", config_file, exc)
                return (empty, empty)
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(ConfigFileLoader.SECTION, {}) or {}
            return (dict(config_dict), dict(tool_section))
        return (empty, empty)
