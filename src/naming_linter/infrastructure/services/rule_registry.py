"""RuleRegistryService: loads the rule registry and the message catalog built from it."""

import logging
from pathlib import Path
from typing import cast

import yaml

from naming_linter.domain.registry_types import RuleRegistryEntry
from naming_linter.domain.rule_msgs import MessageCatalog, RuleMsgBuilder


class RuleRegistryService:
    """Loads rule_registry.yaml once; exposes the registry, catalog and entry lookup."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()
        self._catalog = MessageCatalog.from_registry(self._registry)

    def _load(self) -> None:
        if not self._path.exists():
            logging.warning("Rule registry not found at %s; messages fall back to ids.", self._path)
            self._registry = {}
            return
        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            self._registry = (
                cast(dict[str, RuleRegistryEntry], data) if isinstance(data, dict) else {}
            )

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return a shallow copy of the loaded registry for use by domain/use_cases."""
        return dict(self._registry)

    def get_catalog(self) -> MessageCatalog:
        return self._catalog

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        """Return the registry entry for a pylint code, symbol or message id."""
        return RuleMsgBuilder.get_entry(self._registry, rule_code)

    def get_code(self, message_id: str) -> str | None:
        return RuleMsgBuilder.code_for(self._registry, message_id)
