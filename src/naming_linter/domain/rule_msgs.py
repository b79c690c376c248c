"""Pure message-building from a registry dict. No I/O or infrastructure imports."""

import re
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Final, cast

from naming_linter.domain.constants import LINTER_PREFIX
from naming_linter.domain.entities import ViolationRecord
from naming_linter.domain.registry_types import RuleRegistryEntry

_PLACEHOLDER: Final = re.compile(r"\{(\w+)\}")


class MessageCatalog:
    """
    Immutable message_id -> template mapping with {name}-style placeholders.

    Built once from the rule registry and shared read-only afterwards.
    """

    def __init__(self, templates: Mapping[str, str]) -> None:
        self._templates: Mapping[str, str] = MappingProxyType(dict(templates))

    @classmethod
    def from_registry(cls, registry: Mapping[str, RuleRegistryEntry]) -> "MessageCatalog":
        templates: dict[str, str] = {}
        for entry in RuleMsgBuilder.iter_entries(registry):
            message_id = entry.get("message_id")
            template = entry.get("message_template")
            if message_id and template:
                templates[message_id] = template
        return cls(templates)

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def message_ids(self) -> tuple[str, ...]:
        return tuple(self._templates)

    def template(self, message_id: str) -> str | None:
        return self._templates.get(message_id)

    def placeholders(self, message_id: str) -> tuple[str, ...]:
        """Placeholder names of a template, in order of appearance."""
        template = self._templates.get(message_id, "")
        return tuple(_PLACEHOLDER.findall(template))

    def render(self, message_id: str, data: Mapping[str, str] | None = None) -> str:
        """Interpolate data into the template. Unknown placeholders stay as written."""
        template = self._templates.get(message_id)
        if template is None:
            return message_id
        values = data or {}
        return _PLACEHOLDER.sub(
            lambda match: values.get(match.group(1), match.group(0)), template)

    def render_violation(self, violation: ViolationRecord) -> str:
        return self.render(violation.message_id, violation.data)


class RuleMsgBuilder:
    """Builds Pylint msgs dict and message args from a registry mapping."""

    @staticmethod
    def iter_entries(
        registry: Mapping[str, RuleRegistryEntry],
    ) -> Iterator[RuleRegistryEntry]:
        for rule_key, entry in registry.items():
            if rule_key.startswith(LINTER_PREFIX) and isinstance(entry, dict):
                yield entry

    @staticmethod
    def get_entry(
        registry: Mapping[str, RuleRegistryEntry], rule_code: str
    ) -> RuleRegistryEntry | None:
        """Return registry entry by pylint code, symbol or camelCase message id."""
        entry = registry.get(f"{LINTER_PREFIX}{rule_code}")
        if isinstance(entry, dict):
            return cast(RuleRegistryEntry, dict(entry))
        for candidate in RuleMsgBuilder.iter_entries(registry):
            if rule_code in (candidate.get("symbol"), candidate.get("message_id")):
                return cast(RuleRegistryEntry, dict(candidate))
        return None

    @staticmethod
    def code_for(registry: Mapping[str, RuleRegistryEntry], message_id: str) -> str | None:
        """Return the pylint code (e.g. C9401) registered for a message id."""
        for rule_key, entry in registry.items():
            if not rule_key.startswith(LINTER_PREFIX) or not isinstance(entry, dict):
                continue
            if entry.get("message_id") == message_id:
                return rule_key[len(LINTER_PREFIX):]
        return None

    @staticmethod
    def to_pylint_template(template: str) -> str:
        """Turn {name} placeholders into positional %s.

        Pylint only %-formats messages that carry args, so literal percent
        signs are escaped only when the template has placeholders.
        """
        if not _PLACEHOLDER.search(template):
            return template
        return _PLACEHOLDER.sub("%s", template.replace("%", "%%"))

    @staticmethod
    def build_msgs(
        registry: Mapping[str, RuleRegistryEntry], codes: Iterable[str] | None = None
    ) -> dict[str, tuple[str, str, str]]:
        """Build Pylint msgs dict from a registry mapping.

        Registry keys are e.g. 'naming.C9401'. Returns
        { code: (message_template, symbol, description) } for checker.msgs,
        restricted to codes when given.
        """
        wanted = set(codes) if codes is not None else None
        result: dict[str, tuple[str, str, str]] = {}
        for rule_key, entry in registry.items():
            if not rule_key.startswith(LINTER_PREFIX) or not isinstance(entry, dict):
                continue
            code = rule_key[len(LINTER_PREFIX):]
            if wanted is not None and code not in wanted:
                continue
            template = entry.get("message_template")
            if not template:
                continue
            symbol = entry.get("symbol") or code
            desc = entry.get("short_description") or entry.get("display_name") or code
            result[code] = (
                RuleMsgBuilder.to_pylint_template(str(template)),
                str(symbol),
                str(desc),
            )
        return result

    @staticmethod
    def message_args(catalog: MessageCatalog, violation: ViolationRecord) -> tuple[str, ...]:
        """Positional args for add_message, matching the template's placeholders."""
        return tuple(
            violation.data.get(name, "")
            for name in catalog.placeholders(violation.message_id)
        )
