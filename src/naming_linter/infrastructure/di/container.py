from typing import TYPE_CHECKING, Any, Optional, cast

from naming_linter.domain.config import ConfigurationLoader
from naming_linter.domain.rules.enum_naming import EnumNamingRule
from naming_linter.domain.rules.interface_naming import InterfaceNamingRule
from naming_linter.infrastructure.config_file_loader import ConfigFileLoader
from naming_linter.infrastructure.gateways.astroid_gateway import AstroidNamingGateway
from naming_linter.infrastructure.reporters import TerminalViolationReporter
from naming_linter.infrastructure.services.rule_registry import RuleRegistryService

if TYPE_CHECKING:
    from naming_linter.domain.protocols import (
        NamingGatewayProtocol,
        ViolationReporterProtocol,
    )
    from naming_linter.domain.rules import NamingRule


class NamingLinterContainer:
    """Dependency Injection Container for the naming linter."""

    _instance: Optional["NamingLinterContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    @classmethod
    def get_instance(cls) -> "NamingLinterContainer":
        """Return the process-wide container, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, tool_section = ConfigFileLoader.load_config_from_fs()
        config_loader = ConfigurationLoader(config_dict, tool_section)
        self.register_singleton("ConfigurationLoader", config_loader)

        self.register_singleton(
            "NamingGateway",
            AstroidNamingGateway(
                enum_bases=config_loader.enum_bases,
                interface_bases=config_loader.interface_bases,
            ),
        )
        registry_service = RuleRegistryService()
        self.register_singleton("RuleRegistryService", registry_service)
        self.register_singleton(
            "NamingRules", (EnumNamingRule(), InterfaceNamingRule()))
        self.register_singleton(
            "ViolationReporter", TerminalViolationReporter(registry_service))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_naming_gateway(self) -> "NamingGatewayProtocol":
        return cast("NamingGatewayProtocol", self.get("NamingGateway"))

    def get_registry_service(self) -> RuleRegistryService:
        return cast(RuleRegistryService, self.get("RuleRegistryService"))

    def get_rules(self) -> tuple["NamingRule", ...]:
        return cast("tuple[NamingRule, ...]", self.get("NamingRules"))

    def get_reporter(self) -> "ViolationReporterProtocol":
        return cast("ViolationReporterProtocol", self.get("ViolationReporter"))
