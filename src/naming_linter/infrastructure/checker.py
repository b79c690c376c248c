"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

    pylint --load-plugins=naming_linter.infrastructure.checker src/
"""

from pylint.lint import PyLinter

from naming_linter.infrastructure.di.container import NamingLinterContainer
from naming_linter.use_cases.checks.naming import NamingConventionChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = NamingLinterContainer.get_instance()
    linter.register_checker(
        NamingConventionChecker(
            linter,
            gateway=container.get_naming_gateway(),
            config_loader=container.get_config_loader(),
            registry=container.get_registry_service().get_registry(),
            rules=container.get_rules(),
        )
    )
