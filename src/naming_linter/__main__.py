"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from naming_linter.infrastructure.di.container import NamingLinterContainer
from naming_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = NamingLinterContainer.get_instance()
    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        gateway=container.get_naming_gateway(),
        registry_service=container.get_registry_service(),
        rules=container.get_rules(),
        reporter=container.get_reporter(),
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
