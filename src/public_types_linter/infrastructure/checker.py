"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

    pylint --load-plugins=public_types_linter.infrastructure.checker src/
"""

from pylint.lint import PyLinter

from public_types_linter.infrastructure.di.container import PublicTypesContainer
from public_types_linter.use_cases.checks.public_types import PublicTypesChecker


def register(linter: PyLinter) -> None:
    """Register checkers. Each call is a new lint run with its own rule instances."""
    container = PublicTypesContainer()

    linter.register_checker(
        PublicTypesChecker(
            linter,
            rule=container.get_max_public_classes_rule(),
            config_loader=container.get_config_loader(),
            registry=container.get_registry(),
        )
    )
