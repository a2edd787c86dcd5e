from typing import Any, cast

from public_types_linter.domain.config import ConfigurationLoader
from public_types_linter.domain.registry_types import RuleRegistryEntry
from public_types_linter.domain.rules.max_public_classes import MaxPublicClassesRule
from public_types_linter.infrastructure.config_file_loader import ConfigFileLoader
from public_types_linter.infrastructure.services.guidance_service import GuidanceService


class PublicTypesContainer:
    """
    Dependency Injection Container for the public-types plugin.

    One container per lint run: rule instances registered here are shared by
    every file of that run and discarded with it.
    """

    def __init__(self, config_loader: ConfigurationLoader | None = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config_loader)

    def _register_defaults(self, config_loader: ConfigurationLoader | None) -> None:
        """Register default implementations."""
        if config_loader is None:
            config_loader = ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        self.register_singleton("ConfigurationLoader", config_loader)
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton(MaxPublicClassesRule.name, MaxPublicClassesRule())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_guidance_service(self) -> GuidanceService:
        """Return the guidance service (rule registry)."""
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_registry(self) -> dict[str, RuleRegistryEntry]:
        """Return the rule message registry."""
        return self.get_guidance_service().get_registry()

    def get_max_public_classes_rule(self) -> MaxPublicClassesRule:
        """Return the max-public-classes rule shared by this run."""
        return cast(MaxPublicClassesRule, self.get(MaxPublicClassesRule.name))
