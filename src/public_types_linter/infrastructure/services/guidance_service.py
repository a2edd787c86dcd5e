"""GuidanceService: loads the rule registry (message templates, symbols, descriptions)."""

import logging
from pathlib import Path
from typing import cast

import yaml

from public_types_linter.domain.registry_types import RuleRegistryEntry
from public_types_linter.domain.rule_msgs import RuleMsgBuilder

logger = logging.getLogger(__name__)


class GuidanceService:
    """Loads rule_registry.yaml and serves its entries."""

    def __init__(self, registry_path: str | None = None) -> None:
        if registry_path is not None:
            self._path = Path(registry_path)
        else:
            # Default: packaged resource next to this package
            _base = Path(__file__).resolve().parent.parent.parent
            self._path = _base / "resources" / "rule_registry.yaml"
        self._registry: dict[str, RuleRegistryEntry] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning("Rule registry not found at %s", self._path)
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

    def get_entry(self, rule_code: str) -> RuleRegistryEntry | None:
        """Return the registry entry for a message code or symbol."""
        return RuleMsgBuilder.get_entry(self._registry, rule_code)
