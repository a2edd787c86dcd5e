"""Configuration loader for rule settings. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Immutable configuration read from the [tool.public-types] table.

    Domain does not read the filesystem; Infrastructure calls
    ConfigFileLoader.load_config_from_fs() and constructs
    ConfigurationLoader(config_dict) at the composition root.
    """

    def __init__(
        self,
        config_dict: dict[str, object],
    ) -> None:
        self._config = config_dict
        if config_dict:
            self.validate_config(config_dict)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about a malformed rules table; it is ignored rather than rejected."""
        rules = config.get("rules")
        if rules is not None and not isinstance(rules, dict):
            logger.warning(
                "Configuration Warning: [tool.public-types] 'rules' must be a table, got %s.",
                type(rules).__name__,
            )

    @property
    def config(self) -> dict[str, object]:
        """Return the loaded configuration."""
        return self._config

    @property
    def rules_config(self) -> dict[str, object]:
        """Return the [tool.public-types.rules] table."""
        raw = self._config.get("rules", {})
        return raw if isinstance(raw, dict) else {}

    def is_rule_enabled(self, rule_name: str) -> bool:
        """A rule is disabled only by an explicit `false` entry."""
        return self.rules_config.get(rule_name) is not False

    def arguments_for(self, rule_name: str) -> list[object]:
        """
        Return the argument list configured for `rule_name`.

        `rule = [3]` is used as given; the scalar shorthand `rule = 3` becomes [3].
        Missing entries and on/off booleans yield [] (rule defaults).
        """
        raw = self.rules_config.get(rule_name)
        if raw is None or isinstance(raw, bool):
            return []
        if isinstance(raw, (list, tuple)):
            return list(raw)
        return [raw]
