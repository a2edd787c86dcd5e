"""Public type checks (C9501, E9502)."""

from collections.abc import Mapping
from typing import TYPE_CHECKING

import astroid
from pylint.checkers import BaseChecker
from pylint.interfaces import HIGH, UNDEFINED, Confidence

if TYPE_CHECKING:
    from pylint.lint import PyLinter

from public_types_linter.domain.config import ConfigurationLoader
from public_types_linter.domain.constants import MSG_CONFIG_ERROR, MSG_MAX_PUBLIC_CLASSES
from public_types_linter.domain.registry_types import RuleRegistryEntry
from public_types_linter.domain.rule_msgs import RuleMsgBuilder
from public_types_linter.domain.rules import Failure
from public_types_linter.domain.rules.max_public_classes import MaxPublicClassesRule


class PublicTypesChecker(BaseChecker):
    """C9501 (Max Public Classes), E9502 (rule configuration error). Thin: delegates to MaxPublicClassesRule."""

    name: str = "public-types"
    CODES = [MSG_MAX_PUBLIC_CLASSES, MSG_CONFIG_ERROR]

    options = (
        (
            "max-public-classes",
            {
                "default": None,
                "type": "int",
                "metavar": "<int>",
                "help": "Maximum number of public classes per module. Overrides "
                "[tool.public-types.rules] in pyproject.toml; a value below 1 disables the check.",
            },
        ),
    )

    def __init__(
        self,
        linter: "PyLinter",
        rule: MaxPublicClassesRule,
        config_loader: ConfigurationLoader,
        registry: Mapping[str, RuleRegistryEntry],
    ) -> None:
        self.msgs = RuleMsgBuilder.build_msgs_for_codes(
            registry, self.CODES)  # type: ignore[assignment]
        super().__init__(linter)
        self.config_loader = config_loader
        self._rule = rule

    def _arguments(self) -> list[object]:
        override = getattr(self.linter.config, "max_public_classes", None)
        if override is not None:
            return [override]
        return self.config_loader.arguments_for(self._rule.name)

    def visit_module(self, node: astroid.nodes.Module) -> None:
        """Delegate to the rule; report each failure via add_message."""
        if not self.config_loader.is_rule_enabled(self._rule.name):
            return
        for failure in self._rule.apply(node, self._arguments()):
            self._report(failure, node)

    def _report(self, failure: Failure, module: astroid.nodes.Module) -> None:
        if failure.is_internal:
            self.add_message(
                MSG_CONFIG_ERROR,
                node=module,
                args=failure.message_args or (failure.message,),
                confidence=UNDEFINED,
            )
            return
        self.add_message(
            MSG_MAX_PUBLIC_CLASSES,
            node=failure.node if failure.node is not None else module,
            args=failure.message_args,
            confidence=self._confidence(failure.confidence),
        )

    @staticmethod
    def _confidence(score: float) -> Confidence:
        return HIGH if score >= 1.0 else UNDEFINED
