"""Domain models for rules and their failures."""

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "Arguments",
    "CATEGORY_INTERNAL",
    "CATEGORY_STYLE",
    "Failure",
    "Rule",
]

from typing import Protocol

import astroid

from public_types_linter.domain.errors import RuleConfigurationError

Arguments = Sequence[object]
"""Ordered, loosely-typed rule arguments as supplied by external configuration."""

CATEGORY_STYLE = "style"
CATEGORY_INTERNAL = "internal"


@dataclass(frozen=True)
class Failure:
    """A single finding reported by a rule for one file."""

    message: str
    confidence: float = 1.0
    category: str = CATEGORY_STYLE
    node: astroid.nodes.NodeNG | None = None
    """Node the failure is reported on. None for internal failures."""
    message_args: tuple[str, ...] = ()
    """Values interpolated into the message, for reporters that format their own text."""

    @classmethod
    def internal(cls, error: RuleConfigurationError) -> "Failure":
        """Build the failure reported when a rule could not be configured."""
        message = str(error)
        return cls(
            message=message,
            confidence=1.0,
            category=CATEGORY_INTERNAL,
            message_args=(message,),
        )

    @property
    def is_internal(self) -> bool:
        return self.category == CATEGORY_INTERNAL


# -----------------------------------------------------------------------------
# Rule protocol: a name plus apply(tree, arguments). The engine keeps a
# collection of heterogeneous rules behind it; no base class is required.
# -----------------------------------------------------------------------------


class Rule(Protocol):
    """A lint rule applied once per file."""

    name: str

    def apply(self, tree: astroid.nodes.Module, arguments: Arguments) -> list[Failure]:
        """Return the failures for one file. Arguments are used on first configuration only."""
        ...
