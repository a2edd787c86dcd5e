"""Max public classes rule: limits the number of public class declarations per file."""

import logging
import threading
from typing import ClassVar

import astroid

from public_types_linter.domain.arguments import ArgumentResolver
from public_types_linter.domain.errors import RuleConfigurationError
from public_types_linter.domain.rules import CATEGORY_STYLE, Arguments, Failure

logger = logging.getLogger(__name__)


class PublicClassCounter:
    """Counts public class declarations with a single pre-order walk of a tree."""

    def __init__(self) -> None:
        self.current = 0

    def count(self, tree: astroid.nodes.NodeNG) -> int:
        """Walk every node under `tree` (nested scopes included) and return the count."""
        stack = [tree]
        while stack:
            node = stack.pop()
            self.visit(node)
            # Reversed so children pop in source order.
            stack.extend(reversed(list(node.get_children())))
        return self.current

    def visit(self, node: astroid.nodes.NodeNG) -> None:
        if self.is_public(self.declared_name(node)):
            self.current += 1

    @staticmethod
    def declared_name(node: astroid.nodes.NodeNG) -> str | None:
        """Name of a type declaration (class or `type X = ...` alias); None for other nodes."""
        if isinstance(node, astroid.nodes.ClassDef):
            return node.name
        if isinstance(node, astroid.nodes.TypeAlias):
            return getattr(node.name, "name", None)
        return None

    @staticmethod
    def is_public(name: str | None) -> bool:
        """A name is public when its first character is its own upper-case form."""
        if not name:
            return False
        first = name[0]
        return first.upper() == first


class MaxPublicClassesRule:
    """
    Reports a file that declares more public classes than the configured maximum.

    One instance is shared by every file of a run. Arguments are resolved on the
    first apply() only; the resolved maximum (or the configuration error) is
    then fixed for the instance's lifetime.
    """

    name: ClassVar[str] = "max-public-classes"
    DEFAULT_MAX: ClassVar[int] = 5

    def __init__(self) -> None:
        self._max = self.DEFAULT_MAX
        self._configure_error: RuleConfigurationError | None = None
        self._configured = False
        self._configure_lock = threading.Lock()

    @property
    def max(self) -> int:
        """Resolved maximum. DEFAULT_MAX until the first apply()."""
        return self._max

    @property
    def configured(self) -> bool:
        return self._configured

    def _configure(self, arguments: Arguments) -> None:
        if len(arguments) < 1:
            self._max = self.DEFAULT_MAX
            return
        ArgumentResolver.check_count(1, arguments, self.name)
        self._max = ArgumentResolver.to_int(arguments[0], self.name)

    def _configure_once(self, arguments: Arguments) -> None:
        if self._configured:
            return
        with self._configure_lock:
            if self._configured:
                return
            try:
                self._configure(arguments)
                logger.debug("%s: maximum resolved to %d", self.name, self._max)
            except RuleConfigurationError as exc:
                self._configure_error = exc
                logger.warning("%s: %s", self.name, exc)
            self._configured = True

    def apply(self, tree: astroid.nodes.Module, arguments: Arguments) -> list[Failure]:
        """Count public classes in `tree`; return one failure if over the maximum."""
        self._configure_once(arguments)
        if self._configure_error is not None:
            return [Failure.internal(self._configure_error)]

        failures: list[Failure] = []
        if self._max < 1:
            return failures

        current = PublicClassCounter().count(tree)
        logger.debug(
            "%s: %s declares %d public classes",
            self.name,
            getattr(tree, "name", "?"),
            current,
        )
        if current > self._max:
            failures.append(
                Failure(
                    message=f"you have exceeded the maximum number ({self._max}) of public class declarations",
                    confidence=1.0,
                    category=CATEGORY_STYLE,
                    node=tree,
                    message_args=(str(self._max),),
                )
            )
        return failures
