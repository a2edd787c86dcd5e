"""Helpers for reading loosely-typed rule arguments."""

from collections.abc import Sequence

from public_types_linter.domain.errors import ArgumentCountError, InvalidArgumentTypeError


class ArgumentResolver:
    """
    Validates argument lists handed to rules by external configuration.

    Values come from TOML tables or Pylint options, so they may arrive as
    ints, floats or strings.
    """

    @staticmethod
    def check_count(expected: int, arguments: Sequence[object], rule_name: str) -> None:
        """Raise ArgumentCountError unless exactly `expected` arguments were given."""
        if len(arguments) != expected:
            raise ArgumentCountError(rule_name, expected, len(arguments))

    @staticmethod
    def to_int(value: object, rule_name: str) -> int:
        """Return the integer `value` represents, or raise InvalidArgumentTypeError."""
        # bool is an int subclass; `true` in a config file is not a maximum.
        if isinstance(value, bool):
            raise InvalidArgumentTypeError(rule_name, value)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip(), 10)
            except ValueError:
                raise InvalidArgumentTypeError(rule_name, value) from None
        raise InvalidArgumentTypeError(rule_name, value)
