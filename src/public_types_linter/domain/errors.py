"""Configuration errors raised while resolving rule arguments."""


class RuleConfigurationError(ValueError):
    """Base class for invalid rule arguments."""

    def __init__(self, rule_name: str, message: str) -> None:
        super().__init__(message)
        self.rule_name = rule_name


class ArgumentCountError(RuleConfigurationError):
    """Wrong number of arguments supplied for a rule."""

    def __init__(self, rule_name: str, expected: int, actual: int) -> None:
        super().__init__(
            rule_name,
            f'invalid number of arguments for the "{rule_name}" rule: '
            f"expected {expected}, got {actual}",
        )
        self.expected = expected
        self.actual = actual


class InvalidArgumentTypeError(RuleConfigurationError):
    """An argument could not be read as an integer."""

    def __init__(self, rule_name: str, value: object) -> None:
        super().__init__(
            rule_name,
            f'invalid value passed as argument number to the "{rule_name}" rule: {value!r}',
        )
        self.value = value
