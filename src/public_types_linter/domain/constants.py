"""Shared constants."""

RULE_PREFIX = "public-types."
"""Registry key prefix, e.g. 'public-types.C9501'."""

CONFIG_SECTION = "public-types"
"""Table name under [tool] in pyproject.toml."""

MSG_MAX_PUBLIC_CLASSES = "C9501"
MSG_CONFIG_ERROR = "E9502"
