"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so `tests.unit.checker_test_utils` and
`public_types_linter` import without installation.
"""
