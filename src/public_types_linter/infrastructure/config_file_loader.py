"""Load [tool.public-types] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from public_types_linter.domain.constants import CONFIG_SECTION

logger = logging.getLogger(__name__)


class ConfigFileLoader:
    """Loads config from the nearest pyproject.toml."""

    @staticmethod
    def load_config_from_fs(start: Path | None = None) -> dict[str, object]:
        """Return [tool.public-types] from the first pyproject.toml at or above `start`."""
        current_path = (start or Path.cwd()).resolve()
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("Skipping unreadable %s: %s", config_file, exc)
                continue
            tool_section = data.get("tool", {}) or {}
            logger.debug("Loaded configuration from %s", config_file)
            return tool_section.get(CONFIG_SECTION, {}) or {}
        return {}
