"""Port: configuration file locator."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from alembiqa.l1_entities.config_file import ConfigFileRef


class ConfigLocator(Protocol):
    """Finds the project's config file without reading it."""

    def locate(self, root_dir: Path) -> ConfigFileRef | None:
        """Return the first recognised config file under *root_dir*, or None. Never raises."""
        ...
