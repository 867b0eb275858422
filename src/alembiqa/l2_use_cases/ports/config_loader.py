"""Port: configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from alembiqa.l1_entities.config import AlembiqaConfig


class ConfigLoader(Protocol):
    """Abstract configuration loader."""

    async def load(self, root_dir: Path) -> AlembiqaConfig:
        """Locate, read, parse and validate the config. Raises AlembiqaConfigError subclasses."""
        ...
