"""L1 entity: a discovered config file and its format."""

from __future__ import annotations

import enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ConfigFormat(enum.Enum):
    YAML = 'yaml'
    JSON = 'json'

    @classmethod
    def from_path(cls, path: Path) -> ConfigFormat | None:
        """Format implied by the file suffix, or None when it is not recognised."""
        return _SUFFIX_FORMATS.get(path.suffix.lower())


_SUFFIX_FORMATS = {
    '.yml': ConfigFormat.YAML,
    '.yaml': ConfigFormat.YAML,
    '.json': ConfigFormat.JSON,
}


class ConfigFileRef(BaseModel):
    """Path of a located config file tagged with its format."""

    model_config = ConfigDict(frozen=True)

    path: Path
    format: ConfigFormat
