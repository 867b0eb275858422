"""Gateway: default config template — shipped as package data, written by ``init``."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

from alembiqa.l1_entities.errors import ConfigExistsError
from alembiqa.l3_interface_adapters.gateways.paths import CONFIG_CANDIDATES, YAML_CONFIG_NAME

_TEMPLATE = resources.files('alembiqa') / 'templates' / 'default.alembiqa.yml'

log = logging.getLogger('alembiqa.config')


def default_config_text() -> str:
    """Return the bundled default configuration YAML."""
    return _TEMPLATE.read_text(encoding='utf-8')


def write_default_config(root_dir: Path, *, force: bool = False) -> Path:
    """Write the default config to ``<root_dir>/.alembiqa.yml`` and return its path.

    - No config present → write it.
    - Either candidate already present → raise ConfigExistsError unless *force*.
    - *force* → overwrite ``.alembiqa.yml`` (an existing JSON config is left alone,
      but loses priority to the new YAML file).
    """
    root_dir = Path(root_dir)
    if not force:
        for name in CONFIG_CANDIDATES:
            existing = root_dir / name
            if existing.exists():
                raise ConfigExistsError(existing)
    path = root_dir / YAML_CONFIG_NAME
    path.write_text(default_config_text(), encoding='utf-8')
    log.info('wrote default config to %s', path)
    return path
