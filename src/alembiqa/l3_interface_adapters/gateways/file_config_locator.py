"""Gateway: filesystem config locator — implements ConfigLocator port."""

from __future__ import annotations

import logging
from pathlib import Path

from alembiqa.l1_entities.config_file import ConfigFileRef, ConfigFormat
from alembiqa.l3_interface_adapters.gateways.paths import CONFIG_CANDIDATES

log = logging.getLogger('alembiqa.config')


class FileConfigLocator:
    """Probes the fixed candidate names in priority order."""

    def __init__(self, candidates: list[str] | None = None) -> None:
        self._candidates = list(CONFIG_CANDIDATES if candidates is None else candidates)

    def locate(self, root_dir: Path) -> ConfigFileRef | None:
        for name in self._candidates:
            path = Path(root_dir) / name
            try:
                found = path.is_file()
            except OSError as exc:
                log.debug('probe failed for %s: %s', path, exc)
                continue
            if not found:
                continue
            fmt = ConfigFormat.from_path(path)
            if fmt is None:
                log.debug('skipping %s: unrecognised suffix', path)
                continue
            log.debug('config file located: %s (%s)', path, fmt.value)
            return ConfigFileRef(path=path, format=fmt)
        return None
