"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(log_path: Path) -> None:
    """Send everything under the ``alembiqa`` logger namespace to *log_path*."""
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger('alembiqa')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    logging.getLogger('alembiqa.cli').info('Debug logging started → %s', log_path)
