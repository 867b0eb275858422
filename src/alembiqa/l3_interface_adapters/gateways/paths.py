"""Shared path constants for config discovery."""

from __future__ import annotations

YAML_CONFIG_NAME = '.alembiqa.yml'
JSON_CONFIG_NAME = '.alembiqa.json'

# Probe order: first match wins.
CONFIG_CANDIDATES = [
    YAML_CONFIG_NAME,
    JSON_CONFIG_NAME,
]
