"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from alembiqa.l1_entities.config_file import ConfigFileRef

# --- Protocol-conforming Fakes ---


class FakeConfigLocator:
    """Fake locator for loader tests — returns a fixed reference."""

    def __init__(self, ref: ConfigFileRef | None = None):
        self._ref = ref
        self.locate_calls: list[Path] = []

    def locate(self, root_dir: Path) -> ConfigFileRef | None:
        self.locate_calls.append(root_dir)
        return self._ref


# --- Sample documents ---

VALID_CONFIG_DATA: dict = {
    'codeStyle': {'maxLineLength': 100},
    'linting': {'enabled': True},
    'performance': {'enabled': False},
    'codeLocality': {'enabled': True},
    'codeCoupling': {'enabled': True},
    'dependencies': {'allowed': ['pydantic', 'click']},
    'security': {'enabled': True},
    'SOLID': {'enabled': False},
}

MINIMAL_CONFIG_YAML = """\
codeStyle: {}
linting: { enabled: true }
performance: { enabled: true }
codeLocality: { enabled: true }
codeCoupling: { enabled: true }
dependencies: { allowed: [] }
security: { enabled: true }
SOLID: { enabled: true }
"""


# --- Standard Fixtures ---


@pytest.fixture
def valid_config_data() -> dict:
    return json.loads(json.dumps(VALID_CONFIG_DATA))


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    d = tmp_path / 'project'
    d.mkdir()
    return d


@pytest.fixture
def yaml_config(project_dir: Path) -> Path:
    p = project_dir / '.alembiqa.yml'
    p.write_text(MINIMAL_CONFIG_YAML, encoding='utf-8')
    return p


@pytest.fixture
def json_config(project_dir: Path) -> Path:
    p = project_dir / '.alembiqa.json'
    p.write_text(json.dumps(VALID_CONFIG_DATA, indent=2), encoding='utf-8')
    return p
