"""Gateway: YAML/JSON configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from alembiqa.l1_entities.config import FIELD_KINDS, AlembiqaConfig
from alembiqa.l1_entities.config_file import ConfigFileRef, ConfigFormat
from alembiqa.l1_entities.errors import (
    ConfigNotFoundError,
    ConfigParseError,
    ConfigReadError,
    ConfigValidationError,
    FieldIssue,
    UnsupportedConfigFormatError,
)
from alembiqa.l2_use_cases.ports.config_locator import ConfigLocator
from alembiqa.l3_interface_adapters.gateways.file_config_locator import FileConfigLocator
from alembiqa.l3_interface_adapters.gateways.paths import CONFIG_CANDIDATES

log = logging.getLogger('alembiqa.config')

_ROOT_PATH = '<root>'

# pydantic error type -> file-level kind, for paths not listed in FIELD_KINDS (list items).
_EXPECTED_BY_ERROR_TYPE = {
    'bool_type': 'boolean',
    'bool_parsing': 'boolean',
    'string_type': 'string',
    'list_type': 'array',
    'model_type': 'object',
    'model_attributes_type': 'object',
    'dict_type': 'object',
    'int_type': 'number',
    'float_type': 'number',
}


class ConfigFileLoader:
    """Locate → read → parse → validate, failing fast at each step."""

    def __init__(self, locator: ConfigLocator | None = None) -> None:
        self._locator = locator or FileConfigLocator()

    async def load(self, root_dir: Path) -> AlembiqaConfig:
        root_dir = Path(root_dir)
        ref = self._locator.locate(root_dir)
        if ref is None:
            raise ConfigNotFoundError(root_dir, CONFIG_CANDIDATES)
        return await self.load_ref(ref)

    async def load_path(self, path: Path) -> AlembiqaConfig:
        """Load an explicit file, choosing the parser from its suffix."""
        path = Path(path)
        fmt = ConfigFormat.from_path(path)
        if fmt is None:
            raise UnsupportedConfigFormatError(path)
        return await self.load_ref(ConfigFileRef(path=path, format=fmt))

    async def load_ref(self, ref: ConfigFileRef) -> AlembiqaConfig:
        raw = await _read_text(ref)
        data = parse_config_text(raw, ref.format, path=ref.path)
        config = validate_config(data, path=ref.path)
        log.info('loaded config from %s', ref.path)
        return config


async def load_config(root_dir: Path | None = None) -> AlembiqaConfig:
    """Load the config from *root_dir*, defaulting to the current working directory."""
    return await ConfigFileLoader().load(root_dir if root_dir is not None else Path.cwd())


async def _read_text(ref: ConfigFileRef) -> str:
    try:
        return await asyncio.to_thread(ref.path.read_text, encoding='utf-8')
    except UnicodeDecodeError as exc:
        raise ConfigParseError(ref.path, ref.format.value, str(exc)) from exc
    except OSError as exc:
        log.warning('failed to read %s: %s', ref.path, exc)
        raise ConfigReadError(ref.path, exc) from exc


def _reject_constant(name: str) -> object:
    raise ValueError(f'{name} is not valid JSON')


def parse_config_text(raw: str, fmt: ConfigFormat, *, path: Path) -> object:
    """Parse *raw* into plain Python data. Syntax errors raise ConfigParseError."""
    if fmt is ConfigFormat.YAML:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise ConfigParseError(path, fmt.value, str(exc)) from exc
    if fmt is ConfigFormat.JSON:
        try:
            return json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            raise ConfigParseError(path, fmt.value, str(exc)) from exc
    raise UnsupportedConfigFormatError(path)


def validate_config(data: object, *, path: Path) -> AlembiqaConfig:
    """Validate parsed data against the schema; build the record only on success."""
    try:
        return AlembiqaConfig.model_validate(data)
    except ValidationError as exc:
        issues = field_issues(exc)
        log.warning('config %s failed validation with %d issue(s)', path, len(issues))
        raise ConfigValidationError(path, issues) from exc


def field_issues(exc: ValidationError) -> list[FieldIssue]:
    """Convert pydantic errors into per-field issues keyed by file field paths."""
    issues = []
    for err in exc.errors():
        loc = [str(part) for part in err['loc']]
        dotted = '.'.join(loc) or _ROOT_PATH
        expected = FIELD_KINDS.get(dotted) or _EXPECTED_BY_ERROR_TYPE.get(err['type'], 'valid value')
        if dotted == _ROOT_PATH:
            expected = 'object'
        actual = 'missing' if err['type'] == 'missing' else describe_kind(err.get('input'))
        issues.append(FieldIssue(path=dotted, expected=expected, actual=actual, message=err['msg']))
    return issues


def describe_kind(value: object) -> str:
    """File-level kind name of a parsed YAML/JSON value."""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int):
        return f'integer ({value})'
    if isinstance(value, float):
        return f'number ({value})'
    if isinstance(value, str):
        return f'string ({value!r})'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__
