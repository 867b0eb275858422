"""Domain error types for config discovery and loading."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class FieldIssue(BaseModel):
    """One schema problem: where it is, what was expected, what was found."""

    model_config = ConfigDict(frozen=True)

    path: str
    expected: str
    actual: str
    message: str = ''

    def __str__(self) -> str:
        text = f'{self.path}: expected {self.expected}, got {self.actual}'
        if self.message:
            text += f' ({self.message})'
        return text


class AlembiqaConfigError(Exception):
    """Base class for every config discovery/loading failure."""


class ConfigNotFoundError(AlembiqaConfigError):
    """Raised when no recognised config file exists in the project root."""

    def __init__(self, root_dir: Path, candidates: Sequence[str]) -> None:
        self.root_dir = root_dir
        self.candidates = list(candidates)
        super().__init__(f'No Alembiqa config file found in {root_dir} ({" or ".join(self.candidates)})')


class ConfigReadError(AlembiqaConfigError):
    """Raised when a located config file cannot be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f'Could not read {path}: {cause}')


class UnsupportedConfigFormatError(AlembiqaConfigError):
    """Raised when a config file suffix maps to no known parser."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Unsupported config file format: {path.name}')


class ConfigParseError(AlembiqaConfigError):
    """Raised when the config text is not valid YAML/JSON."""

    def __init__(self, path: Path, fmt: str, detail: str) -> None:
        self.path = path
        self.format = fmt
        self.detail = detail
        super().__init__(f'Invalid {fmt.upper()} in {path}: {detail}')


class ConfigValidationError(AlembiqaConfigError):
    """Raised when parsed config data does not match the schema."""

    def __init__(self, path: Path, issues: Sequence[FieldIssue]) -> None:
        self.path = path
        self.issues = list(issues)
        lines = [f'Invalid Alembiqa config {path}:']
        lines.extend(f'  - {issue}' for issue in self.issues)
        super().__init__('\n'.join(lines))

    @property
    def field_paths(self) -> list[str]:
        return [issue.path for issue in self.issues]


class ConfigExistsError(AlembiqaConfigError):
    """Raised when init would overwrite an existing config file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'{path.name} already exists (use --force to overwrite)')
