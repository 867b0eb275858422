"""Configuration Pydantic models — pure schema, no defaults for required sections."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

# File-level kind of every recognised field, keyed by dotted alias path.
FIELD_KINDS: dict[str, str] = {
    'codeStyle': 'object',
    'codeStyle.maxLineLength': 'number',
    'linting': 'object',
    'linting.enabled': 'boolean',
    'performance': 'object',
    'performance.enabled': 'boolean',
    'codeLocality': 'object',
    'codeLocality.enabled': 'boolean',
    'codeCoupling': 'object',
    'codeCoupling.enabled': 'boolean',
    'dependencies': 'object',
    'dependencies.allowed': 'array',
    'security': 'object',
    'security.enabled': 'boolean',
    'SOLID': 'object',
    'SOLID.enabled': 'boolean',
}


class _Section(BaseModel):
    # Unknown keys are tolerated and dropped.
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')


class CodeStyleConfig(_Section):
    max_line_length: int | float | None = Field(default=None, alias='maxLineLength')

    @field_validator('max_line_length', mode='before')
    @classmethod
    def _require_number(cls, value: object) -> object:
        if value is None:
            return value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError('maxLineLength must be a number')
        if math.isnan(value):
            raise ValueError('maxLineLength must not be NaN')
        return value


class ToggleConfig(_Section):
    """A rule family that can be switched on or off."""

    enabled: StrictBool


class DependenciesConfig(_Section):
    allowed: list[StrictStr]


class AlembiqaConfig(_Section):
    """Validated contents of a ``.alembiqa.yml`` / ``.alembiqa.json`` file."""

    code_style: CodeStyleConfig = Field(alias='codeStyle')
    linting: ToggleConfig
    performance: ToggleConfig
    code_locality: ToggleConfig = Field(alias='codeLocality')
    code_coupling: ToggleConfig = Field(alias='codeCoupling')
    dependencies: DependenciesConfig
    security: ToggleConfig
    solid: ToggleConfig = Field(alias='SOLID')

    def enabled_checks(self) -> list[str]:
        """File-level names of the toggles that are switched on, in file order."""
        toggles = {
            'linting': self.linting,
            'performance': self.performance,
            'codeLocality': self.code_locality,
            'codeCoupling': self.code_coupling,
            'security': self.security,
            'SOLID': self.solid,
        }
        return [name for name, toggle in toggles.items() if toggle.enabled]
