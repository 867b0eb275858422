"""Tests for the filesystem config locator gateway."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from alembiqa.l1_entities.config_file import ConfigFormat
from alembiqa.l3_interface_adapters.gateways.file_config_locator import FileConfigLocator


class TestFileConfigLocator:
    def test_empty_dir_returns_none(self, project_dir: Path):
        assert FileConfigLocator().locate(project_dir) is None

    def test_missing_dir_returns_none(self, tmp_path: Path):
        assert FileConfigLocator().locate(tmp_path / 'does-not-exist') is None

    def test_finds_yaml(self, yaml_config: Path, project_dir: Path):
        ref = FileConfigLocator().locate(project_dir)
        assert ref is not None
        assert ref.path == yaml_config
        assert ref.format is ConfigFormat.YAML

    def test_finds_json(self, json_config: Path, project_dir: Path):
        ref = FileConfigLocator().locate(project_dir)
        assert ref is not None
        assert ref.path == json_config
        assert ref.format is ConfigFormat.JSON

    def test_yaml_preferred_over_json(self, yaml_config: Path, json_config: Path, project_dir: Path):
        for _ in range(3):
            ref = FileConfigLocator().locate(project_dir)
            assert ref is not None
            assert ref.path == yaml_config

    def test_directory_candidate_skipped(self, json_config: Path, project_dir: Path):
        (project_dir / '.alembiqa.yml').mkdir()
        ref = FileConfigLocator().locate(project_dir)
        assert ref is not None
        assert ref.path == json_config

    @pytest.mark.skipif(not hasattr(os, 'symlink'), reason='symlinks unsupported')
    def test_dangling_symlink_skipped(self, json_config: Path, project_dir: Path):
        (project_dir / '.alembiqa.yml').symlink_to(project_dir / 'gone.yml')
        ref = FileConfigLocator().locate(project_dir)
        assert ref is not None
        assert ref.path == json_config

    def test_probe_error_treated_as_not_found(self, json_config: Path, project_dir: Path, monkeypatch):
        real_is_file = Path.is_file

        def _is_file(self: Path) -> bool:
            if self.name == '.alembiqa.yml':
                raise PermissionError('denied')
            return real_is_file(self)

        monkeypatch.setattr(Path, 'is_file', _is_file)
        ref = FileConfigLocator().locate(project_dir)
        assert ref is not None
        assert ref.path == json_config

    def test_all_probes_failing_returns_none(self, project_dir: Path, monkeypatch):
        def _is_file(self: Path) -> bool:
            raise OSError('broken')

        monkeypatch.setattr(Path, 'is_file', _is_file)
        assert FileConfigLocator().locate(project_dir) is None

    def test_accepts_str_root(self, yaml_config: Path, project_dir: Path):
        ref = FileConfigLocator().locate(str(project_dir))  # type: ignore[arg-type]
        assert ref is not None
        assert ref.path == yaml_config

    def test_custom_candidates(self, project_dir: Path):
        custom = project_dir / 'alembiqa.yaml'
        custom.write_text('x: 1\n', encoding='utf-8')
        ref = FileConfigLocator(candidates=['alembiqa.yaml']).locate(project_dir)
        assert ref is not None
        assert ref.path == custom
        assert ref.format is ConfigFormat.YAML

    def test_custom_candidate_with_unknown_suffix_skipped(self, project_dir: Path):
        (project_dir / 'alembiqa.toml').write_text('', encoding='utf-8')
        assert FileConfigLocator(candidates=['alembiqa.toml']).locate(project_dir) is None

    def test_empty_candidate_list_finds_nothing(self, yaml_config: Path, project_dir: Path):
        assert FileConfigLocator(candidates=[]).locate(project_dir) is None
