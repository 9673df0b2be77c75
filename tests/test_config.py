"""Unit tests for HubConfig and related Pydantic models (example_hub.config).

Tests cover:
- ScaffoldConfig / DocsConfig defaults and validation
- HubConfig derived paths (properties)
- save/load round trip
- from_env
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from example_hub.config import DEFAULT_CONFIG_FILES, DocsConfig, HubConfig, ScaffoldConfig


class TestScaffoldConfig:
    @pytest.mark.unit
    def test_defaults(self):
        cfg = ScaffoldConfig()
        assert cfg.prefix == "fhevm-example"
        assert cfg.subdirectories == ["contracts", "test", "deploy", "tasks"]
        assert cfg.canonical_contract == "FHECounter"
        assert cfg.canonical_var == "fheCounter"
        assert cfg.canonical_task_import == 'import "./tasks/FHECounter";'

    @pytest.mark.unit
    def test_config_file_list(self):
        cfg = ScaffoldConfig()
        assert cfg.config_files == DEFAULT_CONFIG_FILES
        assert "package.json" in cfg.config_files
        assert "hardhat.config.ts" in cfg.config_files
        assert len(cfg.config_files) == 11

    @pytest.mark.unit
    def test_config_files_not_shared_between_instances(self):
        a = ScaffoldConfig()
        a.config_files.append("extra")
        assert "extra" not in ScaffoldConfig().config_files

    @pytest.mark.unit
    def test_empty_prefix_rejected(self):
        with pytest.raises(ValidationError):
            ScaffoldConfig(prefix="")


class TestDocsConfig:
    @pytest.mark.unit
    def test_defaults(self):
        cfg = DocsConfig()
        assert cfg.output_dir == "docs"
        assert cfg.index_name == "README.md"
        assert cfg.run_formatter is True
        assert cfg.formatter_command == ["npx", "prettier", "--write"]
        assert cfg.formatter_timeout == 60

    @pytest.mark.unit
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            DocsConfig(formatter_timeout=0)


class TestHubConfig:
    @pytest.mark.unit
    def test_derived_paths(self, tmp_path: Path):
        cfg = HubConfig(source_root=tmp_path)
        assert cfg.contracts_path == tmp_path / "contracts"
        assert cfg.tests_path == tmp_path / "test"
        assert cfg.docs_path == tmp_path / "docs"
        assert cfg.docs_index_path == tmp_path / "docs" / "README.md"

    @pytest.mark.unit
    def test_custom_docs_dir(self, tmp_path: Path):
        cfg = HubConfig(source_root=tmp_path, docs=DocsConfig(output_dir="site"))
        assert cfg.docs_path == tmp_path / "site"

    @pytest.mark.unit
    def test_save_and_load(self, tmp_path: Path):
        cfg = HubConfig(
            source_root=tmp_path / "hub",
            scaffold=ScaffoldConfig(prefix="demo"),
            docs=DocsConfig(run_formatter=False),
        )
        path = cfg.save(tmp_path / "nested" / "config.json")
        assert path.exists()

        loaded = HubConfig.load(path)
        assert loaded == cfg
        assert loaded.scaffold.prefix == "demo"
        assert loaded.docs.run_formatter is False


class TestFromEnv:
    @pytest.mark.unit
    def test_defaults_without_env(self):
        with patch.dict(os.environ, {}, clear=True):
            cfg = HubConfig.from_env()
        assert cfg.source_root == Path(".")
        assert cfg.scaffold.prefix == "fhevm-example"
        assert cfg.docs.run_formatter is True

    @pytest.mark.unit
    def test_reads_variables(self):
        env = {
            "HUB_SOURCE_ROOT": "/srv/hub",
            "HUB_SCAFFOLD_PREFIX": "demo",
            "HUB_DOCS_DIR": "site",
            "HUB_FORMAT_DOCS": "false",
            "HUB_FORMATTER_TIMEOUT": "15",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = HubConfig.from_env()
        assert cfg.source_root == Path("/srv/hub")
        assert cfg.scaffold.prefix == "demo"
        assert cfg.docs.output_dir == "site"
        assert cfg.docs.run_formatter is False
        assert cfg.docs.formatter_timeout == 15

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_timeout_is_a_validation_error(self, value):
        with patch.dict(os.environ, {"HUB_FORMATTER_TIMEOUT": value}, clear=True):
            with pytest.raises(ValidationError):
                HubConfig.from_env()

    @pytest.mark.unit
    @pytest.mark.parametrize("value,expected", [("1", True), ("yes", True), ("0", False), ("OFF", False)])
    def test_format_toggle(self, value, expected):
        with patch.dict(os.environ, {"HUB_FORMAT_DOCS": value}, clear=True):
            assert HubConfig.from_env().docs.run_formatter is expected
