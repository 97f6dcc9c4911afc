# MHGIT Config Tests
# Tests for configuration loading and validation

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from mhgit.config.defaults import DEFAULT_CONFIG, generate_default_config
from mhgit.config.loader import (
    ensure_config_exists,
    get_config_path,
    load_config,
    load_or_default,
    save_config,
    validate_config_file,
)
from mhgit.config.schema import GitConfig, MhgitConfig, OutputMode


class TestMhgitConfig:
    """Tests for MhgitConfig schema."""

    def test_defaults(self):
        config = MhgitConfig()
        assert config.git.binary == "git"
        assert config.git.env == {}
        assert config.git.terminal_prompt is False
        assert config.output.mode == OutputMode.PIPE
        assert config.init.initial_branch is None

    def test_default_dict_matches_model(self):
        assert MhgitConfig.model_validate(DEFAULT_CONFIG) == MhgitConfig()

    def test_output_mode_enum(self):
        assert OutputMode.PIPE.value == "pipe"
        assert OutputMode.PRINT.value == "print"

    def test_empty_binary_rejected(self):
        with pytest.raises(ValidationError):
            GitConfig(binary="  ")

    def test_invalid_mode_rejected(self):
        with pytest.raises(ValidationError):
            MhgitConfig.model_validate({"output": {"mode": "tee"}})


class TestConfigPath:
    def test_default_location(self, temp_home: Path):
        assert get_config_path() == temp_home / ".config" / "mhgit" / "config.yaml"

    def test_environment_override(self, temp_home: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("MHGIT_CONFIG", str(temp_home / "custom.yaml"))
        assert get_config_path() == temp_home / "custom.yaml"


class TestConfigLoader:
    """Tests for configuration loading and saving."""

    def test_load_missing_raises(self, temp_dir: Path):
        with pytest.raises(FileNotFoundError, match="mhgit config init"):
            load_config(temp_dir / "nope.yaml")

    def test_load_partial_merges_defaults(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("init:\n  initial_branch: trunk\n", encoding="utf-8")

        config = load_config(path)
        assert config.init.initial_branch == "trunk"
        assert config.git.binary == "git"
        assert config.output.colored is True

    def test_load_empty_file(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == MhgitConfig()

    def test_load_or_default_without_file(self, temp_dir: Path):
        assert load_or_default(temp_dir / "missing.yaml") == MhgitConfig()

    def test_save_and_load(self, temp_dir: Path):
        config = MhgitConfig.model_validate({"output": {"mode": "print"}, "git": {"env": {"LANG": "C"}}})
        path = save_config(config, temp_dir / "nested" / "config.yaml")

        assert path.exists()
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert data["output"]["mode"] == "print"
        assert load_config(path) == config

    def test_ensure_config_exists(self, temp_dir: Path):
        path = temp_dir / "conf" / "config.yaml"
        created_path, created = ensure_config_exists(path)
        assert created is True
        assert created_path == path
        assert path.read_text(encoding="utf-8").startswith("# mhgit configuration")

        _, created_again = ensure_config_exists(path)
        assert created_again is False


class TestDefaultConfig:
    def test_generated_yaml_loads(self):
        data = yaml.safe_load(generate_default_config())
        assert data == DEFAULT_CONFIG


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_valid(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text(generate_default_config(), encoding="utf-8")
        assert validate_config_file(path) == (True, [])

    def test_missing(self, temp_dir: Path):
        is_valid, errors = validate_config_file(temp_dir / "missing.yaml")
        assert is_valid is False
        assert "not found" in errors[0]

    def test_invalid_yaml(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("git: [unclosed", encoding="utf-8")
        is_valid, errors = validate_config_file(path)
        assert is_valid is False
        assert "Invalid YAML" in errors[0]

    def test_empty(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert validate_config_file(path) == (False, ["Configuration file is empty"])

    def test_unknown_section_and_bad_value(self, temp_dir: Path):
        path = temp_dir / "config.yaml"
        path.write_text("repository:\n  path: x\noutput:\n  mode: tee\n", encoding="utf-8")
        is_valid, errors = validate_config_file(path)
        assert is_valid is False
        assert "Unknown section 'repository'" in errors
        assert any(error.startswith("output -> mode") for error in errors)
