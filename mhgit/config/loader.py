# MHGIT Configuration Loader
# Load, save, and manage YAML configuration files

import copy
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from mhgit.config.defaults import DEFAULT_CONFIG, generate_default_config
from mhgit.config.schema import MhgitConfig


def get_config_dir() -> Path:
    """Get the mhgit configuration directory."""
    return Path.home() / ".config" / "mhgit"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("MHGIT_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def ensure_config_dir(config_path: Optional[Path] = None) -> Path:
    """Ensure the directory holding the configuration file exists."""
    config_dir = config_path.parent if config_path is not None else get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def load_config(config_path: Optional[Path] = None) -> MhgitConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        MhgitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config file is invalid.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}\nRun 'mhgit config init' to create one.")

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}

    return MhgitConfig.model_validate(_merge_with_defaults(data))


def load_or_default(config_path: Optional[Path] = None) -> MhgitConfig:
    """
    Load configuration if the file exists, otherwise return defaults.

    Args:
        config_path: Optional path to config file.

    Returns:
        MhgitConfig.
    """
    if config_path is None:
        config_path = get_config_path()
    if not config_path.exists():
        return MhgitConfig.model_validate(copy.deepcopy(DEFAULT_CONFIG))
    return load_config(config_path)


def save_config(config: MhgitConfig, config_path: Optional[Path] = None) -> Path:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration object to save.
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Path: Path where config was saved.
    """
    if config_path is None:
        config_path = get_config_path()

    ensure_config_dir(config_path)

    # mode='json' serializes Enums as their string values
    data = config.model_dump(mode="json")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return config_path


def ensure_config_exists(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Ensure configuration file exists, creating default if needed.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    ensure_config_dir(config_path)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file without using it.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    if not isinstance(data, dict):
        return False, ["Configuration root must be a mapping"]

    errors: list[str] = []
    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    for key in unknown:
        errors.append(f"Unknown section '{key}'")

    try:
        MhgitConfig.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")

    return len(errors) == 0, errors


def _merge_with_defaults(data: dict[str, Any]) -> dict[str, Any]:
    """Merge loaded data with default values for missing keys."""
    result = copy.deepcopy(DEFAULT_CONFIG)

    for section, values in data.items():
        if isinstance(values, dict) and isinstance(result.get(section), dict):
            result[section] = {**result[section], **values}
        else:
            result[section] = values

    return result
