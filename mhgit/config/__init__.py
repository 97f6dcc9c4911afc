# MHGIT Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from mhgit.config.defaults import DEFAULT_CONFIG, generate_default_config
from mhgit.config.loader import (
    ensure_config_exists,
    get_config_dir,
    get_config_path,
    load_config,
    load_or_default,
    save_config,
    validate_config_file,
)
from mhgit.config.schema import (
    GitConfig,
    InitConfig,
    MhgitConfig,
    OutputConfig,
    OutputMode,
)

__all__ = [
    # Schema
    "MhgitConfig",
    "GitConfig",
    "OutputConfig",
    "InitConfig",
    "OutputMode",
    # Loader
    "load_config",
    "load_or_default",
    "save_config",
    "get_config_dir",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    # Defaults
    "DEFAULT_CONFIG",
    "generate_default_config",
]
