"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..core.decoration import set_stack_provider
from ..core.registry import VARIANTS, DecorationRegistry
from ..core.source_cache import SourceCache, set_default_cache
from ..core.stack_capture import RuntimeStackProvider
from ..utils.errors import ConfigError
from ..utils.logging import LogEventNames, configure_logging, get_logger
from .schema import CornerConfig

log = get_logger(__name__)


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ConfigError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> CornerConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated CornerConfig instance

    Raises:
        ConfigError: If the file is missing, unparsable, or doesn't match the schema
    """
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    try:
        config_dict = yaml.safe_load(yaml_with_env) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(config_dict, dict):
        raise ConfigError(f"Configuration root must be a mapping: {path}")

    try:
        config = CornerConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    log.debug(LogEventNames.CONFIG_LOADED, path=str(path), variants=len(config.variants))
    return config


def apply_config(config: CornerConfig, registry: DecorationRegistry | None = None) -> None:
    """
    Install a configuration into the running process.

    Registers the configured variants, sets the fallback decoration, and
    replaces the shared source cache and stack provider. Logging is
    configured only when the configuration has an explicit ``logging`` section.

    Args:
        config: Configuration to apply
        registry: Variant table to populate (defaults to the global one)
    """
    registry = registry if registry is not None else VARIANTS

    if "logging" in config.model_fields_set:
        configure_logging(level=config.logging.level, log_format=config.logging.format)

    for variant, entry in config.variants.items():
        registry.register(variant, entry.to_decoration())
    registry.default = config.default_decoration.to_decoration()

    set_default_cache(
        SourceCache(
            max_files=config.snippet.cache_max_files,
            encoding=config.snippet.encoding,
        )
    )
    set_stack_provider(RuntimeStackProvider(max_depth=config.snippet.max_stack_depth))

    log.debug(LogEventNames.CONFIG_APPLIED, variants=len(config.variants))
