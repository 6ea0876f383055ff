"""Configuration loading and validation."""

from .loader import apply_config, load_config, substitute_env_vars
from .schema import CornerConfig, DecorationConfig, LoggingConfig, SnippetConfig

__all__ = [
    # Loader
    "load_config",
    "apply_config",
    "substitute_env_vars",
    # Root config
    "CornerConfig",
    # Sections
    "DecorationConfig",
    "SnippetConfig",
    "LoggingConfig",
]
