"""
Configuration management utilities for docdigest.

Configuration is layered, later layers winning:

1. Schema defaults (``docdigest.utils.schema``)
2. A YAML file, given explicitly or through ``DOCDIGEST_CONFIG``
3. ``DOCDIGEST_*`` environment variables, ``__`` separating nested keys
   (``DOCDIGEST_SUMMARIZER__MAX_KEY_POINTS=5``)
4. Dot-list overrides (``summarizer.max_topics=5``)
"""
import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Union, cast

from omegaconf import DictConfig, OmegaConf

from ..types.types import ConfigurationError
from .error_handling import ErrorContext
from .schema import DigestConfig, SummarizerConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "DOCDIGEST"
CONFIG_PATH_ENV = f"{ENV_PREFIX}_CONFIG"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_env_value(value: str) -> Any:
    """Interpret an environment string as bool, int or float where possible."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    for convert in (int, float):
        try:
            return convert(value)
        except ValueError:
            continue
    return value


def _has_key(config: DictConfig, path: str) -> bool:
    node: Any = config
    for part in path.split("."):
        if not isinstance(node, DictConfig) or part not in node:
            return False
        node = node[part]
    return True


def merge_with_env_vars(
    config: DictConfig,
    prefix: str = ENV_PREFIX,
    environ: Optional[Mapping[str, str]] = None,
) -> DictConfig:
    """
    Merge configuration with environment variables.

    Environment variables override config values using the format
    ``{PREFIX}_{SECTION}__{KEY}={VALUE}``. Variables naming unknown keys
    are ignored with a warning.

    Args:
        config: Base configuration
        prefix: Environment variable prefix
        environ: Variables to read, defaults to ``os.environ``

    Returns:
        Updated configuration
    """
    environ = os.environ if environ is None else environ
    marker = f"{prefix}_"

    for env_key, env_value in sorted(environ.items()):
        if not env_key.startswith(marker) or env_key == CONFIG_PATH_ENV:
            continue
        config_path = env_key[len(marker) :].lower().replace("__", ".")
        if not _has_key(config, config_path):
            logger.warning("Ignoring %s: no configuration key '%s'", env_key, config_path)
            continue
        OmegaConf.update(config, config_path, _parse_env_value(env_value), merge=True)

    return config


def validate_config(config: DictConfig) -> None:
    """
    Check value ranges that the schema types cannot express.

    Raises:
        ConfigurationError: A value is out of range
    """
    summarizer = cast(SummarizerConfig, OmegaConf.to_object(config.summarizer))
    problems: List[str] = []

    if summarizer.max_key_points < 1:
        problems.append("summarizer.max_key_points must be at least 1")
    if summarizer.max_topics < 0:
        problems.append("summarizer.max_topics must not be negative")
    if summarizer.min_sentence_length < 0:
        problems.append("summarizer.min_sentence_length must not be negative")
    if summarizer.max_sentence_length <= summarizer.min_sentence_length:
        problems.append("summarizer.max_sentence_length must exceed min_sentence_length")
    for name in ("min_content_length", "min_summary_length", "ocr_threshold"):
        if getattr(summarizer, name) < 0:
            problems.append(f"summarizer.{name} must not be negative")
    if str(config.logging.level).upper() not in LOG_LEVELS:
        problems.append(f"logging.level must be one of {', '.join(LOG_LEVELS)}")

    if problems:
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(problems),
            context={"problems": problems},
        )


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> DictConfig:
    """
    Build a read-only configuration from all layers.

    Args:
        path: YAML file; falls back to ``DOCDIGEST_CONFIG`` when None
        overrides: Dot-list overrides such as ``summarizer.max_topics=5``
        environ: Environment mapping, defaults to ``os.environ``

    Raises:
        ConfigurationError: File missing, unknown keys, bad types or out of range values
    """
    environ = os.environ if environ is None else environ
    path = path or environ.get(CONFIG_PATH_ENV)

    with ErrorContext("load configuration", ConfigurationError, context={"path": str(path)}):
        config = OmegaConf.structured(DigestConfig)

        if path:
            config_file = Path(path)
            if not config_file.is_file():
                raise ConfigurationError(
                    f"Config file not found: {config_file}", context={"path": str(config_file)}
                )
            config = cast(DictConfig, OmegaConf.merge(config, OmegaConf.load(config_file)))

        config = merge_with_env_vars(config, environ=environ)

        if overrides:
            config = cast(DictConfig, OmegaConf.merge(config, OmegaConf.from_dotlist(list(overrides))))

    validate_config(config)
    OmegaConf.set_readonly(config, True)
    logger.debug("Loaded configuration (file: %s)", path or "none")
    return config


class ConfigManager:
    """Central configuration manager for docdigest with lazy loading."""

    _instance: Optional["ConfigManager"] = None
    _config: Optional[DictConfig] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def load(
        self,
        path: Optional[Union[str, Path]] = None,
        overrides: Optional[Sequence[str]] = None,
    ) -> DictConfig:
        """(Re)load configuration, replacing the cached one."""
        type(self)._config = load_config(path, overrides)
        return type(self)._config

    @property
    def config(self) -> DictConfig:
        """Get the full configuration (lazy loaded)."""
        if self._config is None:
            return self.load()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by key.

        Args:
            key: Dot-notation path to config value
            default: Default value if key doesn't exist
        """
        return OmegaConf.select(self.config, key, default=default)

    def summarizer_config(self) -> SummarizerConfig:
        return cast(SummarizerConfig, OmegaConf.to_object(self.config.summarizer))

    def to_yaml(self) -> str:
        return OmegaConf.to_yaml(self.config)

    @classmethod
    def reset(cls) -> None:
        """Drop the cached configuration."""
        cls._config = None

    @staticmethod
    def get_instance() -> "ConfigManager":
        """Get the singleton instance of ConfigManager."""
        return ConfigManager()
