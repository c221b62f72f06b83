"""Configuration loader with support for multiple sources.

Tracker credentials and settings are resolved from, lowest priority first:

1. ``<config_dir>/defaults/<config_file>``
2. ``<config_dir>/environments/<environment>.yaml`` (optionally namespaced
   by the config file's stem)
3. Environment variables named ``<PREFIX><FIELD_NAME>``; a ``.env`` file is
   loaded into the process environment first when one is found
4. Explicit overrides

Values of the form ``${VAR_NAME}`` are substituted from the environment.

Classes:
    ConfigLoader: Load and merge configurations from multiple sources
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from simcoe.core.exceptions import ConfigurationError
from simcoe.utils.logging import StructuredLogger, get_logger

T = TypeVar("T", bound=BaseModel)

VALID_ENVIRONMENTS = ("dev", "test", "prod")
DOTENV_PATH_VAR = "SIMCOE_DOTENV_PATH"


def load_dotenv_files(dotenv_path: Optional[Union[str, Path]] = None) -> bool:
    """Load a ``.env`` file into the process environment.

    Order of precedence:
      1. The explicit ``dotenv_path`` argument
      2. The SIMCOE_DOTENV_PATH environment variable
      3. ``.env`` in the current working directory

    Variables already present in the environment are never overwritten.

    Returns:
        True if a file was found and loaded
    """
    explicit = dotenv_path or os.getenv(DOTENV_PATH_VAR)
    if explicit:
        return load_dotenv(dotenv_path=str(explicit), override=False)

    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        return load_dotenv(dotenv_path=str(cwd_env), override=False)

    return False


class ConfigLoader:
    """Load and merge configurations from multiple sources.

    Attributes:
        config_dir: Directory containing configuration files
        environment: Current environment (dev, test, prod)

    Example:
        >>> loader = ConfigLoader(config_dir="config", environment="prod")
        >>> config = loader.load(
        ...     MParticleConfig,
        ...     config_file="mparticle.yaml",
        ...     env_prefix="MPARTICLE_",
        ... )
    """

    def __init__(
        self,
        config_dir: Union[str, Path] = "config",
        environment: str = "dev",
        dotenv_path: Optional[Union[str, Path]] = None,
        load_dotenv_file: bool = True,
    ) -> None:
        """Initialize the configuration loader.

        Args:
            config_dir: Directory containing configuration files
            environment: Current environment (dev, test, prod)
            dotenv_path: Optional explicit ``.env`` file to load
            load_dotenv_file: Whether to look for a ``.env`` file at all

        Raises:
            ValueError: If environment is invalid
        """
        if environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment: {environment}. "
                f"Must be one of: {', '.join(VALID_ENVIRONMENTS)}"
            )

        self.config_dir = Path(config_dir)
        self.environment = environment
        self._logger = self._get_logger()

        if load_dotenv_file and load_dotenv_files(dotenv_path):
            self._logger.debug("Loaded .env file into the environment")

        self._logger.debug(
            f"Initialized ConfigLoader: dir={self.config_dir}, env={environment}"
        )

    def _get_logger(self) -> StructuredLogger:
        return get_logger(__name__)

    def load(
        self,
        model_class: Type[T],
        config_file: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
        use_env_vars: bool = True,
        env_prefix: str = "",
    ) -> T:
        """Load configuration from every source and validate it.

        Args:
            model_class: Pydantic model class to instantiate
            config_file: Optional config file name (relative to config_dir)
            overrides: Optional dictionary of override values
            use_env_vars: Whether to load from environment variables
            env_prefix: Prefix for environment variables (e.g., "MPARTICLE_")

        Returns:
            Instantiated and validated Pydantic model

        Raises:
            ConfigurationError: If the merged configuration is invalid or a
                config file cannot be parsed
        """
        self._logger.debug(f"Loading configuration for {model_class.__name__}")

        merged_config: Dict[str, Any] = {}

        if config_file:
            default_path = self.config_dir / "defaults" / config_file
            if default_path.exists():
                self._logger.debug(f"Loading defaults from {default_path}")
                merged_config = self._deep_merge(
                    merged_config, self._load_yaml(default_path)
                )

            env_path = self.config_dir / "environments" / f"{self.environment}.yaml"
            if env_path.exists():
                self._logger.debug(f"Loading environment config from {env_path}")
                env_config = self._load_yaml(env_path)

                section = Path(config_file).stem
                if section in env_config:
                    merged_config = self._deep_merge(merged_config, env_config[section])
                else:
                    merged_config = self._deep_merge(merged_config, env_config)

        if use_env_vars:
            merged_config = self._deep_merge(
                merged_config, self._load_from_env(model_class, env_prefix)
            )

        if overrides:
            self._logger.debug(f"Applying overrides: {list(overrides.keys())}")
            merged_config = self._deep_merge(merged_config, overrides)

        merged_config = self._substitute_env_vars(merged_config)

        return self._validate(model_class, merged_config)

    def load_from_env(self, model_class: Type[T], prefix: str = "") -> T:
        """Load configuration from environment variables only.

        Example:
            >>> # MPARTICLE_KEY=abc MPARTICLE_SECRET=xyz
            >>> config = loader.load_from_env(MParticleConfig, prefix="MPARTICLE_")
        """
        return self._validate(model_class, self._load_from_env(model_class, prefix))

    def load_from_dict(self, model_class: Type[T], config_dict: Dict[str, Any]) -> T:
        """Load configuration from a dictionary."""
        if not isinstance(config_dict, dict):
            raise ValueError("config_dict must be a dictionary")
        return self._validate(model_class, config_dict)

    def _validate(self, model_class: Type[T], config_dict: Dict[str, Any]) -> T:
        try:
            config: T = model_class.model_validate(config_dict)
        except ValidationError as e:
            self._logger.error(
                f"Configuration validation failed for {model_class.__name__}",
                extra={"errors": e.error_count()},
                exc_info=False,
            )
            raise ConfigurationError(
                f"Invalid configuration for {model_class.__name__}",
                original_error=e,
            ) from e
        self._logger.debug(f"Successfully loaded {model_class.__name__}")
        return config

    def _load_yaml(self, file_path: Path) -> Dict[str, Any]:
        try:
            with open(file_path, "r") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                "Failed to parse YAML file",
                context={"path": str(file_path)},
                original_error=e,
            ) from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Expected YAML to parse to a dictionary, got {type(config).__name__}",
                context={"path": str(file_path)},
            )
        return config

    def _load_from_env(self, model_class: Type[T], prefix: str = "") -> Dict[str, Any]:
        """Collect ``<prefix><FIELD>`` environment variables for the model's fields."""
        config: Dict[str, Any] = {}

        for field_name in model_class.model_fields.keys():
            env_value = os.environ.get(f"{prefix}{field_name.upper()}")
            if env_value is not None:
                config[field_name] = self._parse_env_value(env_value)

        return config

    def _parse_env_value(self, value: str) -> Any:
        """Parse an environment variable into bool, JSON or string.

        Numbers stay strings here: credentials such as API keys can be purely
        numeric, and pydantic coerces numeric fields itself.
        """
        if value.lower() in ["true", "yes"]:
            return True
        if value.lower() in ["false", "no"]:
            return False

        if value.startswith("{") or value.startswith("["):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def _substitute_env_vars(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Replace ``${VAR_NAME}`` string values with the environment value."""
        result: Dict[str, Any] = {}

        for key, value in config.items():
            new_value: Any
            if isinstance(value, dict):
                new_value = self._substitute_env_vars(value)
            elif (
                isinstance(value, str)
                and value.startswith("${")
                and value.endswith("}")
            ):
                env_var_name = value[2:-1]
                env_value = os.environ.get(env_var_name)
                if env_value is not None:
                    new_value = env_value
                else:
                    # never log the value itself, it is usually a credential
                    self._logger.warning(
                        f"Environment variable {env_var_name} not found, "
                        "keeping placeholder"
                    )
                    new_value = value
            else:
                new_value = value

            result[key] = new_value

        return result
