"""Container configuration with layered loading and validation.

Implements a hierarchical configuration system with the following precedence:
1. Default values (lowest priority)
2. services.json in the configuration directory
3. Environment variables
4. Command-line arguments (highest priority)

Configuration is deep-merged across all sources, so a later source can
override a single service definition without restating the others.
"""
from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from core.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
SERVICES_FILE = "services.json"


@dataclass(frozen=True)
class ServiceDefinition:
    """How a single service is built.

    Attributes:
        class_name: Implementation class identifier
        loader_class_name: Loader class identifier, takes priority over class_name
        dependency_list: Ordered service names passed positionally to the
            class constructor; None means "not declared"
    """
    class_name: Optional[str] = None
    loader_class_name: Optional[str] = None
    dependency_list: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if not self.class_name and not self.loader_class_name:
            raise ConfigurationError("Service definition needs a class name or a loader class name")
        if self.dependency_list is not None:
            if isinstance(self.dependency_list, str):
                raise ConfigurationError("dependency_list must be a list of service names")
            items = tuple(self.dependency_list)
            if any(not isinstance(item, str) or not item.strip() for item in items):
                raise ConfigurationError(f"Invalid dependency list: {list(items)}")
            object.__setattr__(self, "dependency_list", items)


@dataclass(frozen=True)
class AppConfig:
    """Complete container configuration.

    Attributes:
        services: Service definitions keyed by service name
        loader_packages: Packages searched for conventional loader classes,
            earlier packages win
        debug: Debug mode flag
        log_level: Logging verbosity level
    """
    services: Dict[str, ServiceDefinition] = field(default_factory=dict)
    loader_packages: Tuple[str, ...] = ()
    debug: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")
        object.__setattr__(self, "loader_packages", tuple(self.loader_packages))


class ConfigLoader:
    """Centralized configuration loader with validation and hierarchy."""

    def __init__(self, config_dir: Path = Path("config")):
        self.config_dir = Path(config_dir)

    def load(self, argv: List[str]) -> Tuple[AppConfig, List[str]]:
        """Load configuration with proper hierarchy: defaults → file → env → CLI.

        Args:
            argv: Command-line arguments to parse

        Returns:
            Tuple of (AppConfig instance, unknown CLI arguments)
        """
        # CLI is parsed first so --config-dir can re-target the file lookup
        cli_overrides, unknown_args = self._parse_cli_args(argv)
        config_dir = cli_overrides.pop("config_dir", None)
        if config_dir:
            self.config_dir = Path(config_dir)

        config_dict = self._get_defaults()
        self._deep_update(config_dict, self._load_json_config())
        self._deep_update(config_dict, self._load_env_overrides())
        self._deep_update(config_dict, cli_overrides)

        return self._build_config(config_dict), unknown_args

    def _get_defaults(self) -> Dict[str, Any]:
        """Get default configuration values."""
        return {
            "services": {},
            "loader_packages": [],
            "debug": False,
            "log_level": "INFO",
        }

    def _load_json_config(self) -> Dict[str, Any]:
        """Load services.json from the configuration directory.

        Returns:
            Dictionary with the file contents mapped to config keys, empty when
            the file is missing or malformed
        """
        file_path = self.config_dir / SERVICES_FILE
        if not file_path.exists():
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            logger.warning("Failed to load {}: {}", file_path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring {}: top level must be an object", file_path)
            return {}

        result: Dict[str, Any] = {}
        if "services" in data:
            result["services"] = data["services"]
        if "loaderPackages" in data:
            result["loader_packages"] = data["loaderPackages"]
        if "debug" in data:
            result["debug"] = bool(data["debug"])
        if "logLevel" in data:
            result["log_level"] = str(data["logLevel"]).upper()
        return result

    def _load_env_overrides(self) -> Dict[str, Any]:
        """Load configuration overrides from environment variables.

        Supported environment variables:
        - SERVICEBOX_DEBUG: Enable debug mode
        - SERVICEBOX_LOG_LEVEL: Set logging level
        - SERVICEBOX_LOADER_PACKAGES: Comma-separated loader packages

        Returns:
            Dictionary with environment-based overrides
        """
        overrides: Dict[str, Any] = {}

        if self._env_bool("SERVICEBOX_DEBUG"):
            overrides["debug"] = True

        log_level = os.getenv("SERVICEBOX_LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level.strip().upper()

        loader_packages = os.getenv("SERVICEBOX_LOADER_PACKAGES")
        if loader_packages:
            overrides["loader_packages"] = [p.strip() for p in loader_packages.split(",") if p.strip()]

        return overrides

    def _parse_cli_args(self, argv: List[str]) -> Tuple[Dict[str, Any], List[str]]:
        """Parse CLI arguments.

        Args:
            argv: Command-line arguments

        Returns:
            Tuple of (overrides dictionary, unknown arguments)
        """
        parser = argparse.ArgumentParser(description="Service container", add_help=False)
        parser.add_argument("--config-dir", help="Directory holding services.json")
        parser.add_argument("--debug", action="store_true", help="Enable debug mode")
        parser.add_argument("--log-level", choices=list(LOG_LEVELS), help="Set logging level")

        known, unknown = parser.parse_known_args(argv)

        overrides: Dict[str, Any] = {}
        if known.config_dir:
            overrides["config_dir"] = known.config_dir
        if known.debug:
            overrides["debug"] = True
        if known.log_level:
            overrides["log_level"] = known.log_level

        return overrides, unknown

    def _build_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Build and validate the final configuration object.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        raw_services = config_dict.get("services") or {}
        if not isinstance(raw_services, dict):
            raise ConfigurationError("'services' must be an object keyed by service name")

        services = {
            name: self._build_service(name, raw)
            for name, raw in raw_services.items()
        }

        return AppConfig(
            services=services,
            loader_packages=tuple(config_dict.get("loader_packages") or ()),
            debug=bool(config_dict.get("debug", False)),
            log_level=config_dict.get("log_level", "INFO"),
        )

    @staticmethod
    def _build_service(name: str, raw: Any) -> ServiceDefinition:
        if isinstance(raw, ServiceDefinition):
            return raw
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Service '{name}' must be an object")
        try:
            return ServiceDefinition(
                class_name=raw.get("className"),
                loader_class_name=raw.get("loaderClassName"),
                dependency_list=raw.get("dependencyList"),
            )
        except ConfigurationError as e:
            raise ConfigurationError(f"Service '{name}': {e}") from e

    @staticmethod
    def _env_bool(name: str, default: bool = False) -> bool:
        """Parse boolean from environment variable.

        Returns:
            Boolean value (True for "1", "true", "yes", "y", "on")
        """
        val = os.getenv(name)
        if val is None:
            return default
        return val.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _deep_update(target: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Recursively update mapping 'target' with 'updates' without clobbering nested dicts."""
        for key, new_val in updates.items():
            if isinstance(new_val, dict) and isinstance(target.get(key), dict):
                ConfigLoader._deep_update(target[key], new_val)  # type: ignore[index]
            else:
                target[key] = new_val


__all__ = ["AppConfig", "ServiceDefinition", "ConfigLoader"]
