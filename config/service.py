"""Configuration facade consumed by the service container.

Exposes the three lookups the container needs (loader class, service class,
dependency list) on top of AppConfig, so the container never reads the raw
configuration structure.
"""
from __future__ import annotations

from typing import List, Optional

from config.config import AppConfig, ServiceDefinition
from core.class_finder import ClassFinder


class ContainerConfiguration:
    """Facade for container service configuration.

    Loader classes are taken from the service definition first. Failing that,
    each package in ``loader_packages`` is probed for a conventional loader
    ``<package>.<name>:<PascalName>Loader``, so a deployment can override a
    built-in loader by listing its own package ahead of the stock one.

    Example:
        configuration = ContainerConfiguration(config, ClassFinder())
        configuration.get_service_class_name("mailer")  # "app.mail:Mailer"

    Attributes:
        _config: Underlying AppConfig instance
        _class_finder: Used to probe conventional loader locations
    """

    def __init__(self, config: AppConfig, class_finder: ClassFinder):
        self._config = config
        self._class_finder = class_finder

    def get_loader_class_name(self, name: str) -> Optional[str]:
        definition = self._definition(name)
        if definition is not None and definition.loader_class_name:
            return definition.loader_class_name

        for package in self._config.loader_packages:
            candidate = f"{package}.{name}:{self.loader_class_basename(name)}"
            if self._class_finder.exists(candidate):
                return candidate

        return None

    def get_service_class_name(self, name: str) -> Optional[str]:
        definition = self._definition(name)
        return definition.class_name if definition is not None else None

    def get_service_dependency_list(self, name: str) -> Optional[List[str]]:
        """Get declared dependency names, or None when none are declared.

        An empty list is a declaration too: the class is then called with no
        arguments instead of going through the injectable factory.
        """
        definition = self._definition(name)
        if definition is None or definition.dependency_list is None:
            return None
        return list(definition.dependency_list)

    @staticmethod
    def loader_class_basename(name: str) -> str:
        """Conventional loader class name, e.g. "file_storage" -> "FileStorageLoader"."""
        parts = [p for p in name.split("_") if p]
        return "".join(p[:1].upper() + p[1:] for p in parts) + "Loader"

    def _definition(self, name: str) -> Optional[ServiceDefinition]:
        return self._config.services.get(name)
