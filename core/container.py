"""Dependency Injection Container with lazy, memoized service resolution."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger

from core.class_finder import ClassFinder
from core.exceptions import CircularDependencyError
from core.injectable_factory import InjectableFactory

USER_SERVICE = "user"


class Container:
    """DI container for services. Services are instantiated lazily and only once.

    A service name is resolved on first ``get`` in this order:
    1. a built-in ``load_<name>`` method of the container
    2. a loader class (override mapping first, then configuration)
    3. a service class declared in configuration, built either from its
       declared dependency list or through the injectable factory

    Names that resolve to nothing return None and are retried on the next call.

    Attributes:
        configuration: Configuration collaborator built at construction
    """

    def __init__(self, configuration_class_name: Any, loader_class_names: Optional[Dict[str, Any]] = None):
        """Initialize the container.

        Args:
            configuration_class_name: Class (or class identifier) of the configuration
                collaborator, built through the injectable factory
            loader_class_names: Per-deployment loader overrides, name -> class identifier
        """
        self._data: Dict[str, Any] = {}
        self._loader_class_names: Dict[str, Any] = dict(loader_class_names or {})
        self._resolving: List[str] = []
        self.configuration = None

        self.configuration = self.get("injectable_factory").create(configuration_class_name)

    def get(self, name: str) -> Optional[Any]:
        """Obtain a service, or None if it cannot be resolved.

        Raises:
            CircularDependencyError: If the service is already being resolved
        """
        if name not in self._data:
            self._load(name)
        return self._data.get(name)

    def has(self, name: str) -> bool:
        """Check whether a service can be obtained. Nothing is constructed."""
        if name in self._data:
            return True

        if self._get_load_method(name) is not None:
            return True

        if self.configuration is None:
            return False

        if self.configuration.get_loader_class_name(name):
            return True

        if self.configuration.get_service_class_name(name):
            return True

        return False

    def set_user(self, user: Any) -> None:
        """Inject the current user after authentication."""
        self._set(USER_SERVICE, user)

    def _set(self, name: str, obj: Any) -> None:
        self._data[name] = obj

    def _get_load_method(self, name: str):
        if not isinstance(name, str) or not name.isidentifier():
            return None
        method = getattr(self, "load_" + name, None)
        return method if callable(method) else None

    def _load(self, name: str) -> None:
        if name in self._resolving:
            raise CircularDependencyError(self._resolving[self._resolving.index(name):] + [name])

        self._resolving.append(name)
        try:
            obj = self._resolve(name)
        finally:
            self._resolving.pop()

        if obj is not None:
            self._data[name] = obj
            logger.debug("Service '{}' resolved to {}", name, type(obj).__qualname__)

    def _resolve(self, name: str) -> Optional[Any]:
        load_method = self._get_load_method(name)
        if load_method is not None:
            return load_method()

        if self.configuration is None:
            return None

        loader_class_name = self._loader_class_names.get(name) or self.configuration.get_loader_class_name(name)
        if loader_class_name:
            loader = self.get("injectable_factory").create(loader_class_name)
            return loader.load()

        class_name = self.configuration.get_service_class_name(name)
        if not class_name:
            return None

        cls = self.get("class_finder").find(class_name)
        if cls is None:
            logger.warning("Service '{}' declares class '{}' which does not exist", name, class_name)
            return None

        dependency_list = self.configuration.get_service_dependency_list(name)
        if dependency_list is not None:
            return cls(*[self.get(item) for item in dependency_list])

        return self.get("injectable_factory").create(cls)

    # Built-in services

    def load_container(self) -> Container:
        return self

    def load_injectable_factory(self) -> InjectableFactory:
        return InjectableFactory(self)

    def load_class_finder(self) -> ClassFinder:
        return ClassFinder()

    def load_config(self):
        from config.config import ConfigLoader

        config, _ = ConfigLoader().load([])
        return config

    def load_log(self):
        return logger.bind(component="container")
