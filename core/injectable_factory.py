"""Generic object building with constructor inference."""
from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from loguru import logger

from core.exceptions import ClassNotFoundError, InjectionError

if TYPE_CHECKING:
    from core.container import Container


class Injectable:
    """Mixin for objects that receive dependencies after construction.

    Each name in ``dependency_list`` is fetched from the container and handed
    to ``inject`` once the instance has been built by the factory.

    Example:
        class ReportService(Injectable):
            dependency_list = ("config", "log")

            def build(self):
                config = self.get_injection("config")
    """

    dependency_list: Tuple[str, ...] = ()

    def inject(self, name: str, obj: Any) -> None:
        self.__dict__.setdefault("_injections", {})[name] = obj

    def get_injection(self, name: str) -> Any:
        return self.__dict__.get("_injections", {}).get(name)

    def add_dependency(self, name: str) -> None:
        """Extend the dependency list of this instance."""
        if name not in self.dependency_list:
            self.dependency_list = tuple(self.dependency_list) + (name,)

    def get_dependency_list(self) -> Tuple[str, ...]:
        return tuple(self.dependency_list)


class InjectableFactory:
    """Builds instances of classes, filling constructor parameters from the container.

    A constructor parameter is satisfied, in order, by:
    1. an explicit value passed to ``create_with``
    2. the container service of the same name, when it resolves to an object
    3. the parameter default

    Anything else raises InjectionError. Services are looked up with ``get``
    rather than ``has``, so names provided only by a loader override are
    injected, and a declared service whose class is missing never replaces a
    default with None.
    """

    def __init__(self, container: Container):
        self._container = container

    def create(self, class_name: Any) -> Any:
        """Build an instance of the class behind ``class_name``.

        Raises:
            ClassNotFoundError: If the class cannot be found
            InjectionError: If a required constructor parameter is not available
        """
        return self.create_with(class_name, {})

    def create_with(self, class_name: Any, with_params: Optional[Dict[str, Any]] = None) -> Any:
        """Build an instance, preferring ``with_params`` over container services."""
        cls = self._container.get("class_finder").find(class_name)
        if cls is None:
            raise ClassNotFoundError(f"Class '{class_name}' not found")

        kwargs = self._resolve_arguments(cls, with_params or {})
        obj = cls(**kwargs)

        if isinstance(obj, Injectable):
            self._apply_injections(obj)

        logger.debug("Built {} with {}", cls.__qualname__, sorted(kwargs))
        return obj

    def _resolve_arguments(self, cls: type, with_params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            signature = inspect.signature(cls)
        except (TypeError, ValueError):
            # Builtins and some extension types expose no signature
            return {}

        kwargs: Dict[str, Any] = {}
        for name, param in signature.parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue
            if param.kind == inspect.Parameter.POSITIONAL_ONLY:
                raise InjectionError(
                    f"Cannot inject positional-only parameter '{name}' of {cls.__qualname__}"
                )

            if name in with_params:
                kwargs[name] = with_params[name]
                continue

            service = self._container.get(name)
            if service is not None:
                kwargs[name] = service
                continue

            if param.default is not inspect.Parameter.empty:
                continue

            raise InjectionError(
                f"Cannot resolve parameter '{name}' for {cls.__qualname__}"
            )
        return kwargs

    def _apply_injections(self, obj: Injectable) -> None:
        for name in obj.get_dependency_list():
            obj.inject(name, self._container.get(name))
