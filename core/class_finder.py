"""Lookup of classes by identifier."""
from __future__ import annotations

import importlib
import inspect
from typing import Any, Dict, Optional, Tuple

from loguru import logger


class ClassFinder:
    """Turns class identifiers into classes.

    Accepted identifiers:
        - a class object, returned unchanged
        - "package.module:Qual.Name"
        - "package.module.ClassName"

    Missing modules, missing attributes and non-class attributes all yield
    None. Lookups are memoized per finder, misses included.
    """

    def __init__(self):
        self._cache: Dict[str, Optional[type]] = {}

    def find(self, identifier: Any) -> Optional[type]:
        """Return the class for an identifier, or None if it does not exist."""
        if inspect.isclass(identifier):
            return identifier
        if not isinstance(identifier, str) or not identifier.strip():
            return None

        identifier = identifier.strip()
        if identifier in self._cache:
            return self._cache[identifier]

        cls = self._import(identifier)
        if cls is None:
            logger.debug("Class not found: {}", identifier)
        self._cache[identifier] = cls
        return cls

    def exists(self, identifier: Any) -> bool:
        """Check whether an identifier refers to an importable class."""
        return self.find(identifier) is not None

    @staticmethod
    def _split(identifier: str) -> Tuple[str, str]:
        if ":" in identifier:
            module_name, _, attr_path = identifier.partition(":")
        else:
            module_name, _, attr_path = identifier.rpartition(".")
        return module_name, attr_path

    def _import(self, identifier: str) -> Optional[type]:
        module_name, attr_path = self._split(identifier)
        if not module_name or not attr_path:
            return None

        if module_name.startswith("."):
            return None

        try:
            obj: Any = importlib.import_module(module_name)
        except (ImportError, TypeError, ValueError):
            return None

        for part in attr_path.split("."):
            obj = getattr(obj, part, None)
            if obj is None:
                return None

        return obj if inspect.isclass(obj) else None
