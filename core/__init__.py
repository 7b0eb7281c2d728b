"""Core infrastructure: the service container and its collaborators."""
from __future__ import annotations

from .container import Container
from .class_finder import ClassFinder
from .exceptions import (
    ServiceBoxException,
    ConfigurationError,
    ClassNotFoundError,
    InjectionError,
    CircularDependencyError,
)
from .injectable_factory import Injectable, InjectableFactory
from .loader import Loader

__all__ = [
    "Container",
    "ClassFinder",
    "Injectable",
    "InjectableFactory",
    "Loader",
    "ServiceBoxException",
    "ConfigurationError",
    "ClassNotFoundError",
    "InjectionError",
    "CircularDependencyError",
]
