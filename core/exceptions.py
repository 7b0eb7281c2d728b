"""Custom exception hierarchy for the service container."""
from __future__ import annotations


class ServiceBoxException(Exception):
    """Base exception for all container errors."""
    pass


class ConfigurationError(ServiceBoxException):
    """Raised when configuration is invalid or missing."""
    pass


class ClassNotFoundError(ServiceBoxException):
    """Raised when a class identifier cannot be turned into a class."""
    pass


class InjectionError(ServiceBoxException):
    """Raised when a constructor dependency cannot be satisfied."""
    pass


class CircularDependencyError(ServiceBoxException):
    """Raised when a service depends on itself through the resolution chain."""

    def __init__(self, chain):
        self.chain = list(chain)
        super().__init__(f"Circular service dependency: {' -> '.join(self.chain)}")
