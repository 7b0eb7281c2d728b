"""Base class for loader classes that build a single service."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Loader(ABC):
    """A loader is constructed by the injectable factory and asked for one service.

    Subclasses declare their own dependencies as constructor parameters named
    after container services.
    """

    @abstractmethod
    def load(self) -> Any:
        """Build and return the service instance."""
        raise NotImplementedError
