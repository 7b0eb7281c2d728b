"""Service probe: reports whether named services can be resolved by the container."""
from __future__ import annotations

import sys
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

from config.config import AppConfig, ConfigLoader
from config.service import ContainerConfiguration
from core.container import Container
from core.log_setup import configure_logging


class ProbeContainer(Container):
    """Container whose configuration comes from the command line rather than the default loader."""

    def __init__(self, config: AppConfig):
        self._app_config = config
        super().__init__(ContainerConfiguration)

    def load_config(self) -> AppConfig:
        return self._app_config


def probe(container: Container, names: List[str]) -> int:
    """Resolve each name and print its status.

    Returns:
        Number of names that could not be resolved
    """
    missing = 0
    for name in names:
        service = container.get(name)
        if service is None:
            missing += 1
            declared = " (declared)" if container.has(name) else ""
            print(f"{name}: missing{declared}")
        else:
            print(f"{name}: available ({type(service).__qualname__})")
    return missing


def main(argv: Optional[List[str]] = None) -> int:
    """Application entry point."""
    # Load environment variables from .env before configuration is read
    load_dotenv()

    argv = sys.argv[1:] if argv is None else argv
    config, names = ConfigLoader().load(argv)
    configure_logging(config.log_level, config.debug)

    container = ProbeContainer(config)

    logger.debug("Probing {} service(s)", len(names))
    return 1 if probe(container, names) else 0


if __name__ == "__main__":
    sys.exit(main())
