"""Configuration package for the service container.

Provides a configuration system with support for:
- Multiple configuration sources (defaults, services.json, environment, CLI)
- Hierarchical configuration with proper precedence
- Validated service definitions
- The lookup facade the container consumes

Main components:
- config.py: Configuration dataclasses and loader
- service.py: ContainerConfiguration facade
"""
