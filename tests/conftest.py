"""Shared fixtures for container tests."""
import pytest


def make_configuration(services=None, loaders=None, dependencies=None):
    """Build a configuration class backed by plain dictionaries.

    The container builds its configuration through the injectable factory,
    so the data is baked into a fresh class rather than passed to __init__.
    """
    services = dict(services or {})
    loaders = dict(loaders or {})
    dependencies = dict(dependencies or {})

    class DictConfiguration:
        def get_loader_class_name(self, name):
            return loaders.get(name)

        def get_service_class_name(self, name):
            return services.get(name)

        def get_service_dependency_list(self, name):
            return dependencies.get(name)

    return DictConfiguration


@pytest.fixture
def configuration_factory():
    return make_configuration
