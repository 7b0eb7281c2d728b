"""Unit tests for class lookup by identifier."""
from collections import OrderedDict

from core.class_finder import ClassFinder
from core.container import Container


class TestClassFinder:
    """Tests for ClassFinder."""

    def test_class_object_passes_through(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find(OrderedDict) is OrderedDict

    def test_colon_identifier(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find("core.container:Container") is Container

    def test_dotted_identifier(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find("collections.OrderedDict") is OrderedDict

    def test_nested_qualname(self):
        # Arrange
        finder = ClassFinder()

        # Act
        cls = finder.find("collections:OrderedDict.__class__")

        # Assert
        assert cls is type

    def test_missing_module(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find("nonexistent.module:Thing") is None

    def test_missing_attribute(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find("collections:NoSuchClass") is None

    def test_non_class_attribute(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find("collections:namedtuple") is None

    def test_invalid_identifiers(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find("") is None
        assert finder.find("NoModule") is None
        assert finder.find(None) is None
        assert finder.find(42) is None

    def test_exists(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.exists("collections:OrderedDict")
        assert not finder.exists("collections:Nothing")

    def test_misses_are_memoized(self, monkeypatch):
        # Arrange
        finder = ClassFinder()
        calls = []
        original = finder._import

        def counting_import(identifier):
            calls.append(identifier)
            return original(identifier)

        monkeypatch.setattr(finder, "_import", counting_import)

        # Act
        finder.find("nonexistent.module:Thing")
        finder.find("nonexistent.module:Thing")

        # Assert
        assert calls == ["nonexistent.module:Thing"]

    def test_relative_identifiers_are_missing(self):
        # Arrange
        finder = ClassFinder()

        # Assert
        assert finder.find("..Ghost") is None
        assert finder.find(".module:Ghost") is None

    def test_container_returns_none_for_relative_class_name(self, configuration_factory):
        # Arrange
        container = Container(configuration_factory(services={"ghost": "..Ghost"}))

        # Act
        ghost = container.get("ghost")

        # Assert
        assert ghost is None
        assert container.has("ghost")
