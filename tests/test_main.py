"""Unit tests for the service probe entry point."""
import json

import pytest

from config.config import AppConfig
from main import ProbeContainer, main, probe


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SERVICEBOX_DEBUG", "SERVICEBOX_LOG_LEVEL", "SERVICEBOX_LOADER_PACKAGES"):
        monkeypatch.delenv(name, raising=False)


class TestProbe:
    """Tests for probe reporting."""

    def test_reports_available_and_missing(self, capsys):
        # Arrange
        container = ProbeContainer(AppConfig())

        # Act
        missing = probe(container, ["container", "ghost"])

        # Assert
        out = capsys.readouterr().out
        assert missing == 1
        assert "container: available (ProbeContainer)" in out
        assert "ghost: missing" in out

    def test_declared_but_missing_is_flagged(self, capsys, tmp_path):
        # Arrange
        (tmp_path / "services.json").write_text(json.dumps({
            "services": {"ghost": {"className": "nonexistent.module:Ghost"}},
        }), encoding="utf-8")

        # Act
        exit_code = main(["--config-dir", str(tmp_path), "ghost"])

        # Assert
        assert exit_code == 1
        assert "ghost: missing (declared)" in capsys.readouterr().out

    def test_probe_container_uses_given_config(self):
        # Arrange
        config = AppConfig(debug=True)

        # Act
        container = ProbeContainer(config)

        # Assert
        assert container.get("config") is config


class TestMain:
    """Tests for the main entry point."""

    def test_all_available_exits_zero(self, tmp_path, capsys):
        # Act
        exit_code = main(["--config-dir", str(tmp_path), "container", "class_finder"])

        # Assert
        assert exit_code == 0
        assert "class_finder: available (ClassFinder)" in capsys.readouterr().out
