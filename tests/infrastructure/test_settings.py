"""Tests for infrastructure settings."""

from pathlib import Path

from finance_tracker.infrastructure import settings as settings_module
from finance_tracker.infrastructure.settings import FinanceSettings


def test_from_env_uses_export_dir(monkeypatch, tmp_path: Path) -> None:
    """FINANCE_EXPORT_DIR should resolve to a Path."""
    monkeypatch.setenv("FINANCE_EXPORT_DIR", str(tmp_path))

    settings = FinanceSettings.from_env()

    assert settings.export_dir == tmp_path.resolve()


def test_from_env_defaults_to_project_exports(monkeypatch, tmp_path) -> None:
    """Without configuration exports go to <project root>/exports."""
    monkeypatch.delenv("FINANCE_EXPORT_DIR", raising=False)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)

    settings = FinanceSettings.from_env()

    assert settings.export_dir == tmp_path / "exports"
