"""
Tests for environment-driven export settings.
"""
import pytest
from pydantic import ValidationError

from tabexport.config import ExportSettings


def test_defaults(monkeypatch):
    for name in ("EXPORT_ROW_HEIGHT", "EXPORT_COLUMN_WIDTH_SCALE", "EXPORT_DEBUG_MODE"):
        monkeypatch.delenv(name, raising=False)

    settings = ExportSettings.from_env()

    assert settings.row_height == 500
    assert settings.column_width_scale == 800
    assert settings.debug is False


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("EXPORT_ROW_HEIGHT", "320")
    monkeypatch.setenv("EXPORT_COLUMN_WIDTH_SCALE", "256")
    monkeypatch.setenv("EXPORT_DEBUG_MODE", "TRUE")

    settings = ExportSettings.from_env()

    assert settings.row_height == 320
    assert settings.column_width_scale == 256
    assert settings.debug is True


def test_invalid_row_height_rejected(monkeypatch):
    monkeypatch.setenv("EXPORT_ROW_HEIGHT", "0")
    with pytest.raises(ValidationError):
        ExportSettings.from_env()


def test_row_height_upper_bound():
    with pytest.raises(ValidationError):
        ExportSettings(row_height=0x8000)


def test_non_numeric_row_height_rejected(monkeypatch):
    monkeypatch.setenv("EXPORT_ROW_HEIGHT", "abc")
    with pytest.raises(ValidationError):
        ExportSettings.from_env()


def test_non_numeric_width_scale_rejected(monkeypatch):
    monkeypatch.delenv("EXPORT_ROW_HEIGHT", raising=False)
    monkeypatch.setenv("EXPORT_COLUMN_WIDTH_SCALE", "wide")
    with pytest.raises(ValidationError):
        ExportSettings.from_env()
