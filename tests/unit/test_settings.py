"""
Tests for the JSON settings store
"""
import json

from PyQt6.QtCore import QByteArray

from utils.settings import Settings


def test_defaults_without_file(tmp_path):
    settings = Settings(tmp_path)

    assert settings.get("show_hidden") is True
    assert settings.get("window_geometry") is None
    assert settings.get_column_widths() == Settings.DEFAULT_COLUMN_WIDTHS


def test_set_persists_to_disk(tmp_path):
    Settings(tmp_path).set("show_hidden", False)

    stored = json.loads((tmp_path / "settings.json").read_text())
    assert stored["show_hidden"] is False
    assert Settings(tmp_path).get("show_hidden") is False


def test_geometry_round_trips_as_bytes(tmp_path):
    Settings(tmp_path).set("window_geometry", QByteArray(b"\x01\x02geometry"))

    stored = json.loads((tmp_path / "settings.json").read_text())
    assert isinstance(stored["window_geometry"], str)
    assert Settings(tmp_path).get("window_geometry") == QByteArray(b"\x01\x02geometry")


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "settings.json").write_text("{not json")

    assert Settings(tmp_path).get("show_hidden") is True


def test_unknown_keys_are_merged_with_defaults(tmp_path):
    (tmp_path / "settings.json").write_text(json.dumps({"column_widths": [1, 2, 3, 4]}))

    settings = Settings(tmp_path)
    assert settings.get_column_widths() == [1, 2, 3, 4]
    assert settings.get("show_hidden") is True


def test_set_column_widths(tmp_path):
    Settings(tmp_path).set_column_widths((300, 80, 80, 120))

    assert Settings(tmp_path).get_column_widths() == [300, 80, 80, 120]
