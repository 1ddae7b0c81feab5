"""
Settings management for Simple File Manager

Presentation preferences only: window geometry, hidden-file visibility and
file list column widths, kept as JSON under ~/.config/simple-file-manager.
"""
import json
import base64
import logging
from pathlib import Path
from PyQt6.QtCore import QByteArray

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "simple-file-manager"


class Settings:
    DEFAULT_COLUMN_WIDTHS = [260, 90, 90, 140]  # Name, Type, Size, Modified

    # Parsed files shared between instances: config_file -> (mtime, values)
    _cache = {}

    def __init__(self, config_dir=None):
        self.config_dir = Path(config_dir) if config_dir else CONFIG_DIR
        self.config_file = self.config_dir / "settings.json"
        self.settings = self.load_settings()

    def defaults(self):
        return {
            "window_geometry": None,
            "show_hidden": True,
            "column_widths": list(self.DEFAULT_COLUMN_WIDTHS),
        }

    def load_settings(self):
        """Stored values merged over the defaults; re-read only when the file changed"""
        values = self.defaults()
        try:
            mtime = self.config_file.stat().st_mtime
        except FileNotFoundError:
            return values
        except OSError as e:
            logger.warning("Cannot stat settings file %s: %s", self.config_file, e)
            return values

        cached = Settings._cache.get(self.config_file)
        if cached is not None and cached[0] == mtime:
            values.update(cached[1])
            return values

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", self.config_file, e)
            return values
        if not isinstance(stored, dict):
            logger.warning("Ignoring settings file %s: not a JSON object", self.config_file)
            return values

        Settings._cache[self.config_file] = (mtime, dict(stored))
        values.update(stored)
        return values

    def save_settings(self):
        """Write the current values; a failed write only costs the preference"""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self.config_file, e)
        finally:
            Settings._cache.pop(self.config_file, None)

    def get(self, key, default=None):
        """Get a setting value; geometry keys come back as QByteArray"""
        value = self.settings.get(key, default)
        if key.endswith("geometry") and isinstance(value, str) and value:
            try:
                return QByteArray(base64.b64decode(value.encode('ascii'), validate=True))
            except ValueError:
                logger.warning("Discarding malformed %s in settings", key)
                return default
        return value

    def set(self, key, value):
        """Set and persist a value, picking up changes another window saved meanwhile"""
        if isinstance(value, QByteArray):
            value = base64.b64encode(value.data()).decode('ascii')
        self.settings = self.load_settings()
        self.settings[key] = value
        self.save_settings()

    def get_column_widths(self, default_widths=None):
        self.settings = self.load_settings()
        widths = self.settings.get("column_widths")
        if not isinstance(widths, list):
            return list(default_widths or self.DEFAULT_COLUMN_WIDTHS)
        return widths

    def set_column_widths(self, widths):
        self.set("column_widths", list(widths))
