"""Configuration management — JSON-based, stored in ~/.config/arabswitch/."""
import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Fixed: the hotkey and the layout table are not user-configurable.
HOTKEY = "ctrl+bracketleft"
HOTKEY_LABEL = "Ctrl+["

DEFAULT_CONFIG = {
    "debug_logging": False,
    "clipboard_delay_ms": 100,  # wait for the target app to serve Ctrl+C / Ctrl+V
    "restore_clipboard": True,
    "notify_errors": True,
}

CONFIG_DIR = Path.home() / ".config" / "arabswitch"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    self._data.update(stored)
                else:
                    logger.warning("Ignoring %s: expected a JSON object", self.path)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Ignoring unreadable config %s: %s", self.path, e)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def debug_logging(self):
        return bool(self._data["debug_logging"])

    @debug_logging.setter
    def debug_logging(self, val):
        self._data["debug_logging"] = bool(val)
        self.save()

    @property
    def clipboard_delay_ms(self):
        try:
            return max(0, int(self._data["clipboard_delay_ms"]))
        except (TypeError, ValueError):
            return DEFAULT_CONFIG["clipboard_delay_ms"]

    @property
    def restore_clipboard(self):
        return bool(self._data["restore_clipboard"])

    @property
    def notify_errors(self):
        return bool(self._data["notify_errors"])
