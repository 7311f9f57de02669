"""Tests for JSON configuration."""
import sys
import os
import json
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from arabswitch.config import DEFAULT_CONFIG, Config


def test_defaults_when_missing(tmp_path):
    config = Config(tmp_path / 'config.json')
    assert config.debug_logging is False
    assert config.clipboard_delay_ms == 100
    assert config.restore_clipboard is True
    assert config.notify_errors is True


def test_stored_values_override_defaults(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({"debug_logging": True, "clipboard_delay_ms": 250}))
    config = Config(path)
    assert config.debug_logging is True
    assert config.clipboard_delay_ms == 250
    assert config.restore_clipboard is True


def test_malformed_file_falls_back(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text('{not json')
    config = Config(path)
    assert config.get("clipboard_delay_ms") == DEFAULT_CONFIG["clipboard_delay_ms"]


def test_non_object_file_ignored(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text('[1, 2]')
    assert Config(path).debug_logging is False


def test_bad_delay_value(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({"clipboard_delay_ms": "soon"}))
    assert Config(path).clipboard_delay_ms == 100
    path.write_text(json.dumps({"clipboard_delay_ms": -5}))
    assert Config(path).clipboard_delay_ms == 0


def test_set_persists(tmp_path):
    path = tmp_path / 'sub' / 'config.json'
    config = Config(path)
    config.set("notify_errors", False)
    config.debug_logging = True
    reloaded = Config(path)
    assert reloaded.notify_errors is False
    assert reloaded.debug_logging is True
