"""Tests for the pyperclip-backed clipboard (pyperclip calls are patched)."""
import sys
import os
from unittest.mock import patch
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

pytest.importorskip('Xlib')
pyperclip = pytest.importorskip('pyperclip')

from arabswitch.bridge import ClipboardError
from arabswitch.replacer import Clipboard


def test_read_returns_text():
    with patch('pyperclip.paste', return_value='سلام'):
        assert Clipboard().read() == 'سلام'


def test_read_none_is_empty():
    with patch('pyperclip.paste', return_value=None):
        assert Clipboard().read() == ''


def test_write_calls_copy():
    with patch('pyperclip.copy') as mock_copy:
        Clipboard().write('salam')
    mock_copy.assert_called_once_with('salam')


def test_pyperclip_errors_become_clipboard_errors():
    err = pyperclip.PyperclipException("no mechanism")
    with patch('pyperclip.paste', side_effect=err):
        with pytest.raises(ClipboardError):
            Clipboard().read()
    with patch('pyperclip.copy', side_effect=err):
        with pytest.raises(ClipboardError):
            Clipboard().write('x')
