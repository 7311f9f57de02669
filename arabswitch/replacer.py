"""X11 selection replacer — clipboard via pyperclip, Ctrl+C / Ctrl+V via XTest."""
import logging
import threading
import time
from typing import Optional

import pyperclip
from Xlib import X, XK, display
from Xlib.ext import xtest

from arabswitch.bridge import ClipboardError

logger = logging.getLogger(__name__)


class Clipboard:
    """Plain-text clipboard access through pyperclip."""

    def read(self) -> str:
        try:
            return pyperclip.paste() or ""
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Cannot read the clipboard: {e}") from e

    def write(self, text: str):
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Cannot write the clipboard: {e}") from e


class X11KeySender:
    """Sends Ctrl+<key> chords to the focused window via XTest."""

    def __init__(self):
        self._display: Optional[display.Display] = None
        self._lock = threading.Lock()

    def _ensure_display(self):
        if self._display is None:
            self._display = display.Display()

    def send_copy(self):
        self._send_ctrl_chord('c')

    def send_paste(self):
        self._send_ctrl_chord('v')

    def _send_ctrl_chord(self, key: str):
        with self._lock:
            self._ensure_display()
            ctrl_code = self._display.keysym_to_keycode(XK.XK_Control_L)
            key_code = self._display.keysym_to_keycode(XK.string_to_keysym(key))
            if not ctrl_code or not key_code:
                logger.warning("Cannot resolve keycodes for Ctrl+%s", key)
                return

            xtest.fake_input(self._display, X.KeyPress, ctrl_code)
            xtest.fake_input(self._display, X.KeyPress, key_code)
            xtest.fake_input(self._display, X.KeyRelease, key_code)
            xtest.fake_input(self._display, X.KeyRelease, ctrl_code)
            self._display.sync()
            # Let the X server deliver the synthetic events
            time.sleep(0.01)

    def close(self):
        with self._lock:
            if self._display is not None:
                self._display.close()
                self._display = None
