"""SelectionBridge implementation for X11 desktops."""
import logging
from typing import Callable

from arabswitch.bridge import SelectionBridge
from arabswitch.replacer import Clipboard, X11KeySender
from arabswitch.x11_input import X11HotkeyListener

logger = logging.getLogger(__name__)


class X11Bridge(SelectionBridge):

    def __init__(self):
        self._clipboard = Clipboard()
        self._keys = X11KeySender()
        self._listener = X11HotkeyListener()

    def read_clipboard(self) -> str:
        return self._clipboard.read()

    def write_clipboard(self, text: str) -> None:
        self._clipboard.write(text)

    def send_copy(self) -> None:
        self._keys.send_copy()

    def send_paste(self) -> None:
        self._keys.send_paste()

    def register_hotkey(self, combo: str, callback: Callable[[], None]) -> int:
        return self._listener.register(combo, callback)

    def unregister_all(self) -> None:
        self._listener.unregister_all()

    def start(self) -> None:
        self._listener.start()
        logger.info("X11 hotkey listener active")

    def stop(self) -> None:
        self._listener.stop()

    def close(self) -> None:
        self._listener.close()
        self._keys.close()
