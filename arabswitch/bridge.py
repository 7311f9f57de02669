"""Platform capabilities the hotkey workflow depends on.

The conversion core never talks to the desktop. Everything that does
(clipboard, synthetic key presses, global hotkey) goes through a
SelectionBridge so the workflow can run against a fake in tests.
"""
import abc
from typing import Callable, NamedTuple, Tuple


class ClipboardError(RuntimeError):
    """Clipboard could not be read or written."""


class HotkeyError(RuntimeError):
    """Global hotkey could not be registered."""


class Hotkey(NamedTuple):
    modifiers: Tuple[str, ...]   # e.g. ('ctrl',)
    key: str                     # X keysym name, e.g. 'bracketleft'


_MODIFIER_NAMES = {
    'ctrl': 'ctrl', 'control': 'ctrl',
    'shift': 'shift',
    'alt': 'alt', 'mod1': 'alt',
    'super': 'super', 'win': 'super', 'mod4': 'super',
}


def parse_hotkey(combo: str) -> Hotkey:
    """Parse 'ctrl+bracketleft' style combos.

    Raises HotkeyError for an unknown modifier or a missing key.
    """
    parts = [p.strip() for p in combo.split('+') if p.strip()]
    if not parts:
        raise HotkeyError(f"Empty hotkey: {combo!r}")

    *mods, key = parts
    modifiers = []
    for m in mods:
        name = _MODIFIER_NAMES.get(m.lower())
        if name is None:
            raise HotkeyError(f"Unknown modifier {m!r} in hotkey {combo!r}")
        if name not in modifiers:
            modifiers.append(name)
    return Hotkey(tuple(sorted(modifiers)), key)


class SelectionBridge(abc.ABC):
    """Clipboard, key simulation and hotkey delivery for one desktop."""

    @abc.abstractmethod
    def read_clipboard(self) -> str:
        """Return the clipboard text ('' when it holds no text)."""

    @abc.abstractmethod
    def write_clipboard(self, text: str) -> None:
        ...

    @abc.abstractmethod
    def send_copy(self) -> None:
        """Simulate Ctrl+C in the focused window."""

    @abc.abstractmethod
    def send_paste(self) -> None:
        """Simulate Ctrl+V in the focused window."""

    @abc.abstractmethod
    def register_hotkey(self, combo: str, callback: Callable[[], None]) -> int:
        """Bind combo to callback. Returns the registration id (1, 2, ...)."""

    @abc.abstractmethod
    def unregister_all(self) -> None:
        ...

    @abc.abstractmethod
    def start(self) -> None:
        """Start delivering hotkey callbacks (non-blocking)."""

    @abc.abstractmethod
    def stop(self) -> None:
        ...
