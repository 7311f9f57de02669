"""X11 global hotkey listener using passive key grabs on the root window."""
import threading
import logging
import time
from typing import Callable, Dict, List, Optional, Tuple

from Xlib import X, XK, display, error

from arabswitch.bridge import HotkeyError, parse_hotkey

logger = logging.getLogger(__name__)

_MODIFIER_MASKS = {
    'ctrl': X.ControlMask,
    'shift': X.ShiftMask,
    'alt': X.Mod1Mask,
    'super': X.Mod4Mask,
}
# Modifiers that matter for matching; NumLock (Mod2) and CapsLock are ignored.
_RELEVANT_MASK = X.ControlMask | X.ShiftMask | X.Mod1Mask | X.Mod4Mask
_LOCK_VARIANTS = (0, X.LockMask, X.Mod2Mask, X.LockMask | X.Mod2Mask)

_POLL_INTERVAL = 0.02


class X11HotkeyListener:
    """Grabs hotkeys on the root window and dispatches their callbacks.

    Grabs are made from the caller's thread before start(); afterwards the
    display is used only by the listener thread until stop() joins it.
    """

    def __init__(self):
        self._display: Optional[display.Display] = None
        self._root = None
        self._current_id = 0
        # id → (keycode, modifier mask, callback)
        self._hotkeys: Dict[int, Tuple[int, int, Callable[[], None]]] = {}
        self._running = False
        self._thread: Optional[threading.Thread] = None

    def _ensure_display(self):
        if self._display is None:
            self._display = display.Display()
            self._root = self._display.screen().root

    def register(self, combo: str, callback: Callable[[], None]) -> int:
        hotkey = parse_hotkey(combo)
        try:
            self._ensure_display()
        except Exception as e:
            raise HotkeyError(f"Cannot open X display: {e}") from e

        keysym = XK.string_to_keysym(hotkey.key)
        keycode = self._display.keysym_to_keycode(keysym) if keysym else 0
        if keycode == 0:
            raise HotkeyError(f"Couldn't register the hot key: unknown key {hotkey.key!r}")

        mask = 0
        for name in hotkey.modifiers:
            mask |= _MODIFIER_MASKS[name]

        catcher = error.CatchError(error.BadAccess)
        for extra in _LOCK_VARIANTS:
            self._root.grab_key(keycode, mask | extra, True,
                                X.GrabModeAsync, X.GrabModeAsync,
                                onerror=catcher)
        self._display.sync()
        if catcher.get_error():
            self._ungrab(keycode, mask)
            raise HotkeyError("Couldn't register the hot key.")

        self._current_id += 1
        self._hotkeys[self._current_id] = (keycode, mask, callback)
        logger.info("Registered hotkey #%d: %s", self._current_id, combo)
        return self._current_id

    def unregister_all(self):
        if self._display is None:
            return
        for hotkey_id in sorted(self._hotkeys, reverse=True):
            keycode, mask, _ = self._hotkeys.pop(hotkey_id)
            self._ungrab(keycode, mask)
            logger.debug("Unregistered hotkey #%d", hotkey_id)
        self._display.flush()

    def _ungrab(self, keycode: int, mask: int):
        for extra in _LOCK_VARIANTS:
            self._root.ungrab_key(keycode, mask | extra)

    def start(self):
        if self._running:
            return
        self._ensure_display()
        self._running = True
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def stop(self):
        self._running = False
        if self._thread:
            self._thread.join(timeout=2.0)
            self._thread = None

    def close(self):
        self.stop()
        self.unregister_all()
        if self._display is not None:
            self._display.close()
            self._display = None

    def _run(self):
        try:
            while self._running:
                if not self._display.pending_events():
                    time.sleep(_POLL_INTERVAL)
                    continue
                event = self._display.next_event()
                if event.type == X.KeyPress:
                    self._dispatch(event.detail, event.state)
        except Exception as e:
            logger.error("Hotkey listener failed: %s", e)
            self._running = False

    def _dispatch(self, keycode: int, state: int):
        for callback in self._match(keycode, state):
            callback()

    def _match(self, keycode: int, state: int) -> List[Callable[[], None]]:
        state &= _RELEVANT_MASK
        return [cb for kc, mask, cb in self._hotkeys.values()
                if kc == keycode and mask == state]
