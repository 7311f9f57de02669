"""Hotkey workflow — copy the selection, convert it, paste it back."""
import threading
import logging
import time
from typing import Callable, Optional

from arabswitch.bridge import SelectionBridge
from arabswitch.config import HOTKEY, Config
from arabswitch.converter import ConversionResult, Converter, get_converter

logger = logging.getLogger(__name__)


class Daemon:
    """Binds the conversion hotkey and runs one conversion job at a time.

    The hotkey callback only dispatches to a worker thread so the OS event
    loop is never blocked by clipboard round-trips.
    """

    def __init__(self, config: Config, bridge: SelectionBridge,
                 converter: Optional[Converter] = None,
                 on_error: Optional[Callable[[str], None]] = None):
        self.config = config
        self.bridge = bridge
        self.converter = converter if converter is not None else get_converter()
        self.on_error = on_error
        self._running = False
        self._busy = threading.Lock()
        self._worker: Optional[threading.Thread] = None

    @property
    def running(self):
        return self._running

    @property
    def busy(self) -> bool:
        return self._busy.locked()

    def start(self):
        """Register the hotkey and start listening. Raises HotkeyError."""
        if self._running:
            return
        self.bridge.register_hotkey(HOTKEY, self._on_hotkey)
        self.bridge.start()
        self._running = True
        logger.info("Daemon started — press %s to convert the selection", HOTKEY)

    def stop(self):
        if not self._running:
            return
        self._running = False
        self.bridge.stop()
        self.bridge.unregister_all()
        if self._worker is not None:
            self._worker.join(timeout=2.0)
        logger.info("Daemon stopped")

    def _on_hotkey(self):
        if not self._busy.acquire(blocking=False):
            logger.debug("Conversion already in progress, ignoring hotkey")
            return
        self._worker = threading.Thread(target=self._run_job, daemon=True)
        self._worker.start()

    def _run_job(self):
        try:
            self.convert_selection()
        finally:
            self._busy.release()

    def _wait(self):
        delay = self.config.clipboard_delay_ms
        if delay:
            time.sleep(delay / 1000.0)

    def _backup_clipboard(self) -> str:
        try:
            return self.bridge.read_clipboard()
        except Exception as e:
            logger.warning("Could not back up clipboard: %s", e)
            return ""

    def convert_selection(self) -> Optional[ConversionResult]:
        """Convert the current selection in place.

        Returns the conversion result, or None when nothing was selected or
        the job failed. The previous clipboard text is put back afterwards
        on every path.
        """
        backup = self._backup_clipboard()
        try:
            self.bridge.send_copy()
            self._wait()
            copied = self.bridge.read_clipboard()

            # Nothing selected: Ctrl+C left the clipboard untouched
            if not copied or copied == backup:
                logger.debug("No new selection captured, nothing to convert")
                return None

            result = self.converter.convert(copied)
            if not result.converted:
                return None

            self.bridge.write_clipboard(result.text)
            self.bridge.send_paste()
            logger.info("Converted selection (%d → %d chars)",
                        len(copied), len(result.text))
            return result
        except Exception as e:
            logger.error("Error converting text: %s", e)
            self._report_error(f"Error converting text: {e}")
            return None
        finally:
            self._restore_clipboard(backup)

    def _restore_clipboard(self, backup: str):
        if not backup or not self.config.restore_clipboard:
            return
        self._wait()  # let the paste complete before swapping contents back
        try:
            self.bridge.write_clipboard(backup)
        except Exception as e:
            logger.error("Could not restore clipboard: %s", e)
            self._report_error(f"Could not restore clipboard: {e}")

    def _report_error(self, message: str):
        if self.on_error is None or not self.config.notify_errors:
            return
        try:
            self.on_error(message)
        except Exception as e:
            logger.warning("Error callback failed: %s", e)
