"""Conversion entry point used by the hotkey workflow and the CLI."""
import logging
from typing import NamedTuple, Optional

from arabswitch import detector, transliterator
from arabswitch.detector import Script
from arabswitch.layout_map import MappingTable, default_table
from arabswitch.transliterator import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = {
    Script.SOURCE: Direction.FORWARD,
    Script.TARGET: Direction.REVERSE,
}


class ConversionResult(NamedTuple):
    text: str
    converted: bool


class Converter:
    """Picks a direction for a selection and rewrites it.

    Holds no state besides the immutable table, so one instance may be
    shared by any number of threads.
    """

    def __init__(self, table: Optional[MappingTable] = None):
        self.table = table if table is not None else default_table()

    def direction_for(self, text: str) -> Direction:
        return _DIRECTIONS[detector.classify(text)]

    def convert(self, text: str) -> ConversionResult:
        """Convert text to the other layout.

        Empty text is a no-op: ('', False). Anything else is converted,
        even when no character changes (digits, emoji).
        """
        if not text:
            return ConversionResult('', False)

        direction = self.direction_for(text)
        converted = transliterator.apply(text, self.table, direction)
        logger.debug("Converted %d chars (%s): %r → %r",
                     len(text), direction.value, text, converted)
        return ConversionResult(converted, True)


_default_converter = Converter()


def get_converter() -> Converter:
    return _default_converter


def convert(text: str) -> ConversionResult:
    """Convert text with the canonical EN ↔ AR table."""
    return get_converter().convert(text)
