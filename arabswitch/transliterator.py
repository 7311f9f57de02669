"""Text rewriting over a MappingTable."""
from enum import Enum

from arabswitch.layout_map import MappingTable


class Direction(Enum):
    FORWARD = 'en_to_ar'
    REVERSE = 'ar_to_en'


def map_forward(text: str, table: MappingTable) -> str:
    """Map text typed on the EN layout as if the AR layout was active."""
    result = []
    for c in text:
        mapped = table.lookup_forward(c)
        result.append(c if mapped is None else mapped)
    return ''.join(result)


def map_reverse(text: str, table: MappingTable) -> str:
    """Map text typed on the AR layout as if the EN layout was active.

    Lam-alef pairs are matched before their single letters, otherwise
    'لا' would come back as 'gh' instead of 'b'.
    """
    result = []
    i = 0
    while i < len(text):
        match = table.lookup_reverse(text, i)
        if match is None:
            result.append(text[i])
            i += 1
            continue
        length, replacement = match
        result.append(replacement)
        i += length
    return ''.join(result)


def apply(text: str, table: MappingTable, direction: Direction) -> str:
    """Convert text in the given direction. Total: never raises on any str."""
    if direction is Direction.REVERSE:
        return map_reverse(text, table)
    return map_forward(text, table)
