"""Bidirectional QWERTY ↔ Arabic (102) AZERTY keyboard layout mapping."""
import functools
import logging
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Optional, Tuple

logger = logging.getLogger(__name__)

# Ordered (EN key, AR character) pairs. Order matters: the reverse table
# keeps the first source registered for a given target.
LAYOUT_ENTRIES: Tuple[Tuple[str, str], ...] = (
    # Lower rows
    ('q', 'ض'), ('w', 'ص'), ('e', 'ث'), ('r', 'ق'), ('t', 'ف'), ('y', 'غ'),
    ('u', 'ع'), ('i', 'ه'), ('o', 'خ'), ('p', 'ح'), ('[', 'ج'), (']', 'د'),
    ('a', 'ش'), ('s', 'س'), ('d', 'ي'), ('f', 'ب'), ('g', 'ل'), ('h', 'ا'),
    ('j', 'ت'), ('k', 'ن'), ('l', 'م'), (';', 'ك'), ("'", 'ط'),
    ('z', 'ئ'), ('x', 'ء'), ('c', 'ؤ'), ('v', 'ر'), ('b', 'لا'), ('n', 'ى'),
    ('m', 'ة'), (',', 'و'), ('.', 'ز'), ('/', 'ظ'),

    # Shifted rows (harakat, lam-alef ligatures, punctuation)
    ('Q', 'َ'), ('W', 'ً'), ('E', 'ُ'), ('R', 'ٌ'),
    ('T', 'لإ'), ('Y', 'إ'), ('U', '`'), ('I', '÷'), ('O', '×'), ('P', '؛'),
    ('{', '<'), ('}', '>'),
    ('A', 'ِ'), ('S', 'ٍ'), ('D', ']'), ('F', '['), ('G', 'لأ'),
    ('H', 'أ'), ('J', 'ـ'), ('K', '،'), ('L', '/'), (':', "'"), ('"', '"'),
    ('Z', '~'), ('X', 'ْ'), ('C', '}'), ('V', '{'), ('B', 'لآ'),
    ('N', 'آ'), ('M', "'"), ('<', ','), ('>', '.'), ('?', '؟'),

    # Digits and shifted digits
    ('1', '1'), ('2', '2'), ('3', '3'), ('4', '4'), ('5', '5'),
    ('6', '6'), ('7', '7'), ('8', '8'), ('9', '9'), ('0', '0'),
    ('!', '!'), ('@', '@'), ('#', '#'), ('$', '$'), ('%', '%'),
    ('^', '^'), ('&', '&'), ('*', '*'), ('(', ')'), (')', '('),

    # Remaining keys and whitespace
    ('-', '-'), ('_', '_'), ('=', '='), ('+', '+'), ('\\', '\\'), ('|', '|'),
    ('`', '`'), ('~', '~'),
    (' ', ' '), ('\n', '\n'), ('\r', '\r'), ('\t', '\t'),
)

# Longest reverse key tried by lookup_reverse (lam-alef ligatures).
MAX_SEQUENCE_LEN = 2


class Collision(NamedTuple):
    """A target reachable from several sources; only `kept` maps back."""
    target: str
    kept: str
    dropped: str


class MappingTable:
    """Immutable forward/reverse character tables.

    Build with :meth:`build`; never mutate after construction. Safe to share
    between threads.
    """

    def __init__(self, forward: Mapping[str, str], reverse: Mapping[str, str],
                 collisions: Tuple[Collision, ...] = ()):
        self._forward = MappingProxyType(dict(forward))
        self._reverse = MappingProxyType(dict(reverse))
        self._collisions = tuple(collisions)

    @classmethod
    def build(cls, entries: Iterable[Tuple[str, str]]) -> 'MappingTable':
        """Build tables from ordered (source, target) pairs.

        Forward: a repeated source overwrites the earlier entry.
        Reverse: a repeated target keeps the first source seen; the later
        source is recorded as a collision and becomes unreachable.
        """
        forward: dict[str, str] = {}
        reverse: dict[str, str] = {}
        collisions = []

        for source, target in entries:
            forward[source] = target
            if target in reverse:
                collisions.append(Collision(target, reverse[target], source))
                continue
            reverse[target] = source

        if collisions:
            logger.debug("Reverse table dropped %d colliding entries: %s",
                         len(collisions), collisions)
        return cls(forward, reverse, tuple(collisions))

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        return self._reverse

    @property
    def collisions(self) -> Tuple[Collision, ...]:
        return self._collisions

    def lookup_forward(self, char: str) -> Optional[str]:
        return self._forward.get(char)

    def lookup_reverse(self, text: str, pos: int = 0) -> Optional[Tuple[int, str]]:
        """Match the reverse table at text[pos], longest key first.

        Returns (consumed_length, replacement) or None when nothing matches,
        in which case the caller emits text[pos] unchanged.
        """
        if pos + 1 < len(text):
            pair = text[pos:pos + MAX_SEQUENCE_LEN]
            replacement = self._reverse.get(pair)
            if replacement is not None:
                return MAX_SEQUENCE_LEN, replacement

        replacement = self._reverse.get(text[pos:pos + 1])
        if replacement is not None:
            return 1, replacement
        return None

    def __len__(self):
        return len(self._forward)

    def __repr__(self):
        return (f"MappingTable(forward={len(self._forward)}, "
                f"reverse={len(self._reverse)}, collisions={len(self._collisions)})")


@functools.lru_cache(maxsize=None)
def default_table() -> MappingTable:
    """The canonical EN ↔ AR table, built once per process."""
    return MappingTable.build(LAYOUT_ENTRIES)
