"""Tests for the EN ↔ AR layout table."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from arabswitch.layout_map import (
    LAYOUT_ENTRIES, Collision, MappingTable, default_table,
)


def test_forward_basic():
    table = default_table()
    assert table.lookup_forward('q') == 'ض'
    assert table.lookup_forward('h') == 'ا'
    assert table.lookup_forward('?') == '؟'
    assert table.lookup_forward('(') == ')'
    assert table.lookup_forward('5') == '5'


def test_forward_ligatures():
    table = default_table()
    assert table.lookup_forward('b') == 'لا'
    assert table.lookup_forward('T') == 'لإ'
    assert table.lookup_forward('G') == 'لأ'
    assert table.lookup_forward('B') == 'لآ'


def test_forward_unmapped():
    assert default_table().lookup_forward('é') is None
    assert default_table().lookup_forward('😀') is None


def test_table_sizes():
    table = default_table()
    assert len(table.forward) == len(LAYOUT_ENTRIES) == 98
    assert len(table.reverse) == 95


def test_reverse_prefers_two_char_match():
    table = default_table()
    assert table.lookup_reverse('لا') == (2, 'b')
    assert table.lookup_reverse('لإ') == (2, 'T')
    assert table.lookup_reverse('xلأ', 1) == (2, 'G')


def test_reverse_falls_back_to_single_char():
    table = default_table()
    assert table.lookup_reverse('ل') == (1, 'g')
    assert table.lookup_reverse('لم') == (1, 'g')
    # Last position: no room for a pair
    assert table.lookup_reverse('مل', 1) == (1, 'g')


def test_reverse_no_match():
    assert default_table().lookup_reverse('é') is None
    assert default_table().lookup_reverse('aé', 1) is None


def test_canonical_collisions():
    collisions = set(default_table().collisions)
    assert collisions == {
        Collision('`', 'U', '`'),
        Collision("'", ':', 'M'),
        Collision('~', 'Z', '~'),
    }


def test_reverse_recovers_every_non_colliding_source():
    table = default_table()
    dropped = {c.dropped for c in table.collisions}
    for source, target in table.forward.items():
        match = table.lookup_reverse(target)
        assert match is not None
        length, back = match
        assert length == len(target)
        if source in dropped:
            assert back != source
        else:
            assert back == source, f"{source!r} → {target!r} → {back!r}"


def test_build_last_writer_wins_forward():
    table = MappingTable.build([('a', 'X'), ('a', 'Y')])
    assert table.lookup_forward('a') == 'Y'


def test_build_first_writer_wins_reverse():
    table = MappingTable.build([('a', 'X'), ('b', 'X')])
    assert table.reverse['X'] == 'a'
    assert table.collisions == (Collision('X', 'a', 'b'),)


def test_build_empty():
    table = MappingTable.build([])
    assert len(table) == 0
    assert table.lookup_forward('a') is None
    assert table.lookup_reverse('a') is None


def test_tables_are_read_only():
    table = default_table()
    with pytest.raises(TypeError):
        table.forward['q'] = 'x'
    with pytest.raises(TypeError):
        table.reverse['x'] = 'q'


def test_build_copies_input():
    entries = [('a', 'X')]
    table = MappingTable.build(entries)
    entries.append(('b', 'Y'))
    assert table.lookup_forward('b') is None


def test_default_table_is_cached():
    assert default_table() is default_table()
