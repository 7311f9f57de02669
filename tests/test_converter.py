"""Tests for the conversion entry point."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from arabswitch.converter import ConversionResult, Converter, convert, get_converter
from arabswitch.layout_map import MappingTable
from arabswitch.transliterator import Direction


def test_empty_is_noop():
    assert convert('') == ('', False)
    assert convert('') == ConversionResult('', False)


def test_digits_convert_as_identity():
    assert convert('12345') == ('12345', True)


def test_latin_to_arabic():
    result = convert('salam')
    assert result.converted is True
    assert result.text == 'سشمشة'


def test_arabic_to_latin():
    assert convert('سشمشة') == ('salam', True)


def test_lam_alef_converts_to_single_letter():
    assert convert('لا') == ('b', True)
    assert convert('لآ') == ('B', True)


def test_round_trip_without_collisions():
    text = 'the quick brown fox jumps over the lazy dog'
    forward = convert(text)
    assert forward.text != text
    assert convert(forward.text) == (text, True)


def test_round_trip_hello_world():
    assert convert(convert('hello world').text).text == 'hello world'


def test_round_trip_lossy_on_collision():
    # 'M' → "'" reads back as ':'
    once = convert('sM')
    assert once.text == "س'"
    assert convert(once.text).text == 's:'


def test_gh_reads_back_as_lam_alef_key():
    assert convert(convert('gh').text).text == 'b'


def test_emoji_passthrough():
    assert convert('😀') == ('😀', True)
    assert convert('salam 😀').text == 'سشمشة 😀'
    assert convert('سشمشة 😀').text == 'salam 😀'


def test_tie_converts_latin_to_arabic():
    # one Latin letter, one Arabic letter → forward; Arabic passes through
    assert convert('aس') == ('شس', True)


def test_deterministic():
    assert convert('Hello, World!') == convert('Hello, World!')


def test_direction_for():
    c = Converter()
    assert c.direction_for('abc') == Direction.FORWARD
    assert c.direction_for('مرحبا') == Direction.REVERSE
    assert c.direction_for('') == Direction.FORWARD


def test_custom_table():
    c = Converter(MappingTable.build([('a', 'ب')]))
    assert c.convert('aa') == ('بب', True)
    assert c.convert('بب') == ('aa', True)


def test_default_converter_shared():
    assert get_converter() is get_converter()


def test_concurrent_calls_agree():
    from concurrent.futures import ThreadPoolExecutor

    texts = ['salam', 'سشمشة', 'لا', 'hello world', '12345', ''] * 50
    expected = [convert(t) for t in texts]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(convert, texts))
    assert results == expected
