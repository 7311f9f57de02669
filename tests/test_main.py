"""Tests for the command-line one-shot modes."""
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from arabswitch.main import main


def test_convert_arguments(capsys):
    assert main(['--convert', 'salam']) == 0
    assert capsys.readouterr().out == 'سشمشة\n'


def test_convert_joins_words(capsys):
    main(['--convert', 'hello', 'world'])
    assert capsys.readouterr().out == 'اثممخ صخقمي\n'


def test_convert_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('لا\n'))
    assert main(['--convert']) == 0
    assert capsys.readouterr().out == 'b\n'


def test_table_lists_collisions(capsys):
    assert main(['--table']) == 0
    out = capsys.readouterr().out
    assert "3 reverse collisions:" in out
    assert "kept 'U', dropped '`'" in out
