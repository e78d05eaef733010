import logging
from pathlib import Path

import pytest

import jblock_fonts
from jblock_config import INK_CHAR, DEFAULT_FONT_PATH
from jblock_font import (
    EMPTY_STORE,
    FontStore,
    Glyph,
    GlyphSource,
    get_font_store,
    load,
    load_font_file,
    normalize_codepoint,
    parse_font_text,
)


def test_parses_entries_after_header(sample_store):
    assert sorted(sample_store) == ['2422', '3326', '467c']


def test_ink_marker_becomes_block_and_markers_are_stripped(sample_store):
    glyph = sample_store['2422']
    assert glyph.rows == (
        '█  █',
        '████',
        '█  █',
        '█  █',
    )
    assert all('$' not in row and '@' not in row and '#' not in row for row in glyph.rows)


def test_rows_without_markers_are_skipped(sample_store):
    assert sample_store['3326'].rows == (' ██ ', '████', ' ██ ', '█  █')


def test_entry_without_rows_is_dropped(sample_store):
    assert 'abcd' not in sample_store


def test_header_lines_before_table_are_ignored():
    text = "flf2a$ 2 2 2 -1 1\n##$@\n##$@@\n100 0064\n##$@@\n"
    assert list(parse_font_text(text)) == ['0064']


def test_entry_missing_end_marker_is_closed_by_next_header():
    text = "1 0001\n#$@\n#$@\n2 0002\n##$@@\n"
    glyphs = parse_font_text(text)
    assert glyphs['0001'].rows == (INK_CHAR, INK_CHAR)
    assert glyphs['0002'].rows == (INK_CHAR * 2,)


def test_glyph_rows_are_padded_rectangular():
    glyphs = parse_font_text("1 0001\n#$@\n###$@@\n")
    assert glyphs['0001'].rows == ('█  ', '███')


def test_keys_are_case_insensitive_and_padded(sample_store):
    assert sample_store['467C'] is sample_store['467c']
    assert sample_store[0x467c] is sample_store['467c']
    assert '467C' in sample_store
    assert normalize_codepoint('A1') == '00a1'


def test_store_is_read_only(sample_store):
    with pytest.raises(TypeError):
        sample_store['0001'] = Glyph(('x',))


@pytest.mark.parametrize('resource', [None, b'', b'\xff\xfe\xfa', b'no table here\n'])
def test_bad_resources_give_empty_store(resource):
    store = load(resource)
    assert len(store) == 0
    assert '467c' not in store


def test_missing_file_gives_empty_store_with_warning(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger='jblock_font'):
        store = load_font_file(tmp_path / 'missing.flf')
    assert store is EMPTY_STORE
    assert 'Font loading failed' in caplog.text


def test_load_font_file_reads_disk(tmp_path, sample_font_bytes):
    path = tmp_path / 'tiny.flf'
    path.write_bytes(sample_font_bytes)
    assert len(load_font_file(path)) == 3


def test_bundled_font_is_loaded_once():
    store = get_font_store()
    assert store is get_font_store()
    assert isinstance(store, FontStore)
    assert DEFAULT_FONT_PATH.exists()
    glyph = store['467c']
    assert glyph.source is GlyphSource.FONT
    assert glyph.height == 16
    assert glyph.width == 16
    assert len({len(row) for row in glyph.rows}) == 1


def test_bundled_font_ships_inside_font_package():
    assert DEFAULT_FONT_PATH.parent == Path(jblock_fonts.__file__).resolve().parent
    assert DEFAULT_FONT_PATH.suffix == '.flf'
    assert load_font_file(DEFAULT_FONT_PATH)
