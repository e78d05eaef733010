import pytest

from jblock_compose import block_glyph, block_width, compose, compose_blocks
from jblock_font import Glyph, GlyphSource
from jblock_patterns import pattern_for
from jblock_width import get_width


def test_empty_input_gives_empty_canvas():
    assert compose([]) == []
    assert compose_blocks('') == []


def test_uniform_width_is_sum_plus_separators():
    canvas = compose([pattern_for('世'), pattern_for('界'), pattern_for('日')])
    assert len(canvas) == 10
    assert {len(row) for row in canvas} == {12 * 3 + 2}


def test_single_glyph_is_unchanged():
    glyph = pattern_for('日')
    assert compose([glyph]) == list(glyph.rows)


def test_shorter_glyphs_are_padded_at_bottom():
    tall = Glyph(('ab', 'cd', 'ef'))
    short = Glyph(('xyz',), GlyphSource.PLACEHOLDER)
    assert compose([tall, short]) == ['ab xyz', 'cd    ', 'ef    ']


def test_mixed_font_and_placeholder_stays_rectangular():
    font_glyph = Glyph.from_rows(['█' * 16] * 16)
    canvas = compose([font_glyph, pattern_for('Q')])
    assert len(canvas) == 16
    assert {len(row) for row in canvas} == {16 + 1 + 12}


@pytest.mark.parametrize('width, expected', [(1, 6), (2, 6), (3, 9), (4, 12)])
def test_block_width_law(width, expected):
    assert block_width(width) == expected


def test_narrow_block_puts_extra_padding_right():
    assert compose_blocks('A') == [
        '██████',
        '█    █',
        '██A███',
        '█    █',
        '██████',
    ]


def test_wide_block_is_six_columns():
    rows = block_glyph('日', 2).rows
    assert rows[2] == '██日██'
    assert [get_width(row) for row in rows] == [6] * 5


def test_blocks_are_separated_by_two_columns():
    canvas = compose_blocks('AB')
    assert canvas[0] == '██████  ██████'
    assert canvas[2] == '██A███  ██B███'


def test_block_width_comes_from_width_function():
    canvas = compose_blocks('x', width_fn=lambda char: 3)
    assert canvas[0] == '█' * 9
    assert canvas[2] == '███x███'


def test_block_canvas_is_rectangular_in_columns():
    canvas = compose_blocks('日本A')
    assert len(canvas) == 5
    assert len({get_width(row) for row in canvas}) == 1


def test_compose_is_repeatable():
    glyphs = [pattern_for(c) for c in 'テスト']
    assert compose(glyphs) == compose(glyphs)
