import pytest

from jblock_config import EMPTY_CHAR, INK_CHAR, PLACEHOLDER_HEIGHT, PLACEHOLDER_WIDTH
from jblock_font import GlyphSource
from jblock_patterns import PATTERNS, generic_pattern, pattern_for


@pytest.mark.parametrize('char', sorted(PATTERNS))
def test_table_patterns_are_ten_equal_rows(char):
    glyph = pattern_for(char)
    assert glyph.height == PLACEHOLDER_HEIGHT
    assert len({len(row) for row in glyph.rows}) == 1
    assert glyph == pattern_for(char)
    assert glyph.source is GlyphSource.PLACEHOLDER


@pytest.mark.parametrize('char', sorted(set(PATTERNS) - {' '}))
def test_drawn_patterns_share_frame(char):
    rows = pattern_for(char).rows
    assert all(len(row) == PLACEHOLDER_WIDTH for row in rows)
    assert rows[0] == rows[-1] == '  ████████  '
    assert all(row.startswith(INK_CHAR) and row.endswith(INK_CHAR) for row in rows[2:8])


def test_space_is_blank():
    assert all(not row.strip() for row in pattern_for(' ').rows)


@pytest.mark.parametrize('char', ['Z', '漢', '?', 'ｱ'])
def test_generic_pattern_embeds_character(char):
    glyph = pattern_for(char)
    assert char not in PATTERNS
    assert glyph.height == PLACEHOLDER_HEIGHT
    assert char in glyph.rows[4]
    assert glyph.rows == generic_pattern(char)
    assert len({len(row) for row in glyph.rows}) == 1


def test_curated_set_covers_common_characters():
    for char in 'あいうえおこんにちは世界日本語のテスト':
        assert char in PATTERNS


def test_generic_pattern_rows():
    assert generic_pattern('Z') == (
        '  ████████  ',
        ' █        █ ',
        '█   ████   █',
        '█  █    █  █',
        '█  █ Z  █  █',
        '█  █    █  █',
        '█   ████   █',
        '█          █',
        ' █        █ ',
        '  ████████  ',
    )


def test_generic_pattern_is_built_from_cell_characters():
    cells = set(''.join(generic_pattern('Z'))) - {'Z'}
    assert cells == {INK_CHAR, EMPTY_CHAR}
