import pytest

from jblock_config import INK_CHAR
from jblock_font import EMPTY_STORE
from jblock_gradient import strip_ansi
from jblock_render import (
    build_big_text,
    build_japanese_art,
    contains_japanese,
    render_japanese_block,
    render_japanese_text,
    render_logo,
)

from conftest import RGB_PALETTE


def plain_lines(rendered):
    return strip_ansi(rendered).split('\n')


@pytest.mark.parametrize('text', ['こんにちは', 'カタカナ', '日本語', 'Hello世界', 'こんにちはWorld'])
def test_detects_japanese(text):
    assert contains_japanese(text)


@pytest.mark.parametrize('text', ['Hello World', '123456', '!@#$%', '', 'café', 'a😀', '𠀋'])
def test_rejects_non_japanese(text):
    assert not contains_japanese(text)


def test_single_kanji_from_bundled_font():
    lines = plain_lines(render_japanese_text('日', RGB_PALETTE))
    assert len(lines) >= 10
    assert all(INK_CHAR in line for line in lines[1:-1])


def test_single_kanji_from_placeholder():
    lines = plain_lines(render_japanese_text('日', RGB_PALETTE, font_store=EMPTY_STORE))
    assert len(lines) == 10
    assert all(INK_CHAR in line for line in lines)


@pytest.mark.parametrize('direction', ['vertical', 'horizontal', 'diagonal'])
def test_every_direction_renders_blocks(direction):
    rendered = render_japanese_text('日', RGB_PALETTE, direction)
    assert '\x1b[38;2;' in rendered
    assert INK_CHAR * 4 in strip_ansi(rendered)


def test_two_characters_are_wider_than_one():
    one = plain_lines(render_japanese_text('世', RGB_PALETTE))
    two = plain_lines(render_japanese_text('世界', RGB_PALETTE))
    assert len(two) > 1
    assert len(two[0]) > len(one[0])


def test_mixed_font_and_placeholder_glyphs():
    canvas = build_japanese_art('日あ')
    assert len(canvas) == 16
    assert {len(row) for row in canvas} == {16 + 1 + 12}


def test_hiragana_placeholder_art_is_not_the_literal_character():
    lines = plain_lines(render_japanese_text('あ', RGB_PALETTE))
    assert len(lines) >= 10
    assert 'あ' not in ''.join(lines)


def test_empty_text_renders_nothing():
    assert render_japanese_text('', RGB_PALETTE) == ''


def test_rendering_is_repeatable():
    assert render_japanese_text('日本', RGB_PALETTE, 'diagonal') == \
        render_japanese_text('日本', RGB_PALETTE, 'diagonal')


def test_block_frames():
    lines = plain_lines(render_japanese_block('世界', RGB_PALETTE))
    assert lines[0] == '██████  ██████'
    assert lines[2] == '██世██  ██界██'
    assert len(lines) == 5


def test_logo_routes_japanese_to_font_path():
    assert render_logo('日本', RGB_PALETTE) == render_japanese_text('日本', RGB_PALETTE)


def test_logo_renders_latin_with_figlet():
    rendered = render_logo('Hi', RGB_PALETTE, 'horizontal', font='standard')
    lines = plain_lines(rendered)
    assert len(lines) > 1
    assert lines == build_big_text('Hi', 'standard')
    assert '\x1b[38;2;' in rendered


def test_logo_defaults_to_rainbow_palette():
    assert render_logo('Hi', None, font='standard') == render_logo('Hi', 'rainbow', font='standard')


def test_unknown_figlet_font_falls_back():
    assert build_big_text('Hi', 'no-such-font') == build_big_text('Hi', 'standard')


def test_big_text_is_rectangular():
    canvas = build_big_text('jblock')
    assert len({len(row) for row in canvas}) == 1


def test_empty_logo():
    assert render_logo('') == ''
