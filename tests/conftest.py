import pytest

from jblock_config import reload_config, get_config
from jblock_font import load

SAMPLE_FONT = """flf2a$ 4 3 8 -1 2
tiny test font
 $@
 $@@
9250 2422
#  #$@
####$@
#  #$@
#  #$@@
not a glyph line
18044 467C
####$@
#  #$@
####$@
####$@@
12345 abcd
13094 3326
 ## $@
####$@
comment without marker
 ## $@
#  #$@@
"""

RED_BLUE = ['#ff0000', '#0000ff']
RGB_PALETTE = ['#ff0000', '#00ff00', '#0000ff']


@pytest.fixture
def sample_font_bytes():
    return SAMPLE_FONT.encode('utf-8')


@pytest.fixture
def sample_store(sample_font_bytes):
    return load(sample_font_bytes)


@pytest.fixture
def restore_config():
    old_config = get_config()
    yield
    reload_config(old_config)
