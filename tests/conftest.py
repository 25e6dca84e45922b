import pytest

from robofont import registry
from robofont.config import reset_config
from robofont.loader import parse_font

TINY_FONT = """#define height=3 spaces=2

@"A"
A.
.A
AA

@"B"
A.
.A
AA
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at an empty directory so the user's ~/.robofont is never read."""
    home = tmp_path / "robofont-home"
    monkeypatch.setenv("ROBOFONT_HOME", str(home))
    for name in ("ROBOFONT_DEFAULT_FONT", "ROBOFONT_LOG_LEVEL", "ROBOFONT_FONTS_DIR", "ROBOFONT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    config = reset_config()
    registry.clear_cache()
    yield config
    registry.clear_cache()
    monkeypatch.delenv("ROBOFONT_HOME")
    reset_config()


@pytest.fixture
def tiny_font():
    return parse_font(TINY_FONT, name="tiny")
