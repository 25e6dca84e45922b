"""
Named fonts: the ones shipped in ``robofont/fonts`` plus user fonts found in
the configured ``fonts_dir``. A user font shadows a bundled font of the same name.
"""

import threading
from pathlib import Path
from typing import Dict, List, Optional

from .base import FontDefinition
from .compositor import Compositor
from .config import get_config
from .exceptions import FontNotFoundError
from .litlogger import get_logger
from .loader import load_font

logger = get_logger("robofont.registry")

FONT_SUFFIX = ".robofont"
BUNDLED_FONTS_DIR = Path(__file__).parent / "fonts"

_cache: Dict[Path, FontDefinition] = {}
_cache_lock = threading.Lock()


def _scan(directory: Path) -> Dict[str, Path]:
    if not directory.is_dir():
        return {}
    return {path.stem.lower(): path for path in directory.glob(f"*{FONT_SUFFIX}") if path.is_file()}


def font_paths() -> Dict[str, Path]:
    """Map every available font name to its file."""
    paths = _scan(BUNDLED_FONTS_DIR)
    paths.update(_scan(get_config().fonts_dir))
    return paths


def available_fonts() -> List[str]:
    return sorted(font_paths())


def is_bundled(name: str) -> bool:
    return font_path(name).parent == BUNDLED_FONTS_DIR


def font_path(name: str) -> Path:
    """
    Resolve a font name to its file.

    Args:
        name: Font name, case-insensitive

    Returns:
        Path to the ``.robofont`` file

    Raises:
        FontNotFoundError: If no font has that name
    """
    paths = font_paths()
    try:
        return paths[name.lower()]
    except KeyError:
        raise FontNotFoundError(name, sorted(paths)) from None


def get_font(name: Optional[str] = None) -> FontDefinition:
    """
    Load a font by name, parsing each file at most once.

    Args:
        name: Font name; None selects the configured ``default_font``

    Returns:
        The parsed, shared FontDefinition
    """
    if name is None:
        name = get_config().get("default_font", "slant")
    path = font_path(name)
    with _cache_lock:
        font = _cache.get(path)
        if font is None:
            logger.debug(f"Loading font {name} from {path}")
            font = load_font(path, name=path.stem.lower())
            _cache[path] = font
        return font


def get_compositor(name: Optional[str] = None) -> Compositor:
    return Compositor(get_font(name))


def clear_cache() -> None:
    """Forget every loaded font so the next request reads the file again."""
    with _cache_lock:
        _cache.clear()
