from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from PIL import Image, ImageFont, UnidentifiedImageError

from config import POSTER_BACKGROUND_PATH, POSTER_FONT_PATH
from errors import AssetLoadError
from poster_text import font_pixel_size

PathLike = Union[str, Path]


def _load_background(path: Path) -> Image.Image:
    if not path.exists():
        raise AssetLoadError(f"Background image not found: {path}")
    try:
        with Image.open(path) as img:
            img.load()
            # Fully decoded, detached from the file handle.
            return img.convert("RGB")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise AssetLoadError(f"Failed to decode background {path}: {e}") from e


def _load_font(path: Path) -> ImageFont.FreeTypeFont:
    if not path.exists():
        raise AssetLoadError(f"Font not found: {path}")
    try:
        return ImageFont.truetype(str(path), size=font_pixel_size())
    except (OSError, ValueError) as e:
        raise AssetLoadError(f"Failed to parse font {path}: {e}") from e


class AssetStore:
    """
    Read-only holder for the poster background and name font.

    Built once, then shared by every request. Nothing in the pipeline
    mutates either object: the compositor always works on a copy of the
    background, and the font is only ever measured and drawn with.
    """

    def __init__(self, background: Image.Image, font: ImageFont.FreeTypeFont):
        self._background = background
        self._font = font

    @classmethod
    def load(
        cls,
        background_path: PathLike = POSTER_BACKGROUND_PATH,
        font_path: PathLike = POSTER_FONT_PATH,
    ) -> "AssetStore":
        background = _load_background(Path(background_path))
        font = _load_font(Path(font_path))
        print(
            f"[poster] Assets loaded: background={Path(background_path).name} "
            f"{background.size[0]}x{background.size[1]}, font={Path(font_path).name}"
        )
        return cls(background, font)

    def background(self) -> Image.Image:
        return self._background

    def font(self) -> ImageFont.FreeTypeFont:
        return self._font


@lru_cache(maxsize=1)
def get_asset_store() -> AssetStore:
    """Process-wide store built from the configured asset paths."""
    return AssetStore.load()
