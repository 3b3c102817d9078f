from typing import Tuple

from PIL import Image

AVATAR_SIZE = 150  # avatar is forced to a square of this side, in px

Box = Tuple[int, int, int, int]


def _half(value: int) -> int:
    """Integer half, truncated toward zero (also for negative values)."""
    return int(value / 2)


def avatar_position(canvas_size: Tuple[int, int], avatar_size: int = AVATAR_SIZE) -> Tuple[int, int]:
    """
    Top-left corner of the avatar:
    - centered horizontally
    - centered on the line at one third of the canvas height
    """
    w, h = canvas_size
    x = _half(w - avatar_size)
    y = int(h / 3) - _half(avatar_size)
    return x, y


def resize_avatar(avatar: Image.Image, size: int = AVATAR_SIZE) -> Image.Image:
    """Stretch (no crop) to a size x size square with Lanczos resampling."""
    return avatar.convert("RGBA").resize((size, size), Image.LANCZOS)


def compose_canvas(background: Image.Image, avatar: Image.Image) -> Tuple[Image.Image, Box]:
    """
    - Canvas starts as an opaque copy of the background (never the
      background itself).
    - Resized avatar is blended "over" it at the fixed position.

    Returns: (canvas, avatar box as left, top, right, bottom).
    """
    avatar_sq = resize_avatar(avatar)

    canvas = background.convert("RGB").convert("RGBA")

    x, y = avatar_position(canvas.size, avatar_sq.width)

    # Colour only, masked by the avatar alpha: the canvas stays opaque and
    # the result is "over". paste also accepts offsets outside the canvas.
    canvas.paste(avatar_sq.convert("RGB"), (x, y), avatar_sq)

    return canvas, (x, y, x + avatar_sq.width, y + avatar_sq.height)
