import math
import re

from PIL import Image, ImageDraw, ImageFont

from errors import RenderError

FONT_SIZE_PT = 36
DPI = 72
TEXT_MARGIN = 30  # gap between avatar bottom and the name baseline
TEXT_COLOR = (255, 255, 255, 255)

# ImageDraw switches to multiline layout on these.
_LINE_BREAK = re.compile(r"([\r\n])")


def font_pixel_size(size_pt: float = FONT_SIZE_PT, dpi: int = DPI) -> int:
    return int(round(size_pt * dpi / 72))


def measure_text(font: ImageFont.FreeTypeFont, text: str) -> int:
    """Advance width of the string in px, rounded up."""
    return math.ceil(font.getlength(text))


def text_x_position(canvas_width: int, text_width: int) -> int:
    # Truncates toward zero; names wider than the canvas start left of 0.
    return int((canvas_width - text_width) / 2)


def _draw_single_line(draw: ImageDraw.ImageDraw, x: int, y: int, text: str, font) -> None:
    """
    Draw text on one baseline. Line breaks keep their measured advance
    but are never treated as a new line.
    """
    if not _LINE_BREAK.search(text):
        draw.text((x, y), text, font=font, fill=TEXT_COLOR, anchor="ls")
        return

    prefix = ""
    for piece in _LINE_BREAK.split(text):
        if piece and not _LINE_BREAK.fullmatch(piece):
            draw.text(
                (x + font.getlength(prefix), y),
                piece,
                font=font,
                fill=TEXT_COLOR,
                anchor="ls",
            )
        prefix += piece


def draw_centered_name(
    canvas: Image.Image,
    name: str,
    font: ImageFont.FreeTypeFont,
    baseline_y: int,
) -> int:
    """
    Draw the name in white, anti-aliased, centered on the canvas with its
    baseline on baseline_y. Always a single line: no wrapping and no
    clipping, overly long names simply run off the edges.

    Returns: the x where the text starts.
    """
    try:
        x = text_x_position(canvas.width, measure_text(font, name))

        draw = ImageDraw.Draw(canvas)
        draw.fontmode = "L"
        _draw_single_line(draw, x, baseline_y, name, font)
    except (OSError, ValueError) as e:
        raise RenderError(f"Failed to draw name {name!r}: {e}") from e

    return x
