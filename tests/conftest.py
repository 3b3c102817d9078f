from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Iterator, Tuple

import pytest
from PIL import Image

from config import BASE_DIR

FONT_PATH = BASE_DIR / "assets" / "fonts" / "Lato-Regular.ttf"


def image_bytes(size: Tuple[int, int], color, fmt: str = "PNG", mode: str = "RGB") -> bytes:
    buf = BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


class FakeResponse:
    """Just enough of requests.Response for the avatar fetcher."""

    def __init__(self, content: bytes = b"", status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def iter_content(self, chunk_size: int = 1) -> Iterator[bytes]:
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i : i + chunk_size]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def font_path() -> Path:
    return FONT_PATH


@pytest.fixture
def background_path(tmp_path: Path) -> Path:
    path = tmp_path / "background.jpg"
    Image.new("RGB", (800, 1200), (30, 30, 30)).save(path, format="JPEG", quality=95)
    return path
