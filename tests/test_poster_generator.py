import base64
from io import BytesIO

import numpy as np
import pytest
from PIL import Image, ImageFont

import avatar_fetcher
from errors import DecodeError, FetchError
from poster_assets import AssetStore
from poster_generator import PosterGenerator

from conftest import FakeResponse, image_bytes

AVATAR_COLOR = (200, 40, 40)


@pytest.fixture
def assets(font_path):
    background = Image.new("RGB", (800, 1200), (30, 30, 30))
    return AssetStore(background, ImageFont.truetype(str(font_path), size=36))


def _decode(encoded: str) -> Image.Image:
    with Image.open(BytesIO(base64.b64decode(encoded))) as img:
        img.load()
        return img.convert("RGB")


def test_ada_poster(assets):
    gen = PosterGenerator(assets, fetch=lambda url: Image.new("RGB", (400, 400), AVATAR_COLOR))

    poster = _decode(gen.generate("Ada", "https://cdn.example.com/ada.png"))

    assert poster.size == (800, 1200)
    px = np.asarray(poster).astype(int)
    assert np.abs(px[325:475, 325:475] - AVATAR_COLOR).max() <= 1
    assert tuple(px[324, 324]) == (30, 30, 30)

    # White name pixels around the baseline (avatar bottom 475 + 30).
    band = px[505 - 36 : 505 + 10]
    assert (band.min(axis=2) >= 250).any()
    assert not (px[:320].min(axis=2) >= 250).any()


def test_generate_is_deterministic(assets):
    gen = PosterGenerator(assets, fetch=lambda url: Image.new("RGB", (64, 48), (10, 120, 220)))

    first = gen.generate("Grace", "https://cdn.example.com/g.png")
    second = gen.generate("Grace", "https://cdn.example.com/g.png")

    assert first == second


def test_background_is_not_mutated(assets):
    before = assets.background().tobytes()
    gen = PosterGenerator(assets, fetch=lambda url: Image.new("RGB", (10, 10), (255, 0, 0)))

    gen.generate("Linus", "https://cdn.example.com/l.png")

    assert assets.background().tobytes() == before


def test_default_fetch_goes_through_requests(assets, monkeypatch):
    def fake_get(url, **kwargs):
        return FakeResponse(image_bytes((400, 400), AVATAR_COLOR, fmt="JPEG"))

    monkeypatch.setattr(avatar_fetcher.requests, "get", fake_get)
    gen = PosterGenerator(assets)

    poster = _decode(gen.generate("Ada", "https://cdn.example.com/ada.jpg"))

    assert poster.size == (800, 1200)


def test_fetch_error_aborts_pipeline(assets):
    def failing_fetch(url):
        raise FetchError("Failed to fetch avatar: status 404")

    with pytest.raises(FetchError):
        PosterGenerator(assets, fetch=failing_fetch).generate("Ada", "https://x/404.png")


def test_decode_error_aborts_pipeline(assets, monkeypatch):
    monkeypatch.setattr(
        avatar_fetcher.requests, "get", lambda url, **kw: FakeResponse(b"<html>nope</html>")
    )

    with pytest.raises(DecodeError):
        PosterGenerator(assets).generate("Ada", "https://cdn.example.com/a.png")
