# poster_generator.py

from typing import Callable, Optional

from PIL import Image

from avatar_fetcher import fetch_avatar
from errors import PosterError
from image_encoder import encode_png_base64
from poster_assets import AssetStore, get_asset_store
from poster_compositor import compose_canvas
from poster_text import TEXT_MARGIN, draw_centered_name

AvatarFetch = Callable[[str], Image.Image]


class PosterGenerator:
    """
    Fetch -> resize/composite -> draw name -> encode, once per call.

    The asset store is shared and read-only; everything else (avatar,
    canvas) lives only inside a single generate() call, so one generator
    can serve concurrent requests without locking.
    """

    def __init__(self, assets: AssetStore, fetch: AvatarFetch = fetch_avatar):
        self.assets = assets
        self._fetch = fetch

    def generate(self, name: str, avatar_url: str) -> str:
        """
        Args:
            name: text printed under the avatar (non-empty, checked by caller)
            avatar_url: http(s) URL of the avatar image

        Returns: base64 PNG, same size as the background.
        Raises: FetchError, DecodeError, RenderError, EncodeError.
        """
        try:
            avatar = self._fetch(avatar_url)

            canvas, (_, _, _, avatar_bottom) = compose_canvas(
                self.assets.background(), avatar
            )

            draw_centered_name(
                canvas,
                name,
                self.assets.font(),
                baseline_y=avatar_bottom + TEXT_MARGIN,
            )

            return encode_png_base64(canvas)
        except PosterError as e:
            print(f"[poster] Generation failed ({e.kind}): {e.message}")
            raise


_generator: Optional[PosterGenerator] = None


def get_generator() -> PosterGenerator:
    """Generator over the process-wide assets. Raises AssetLoadError."""
    global _generator
    if _generator is None:
        _generator = PosterGenerator(get_asset_store())
    return _generator
