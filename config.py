"""
Global configuration for the poster generator.

Loads overrides from .env (POSTER_*, AVATAR_*) and defines the paths of
the bundled assets used across the app.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent
ASSETS_DIR = BASE_DIR / "assets"


# ----------------------------
# Bundled assets
# ----------------------------

POSTER_BACKGROUND_PATH = Path(
    os.getenv(
        "POSTER_BACKGROUND_PATH",
        str(ASSETS_DIR / "background.png"),
    )
)

POSTER_FONT_PATH = Path(
    os.getenv(
        "POSTER_FONT_PATH",
        str(ASSETS_DIR / "fonts" / "Lato-Regular.ttf"),
    )
)


# ----------------------------
# Avatar download
# ----------------------------

AVATAR_FETCH_TIMEOUT_SECONDS = float(os.getenv("AVATAR_FETCH_TIMEOUT_SECONDS", "10"))

# Anything bigger is refused before decoding.
AVATAR_MAX_BYTES = int(os.getenv("AVATAR_MAX_BYTES", str(10 * 1024 * 1024)))

AVATAR_FORMATS = tuple(
    f.strip().upper()
    for f in os.getenv("AVATAR_FORMATS", "JPEG,PNG,GIF,WEBP,BMP").split(",")
    if f.strip()
)
