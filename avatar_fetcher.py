from io import BytesIO
from typing import Optional

import requests
from PIL import Image, UnidentifiedImageError

from config import AVATAR_FETCH_TIMEOUT_SECONDS, AVATAR_FORMATS, AVATAR_MAX_BYTES
from errors import DecodeError, FetchError

CHUNK_SIZE = 64 * 1024


def _read_body(response: requests.Response, max_bytes: int) -> bytes:
    buf = bytearray()
    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        if not chunk:
            continue
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise FetchError(f"Avatar is larger than {max_bytes} bytes")
    return bytes(buf)


def download_avatar_bytes(
    url: str,
    timeout: Optional[float] = None,
    max_bytes: Optional[int] = None,
) -> bytes:
    """
    GET the avatar URL once and return the raw body.
    No retries: any network problem or non-200 status is a FetchError.
    """
    timeout = AVATAR_FETCH_TIMEOUT_SECONDS if timeout is None else timeout
    max_bytes = AVATAR_MAX_BYTES if max_bytes is None else max_bytes

    try:
        with requests.get(url, timeout=timeout, stream=True) as response:
            if response.status_code != 200:
                raise FetchError(
                    f"Failed to fetch avatar: status {response.status_code}"
                )
            return _read_body(response, max_bytes)
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch avatar from {url}: {e}") from e


def decode_image(data: bytes) -> Image.Image:
    """
    Decode avatar bytes by sniffing the content, never the URL or headers.
    Animated images keep their first frame. Returns RGBA.
    """
    try:
        with Image.open(BytesIO(data), formats=AVATAR_FORMATS) as img:
            img.load()
            return img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Avatar is not a supported image: {e}") from e
    except (OSError, ValueError, SyntaxError) as e:
        # Truncated / corrupt payloads that passed format sniffing.
        raise DecodeError(f"Avatar image is corrupt: {e}") from e


def fetch_avatar(url: str, timeout: Optional[float] = None) -> Image.Image:
    data = download_avatar_bytes(url, timeout=timeout)
    return decode_image(data)
