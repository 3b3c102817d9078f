import base64
from io import BytesIO

from PIL import Image

from errors import EncodeError


def encode_png(canvas: Image.Image) -> bytes:
    buf = BytesIO()
    try:
        # Background is opaque, so the alpha channel carries nothing.
        canvas.convert("RGB").save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to encode poster as PNG: {e}") from e
    return buf.getvalue()


def encode_png_base64(canvas: Image.Image) -> str:
    """PNG bytes as standard base64, single line."""
    return base64.b64encode(encode_png(canvas)).decode("ascii")
