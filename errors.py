class PosterError(Exception):
    """Base class for every failure the poster pipeline reports."""

    kind = "poster_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class AssetLoadError(PosterError):
    """Background or font missing/corrupt. Fatal at startup."""

    kind = "asset_load_error"


class FetchError(PosterError):
    kind = "fetch_error"


class DecodeError(PosterError):
    kind = "decode_error"


class RenderError(PosterError):
    kind = "render_error"


class EncodeError(PosterError):
    kind = "encode_error"
