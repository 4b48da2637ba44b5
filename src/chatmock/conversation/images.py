"""Image decoding for uploads.

Hidden design decisions:
- Uploaded files become inline data URIs (no files are kept on disk)
- Pillow identifies the format; nothing is resized or recompressed
"""

import base64
import io

from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError

DATA_URI_PREFIX = "data:"


def encode_data_uri(data: bytes) -> str:
    """Turn raw image bytes into a base64 data URI.

    Args:
        data: Contents of an image file

    Returns:
        A "data:<mime>;base64,..." string

    Raises:
        ImageDecodeError: If Pillow cannot identify the bytes as an image
    """
    if not data:
        raise ImageDecodeError("Empty image file")
    try:
        with Image.open(io.BytesIO(data)) as img:
            mime = Image.MIME.get(img.format or "", "application/octet-stream")
    except (UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Not a supported image: {e}") from e

    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def is_data_uri(value: str) -> bool:
    return value.startswith(DATA_URI_PREFIX)


def decode_data_uri(value: str) -> Image.Image:
    """Open the image held in a data URI.

    Raises:
        ImageDecodeError: If the value is not a base64 image data URI
    """
    if not is_data_uri(value) or ";base64," not in value:
        raise ImageDecodeError("Not a base64 data URI")
    payload = value.split(";base64,", 1)[1]
    try:
        raw = base64.b64decode(payload, validate=True)
        img = Image.open(io.BytesIO(raw))
        img.load()
    except (ValueError, UnidentifiedImageError, OSError) as e:
        raise ImageDecodeError(f"Unreadable data URI image: {e}") from e
    return img
