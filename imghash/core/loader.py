"""Resolve a filesystem path or HTTP(S) URL to a decoded image."""
import http.client
import io
import logging
import os
import struct
import urllib.error
import urllib.request
from typing import BinaryIO, Optional

from PIL import Image, UnidentifiedImageError

from imghash.core.errors import DecodeError, FetchError, ImageLoadError, ImageNotFoundError
from imghash.core.models import LoadedImage
from imghash.util.config import SUPPORTED_FORMATS, is_url

log = logging.getLogger("imghash.loader")


def open_image(ref: str, timeout: Optional[float] = None) -> LoadedImage:
    if is_url(ref):
        return image_from_url(ref, timeout=timeout)
    return image_from_local(ref)


def image_from_local(path: str) -> LoadedImage:
    if not os.path.exists(path):
        raise ImageNotFoundError(f"{path} does not exist")
    try:
        with open(path, "rb") as f:
            return decode_image(f, path)
    except OSError as e:
        raise ImageLoadError(f"cannot open {path}: {e}") from e


def image_from_url(url: str, timeout: Optional[float] = None) -> LoadedImage:
    """Fetch ``url`` with a single GET and decode the response body.

    No retries. ``timeout`` of None blocks until the server answers.
    """
    log.debug("GET %s", url)
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
    except urllib.error.HTTPError as e:
        raise FetchError(f"GET {url} failed: HTTP {e.code} {e.reason}") from e
    except urllib.error.URLError as e:
        raise FetchError(f"GET {url} failed: {e.reason}") from e
    except (OSError, http.client.HTTPException, ValueError) as e:
        raise FetchError(f"GET {url} failed: {e!r}") from e
    log.debug("Fetched %d bytes from %s", len(body), url)
    with io.BytesIO(body) as buf:
        return decode_image(buf, url)


def decode_image(fp: BinaryIO, source: str) -> LoadedImage:
    """Decode PNG, JPEG or GIF data from ``fp``, detecting the format from content.

    Pixel data is loaded before returning so the caller may close ``fp``.
    """
    fmt = ""
    try:
        img = Image.open(fp, formats=SUPPORTED_FORMATS)
        fmt = img.format or ""
        img.load()
    # Pillow plugins surface corrupt data through several exception types
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError,
            EOFError, struct.error, Image.DecompressionBombError) as e:
        raise DecodeError(source, fmt, e) from e
    log.debug("Decoded %s as %s %dx%d", source, fmt, img.width, img.height)
    return LoadedImage(image=img, source=source, format=fmt)
