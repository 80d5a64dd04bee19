import io
import logging

import numpy as np
import pytest
from PIL import Image

@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    logger = logging.getLogger("imghash")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def gradient_array(size: int = 64) -> np.ndarray:
    row = np.linspace(0, 255, size).astype(np.uint8)
    gray = np.tile(row, (size, 1))
    return np.stack([gray, gray, gray], axis=-1)


def encode(arr: np.ndarray, fmt: str) -> bytes:
    img = Image.fromarray(arr)
    if fmt == "GIF":
        img = img.convert("P")
    buf = io.BytesIO()
    img.save(buf, fmt)
    return buf.getvalue()


@pytest.fixture
def write_image(tmp_path):
    def _write(name: str, arr: np.ndarray, fmt: str = "PNG") -> str:
        path = tmp_path / name
        path.write_bytes(encode(arr, fmt))
        return str(path)
    return _write


@pytest.fixture
def gradient_png(write_image):
    return write_image("gradient.png", gradient_array())


@pytest.fixture
def patched_png(write_image):
    arr = gradient_array()
    arr[0:16, 0:16] = 255
    return write_image("patched.png", arr)


@pytest.fixture
def noise_png(write_image):
    rng = np.random.default_rng(7)
    arr = rng.integers(0, 256, (32, 32, 3), dtype=np.uint8)
    return write_image("noise.png", arr)
