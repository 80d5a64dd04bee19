"""Hash dispatch, the FFT-based wavelet hash, and Hamming distance."""
import logging
from typing import Callable

import imagehash
import numpy as np
from PIL import Image

from imghash.core.errors import HashComputationError, KindMismatchError, UnknownKindError
from imghash.core.models import HashKind, ImageHash
from imghash.util.config import HASH_BITS, HASH_SIZE

log = logging.getLogger("imghash.hashing")

HashFunc = Callable[[Image.Image], ImageHash]

FLAG_TO_KIND = {
    "-a": HashKind.AHASH,
    "-d": HashKind.DHASH,
    "-p": HashKind.PHASH,
    "-w": HashKind.WHASH,
}

# Channel weights for the wavelet hash's greyscale conversion
_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114])


def kind_from_flag(flag: str) -> HashKind:
    return FLAG_TO_KIND.get(flag, HashKind.UNKNOWN)


def _bits_to_int(h: imagehash.ImageHash) -> int:
    return int(str(h), 16)


def average_hash(img: Image.Image) -> ImageHash:
    return ImageHash(_bits_to_int(imagehash.average_hash(img, hash_size=HASH_SIZE)), HashKind.AHASH)


def difference_hash(img: Image.Image) -> ImageHash:
    return ImageHash(_bits_to_int(imagehash.dhash(img, hash_size=HASH_SIZE)), HashKind.DHASH)


def perception_hash(img: Image.Image) -> ImageHash:
    return ImageHash(_bits_to_int(imagehash.phash(img, hash_size=HASH_SIZE)), HashKind.PHASH)


def gray_data(img: Image.Image) -> np.ndarray:
    """Flatten ``img`` row by row into luminance values on a 16-bit scale.

    Colour channels are premultiplied by alpha before weighting.
    """
    rgba = np.asarray(img.convert("RGBA"), dtype=np.float64)
    alpha = rgba[..., 3:4] / 255.0
    rgb = rgba[..., :3] * alpha * 257.0
    return (rgb @ _LUMA_WEIGHTS).ravel()


def wavelet_hash(img: Image.Image) -> ImageHash:
    """Threshold the FFT magnitudes of the flattened greyscale image at their median.

    This is a global FFT over all pixels, not a multi-level wavelet
    decomposition. Bit i is set when magnitude i is above the median; only
    the first 64 coefficients contribute.
    """
    data = gray_data(img)
    if data.size == 0:
        raise HashComputationError("cannot hash an image with no pixels")

    magnitudes = np.abs(np.fft.fft(data))
    median = np.sort(magnitudes)[len(magnitudes) // 2]

    value = 0
    for i, above in enumerate(magnitudes[:HASH_BITS] > median):
        if above:
            value |= 1 << i
    return ImageHash(value, HashKind.WHASH)


_KIND_TO_FUNC: dict[HashKind, HashFunc] = {
    HashKind.AHASH: average_hash,
    HashKind.DHASH: difference_hash,
    HashKind.PHASH: perception_hash,
    HashKind.WHASH: wavelet_hash,
}


def hash_func_for_kind(kind: HashKind) -> HashFunc:
    try:
        return _KIND_TO_FUNC[kind]
    except KeyError:
        raise UnknownKindError(f"bad algorithm kind: {kind.value}") from None


def compute_hash(img: Image.Image, kind: HashKind) -> ImageHash:
    result = hash_func_for_kind(kind)(img)
    log.debug("%s hash: %d", kind.value, result.value)
    return result


def distance(h1: ImageHash, h2: ImageHash) -> int:
    """Hamming distance between two hashes of the same kind."""
    if h1.kind != h2.kind:
        raise KindMismatchError(
            f"cannot compare {h1.kind.value} hash with {h2.kind.value} hash"
        )
    if h1.kind == HashKind.UNKNOWN:
        raise UnknownKindError("bad algorithm kind: unknown")
    return bin(h1.value ^ h2.value).count("1")
