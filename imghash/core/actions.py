"""Single-hash and distance-mode pipelines."""
import logging
from typing import Optional

from imghash.core.hashing import compute_hash, distance, hash_func_for_kind
from imghash.core.loader import open_image
from imghash.core.models import HashKind, ImageHash

log = logging.getLogger("imghash.actions")


def hash_image(ref: str, kind: HashKind, timeout: Optional[float] = None) -> ImageHash:
    loaded = open_image(ref, timeout=timeout)
    log.debug("Hashing %s (%s) with %s", loaded.source, loaded.format, kind.value)
    return compute_hash(loaded.image, kind)


def single_mode(ref: str, kind: HashKind, timeout: Optional[float] = None) -> int:
    hash_func_for_kind(kind)  # raises UnknownKindError
    return hash_image(ref, kind, timeout=timeout).value


def distance_mode(
    ref1: str, ref2: str, kind: HashKind, timeout: Optional[float] = None
) -> tuple[int, int, int]:
    """Hash both images in order and return (hash1, hash2, distance).

    The kind is checked before either image is loaded.
    """
    hash_func_for_kind(kind)  # raises UnknownKindError

    h1 = hash_image(ref1, kind, timeout=timeout)
    h2 = hash_image(ref2, kind, timeout=timeout)
    d = distance(h1, h2)
    log.debug("Distance %s <-> %s: %d", ref1, ref2, d)
    return h1.value, h2.value, d
