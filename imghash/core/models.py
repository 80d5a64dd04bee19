"""Data models for imghash."""
from dataclasses import dataclass
from enum import Enum

from PIL import Image


class HashKind(Enum):
    AHASH = "average"
    DHASH = "difference"
    PHASH = "perception"
    WHASH = "wavelet"
    UNKNOWN = "unknown"  # never hashed or compared


@dataclass(frozen=True)
class ImageHash:
    value: int
    kind: HashKind


@dataclass
class LoadedImage:
    image: Image.Image
    source: str
    format: str = ""
