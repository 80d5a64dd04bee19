"""Exception hierarchy for loading and hashing failures."""


class ImageHashError(Exception):
    """Base class for every failure reported to the command line."""


class ImageLoadError(ImageHashError):
    pass


class ImageNotFoundError(ImageLoadError):
    pass


class FetchError(ImageLoadError):
    pass


class DecodeError(ImageLoadError):
    def __init__(self, source: str, fmt: str, reason: object):
        self.source = source
        self.format = fmt
        self.reason = reason
        super().__init__(f"file: {source} format: {fmt} error: {reason}")


class HashError(ImageHashError):
    pass


class UnknownKindError(HashError):
    pass


class KindMismatchError(HashError):
    pass


class HashComputationError(HashError):
    pass
