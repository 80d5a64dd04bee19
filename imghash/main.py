"""Command-line entry point."""
import argparse
import logging
import sys
from typing import Optional, Sequence

from imghash.core.actions import distance_mode, single_mode
from imghash.core.errors import ImageHashError
from imghash.core.hashing import kind_from_flag
from imghash.util.config import Settings
from imghash.util.logging_util import setup_logging

log = logging.getLogger("imghash.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imghash",
        description=(
            "Compute a perceptual hash of one image, or of two images "
            "together with their Hamming distance."
        ),
    )
    algo = parser.add_mutually_exclusive_group(required=True)
    algo.add_argument("-a", "--average", dest="flag", action="store_const", const="-a",
                      help="average hash")
    algo.add_argument("-d", "--difference", dest="flag", action="store_const", const="-d",
                      help="difference hash")
    algo.add_argument("-p", "--perception", dest="flag", action="store_const", const="-p",
                      help="perception (DCT) hash")
    algo.add_argument("-w", "--wavelet", dest="flag", action="store_const", const="-w",
                      help="wavelet hash (FFT magnitude vs. median)")
    parser.add_argument("image", help="image path or http(s) URL")
    parser.add_argument("image2", nargs="?",
                        help="second image; prints both hashes and their distance")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug messages to stderr")
    parser.add_argument("--log-dir", help="also write a rotating log file to this directory")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValueError as e:
        parser.error(str(e))

    setup_logging(
        log_dir=args.log_dir or settings.log_dir,
        level="DEBUG" if args.verbose else settings.log_level,
    )

    kind = kind_from_flag(args.flag)
    try:
        if args.image2 is None:
            value = single_mode(args.image, kind, timeout=settings.http_timeout)
            print(value)
        else:
            h1, h2, d = distance_mode(args.image, args.image2, kind,
                                      timeout=settings.http_timeout)
            print(f"{h1} {h2} {d}")
    except ImageHashError as e:
        log.error("%s", e)
        return 1
    return 0


def run() -> None:
    sys.exit(main())
