import argparse
import logging

from .commands.parser import build_parser
from ..fuzzy.core.types import FuzzyError

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (FuzzyError, argparse.ArgumentTypeError, OSError) as e:
        raise SystemExit(f"error: {e}") from e

if __name__ == "__main__":
    main()
