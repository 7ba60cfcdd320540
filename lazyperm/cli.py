import argparse
import logging
import os
import sys
from typing import Sequence

from lazyperm.lazyperm_core import PermutationGenerator
from lazyperm.lptypes import SupportsStep

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = (
    '[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s'
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lazyperm", description="print every anagram of WORD"
    )
    parser.add_argument("word", nargs="?", help="the word to permute")
    parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="only print the number of permutations"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="debug logging"
    )
    args = parser.parse_args(argv)
    args.usage = parser.format_usage()
    return args


def render(anagram: Sequence[int]) -> str:
    return repr(bytes(anagram).decode("utf-8", errors="replace"))


def print_anagrams(generator: SupportsStep[int], quiet: bool = False) -> int:
    count = 0
    while (anagram := generator.step()) is not None:
        count += 1
        if not quiet:
            print(render(anagram))
    return count


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(format=LOG_FORMAT, datefmt='%H:%M:%S')
    logging.getLogger("lazyperm").setLevel(
        logging.DEBUG if args.verbose else logging.ERROR
    )
    if args.word is None:
        sys.stdout.write(args.usage)
        return 0
    word = os.fsencode(args.word)
    _LOGGER.debug("permuting %d bytes", len(word))
    print(f"Permutations of {render(word)}")
    count = print_anagrams(PermutationGenerator(word), args.quiet)
    print(f"Generated {count} permutations")
    return 0
