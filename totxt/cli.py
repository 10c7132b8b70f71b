"""
Command line entry point.

Usage:
    totxt /path/to/directory [-p preamble.txt] [-o output.txt]
    python -m totxt /path/to/directory -p "" -o context.txt
"""

import argparse
import logging
import sys

from .assemble import assemble
from .config import DEFAULT_OUTPUT_PATH, DEFAULT_PREAMBLE_PATH, Config
from .errors import TotxtError
from .ignore import ignore_file_for, load_ignore_list


def build_parser():
    parser = argparse.ArgumentParser(
        prog="totxt",
        description="Write a directory tree and its file contents into a single text file.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        help="Directory to process. Patterns in <root>/.totxtignore are excluded.",
    )
    parser.add_argument(
        "-p", "--preamble",
        default=DEFAULT_PREAMBLE_PATH,
        help=f"Path to the preamble file (default: {DEFAULT_PREAMBLE_PATH}). "
             "Pass an empty string to use the built-in preamble.",
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT_PATH,
        help=f"Path to the output file (default: {DEFAULT_OUTPUT_PATH}).",
    )
    parser.add_argument(
        "--prune-ignored-dirs",
        action="store_true",
        help="Skip everything under an ignored directory instead of checking "
             "each descendant against the patterns.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log skipped and written files to stderr.",
    )
    return parser


def parse_config(args):
    return Config(
        root=args.root,
        preamble_path=args.preamble,
        output_path=args.output,
        prune_ignored_dirs=args.prune_ignored_dirs,
    )


def run(config):
    """Load the ignore list and write the artifact. Returns the process exit status."""
    try:
        patterns = load_ignore_list(ignore_file_for(config.root))
        assemble(config, patterns)
    except TotxtError as e:
        print(e)
        return 1
    except OSError as e:
        print(f"Error writing output file: {e}")
        return 1

    print(f"Directory contents written to {config.output_path}.")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.root is None:
        print(parser.format_usage(), end="")
        return 1

    return run(parse_config(args))


if __name__ == "__main__":
    sys.exit(main())
