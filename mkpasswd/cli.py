import sys
import argparse
import logging
from typing import List, Optional

import yaml

from mkpasswd.config import load_config, setup_logging
from mkpasswd.entropy import EntropyReadFailure, EntropySourceUnavailable
from mkpasswd.passphrase import (
    SEPARATOR_DASH,
    SEPARATOR_NONE,
    SEPARATOR_SPACE,
    generate_and_print,
)

logger = logging.getLogger(__name__)

PROG = "mkpasswd"

USAGE = (
    "usage: mkpasswd [-dsh]\n"
    "  -h : print this message\n"
    "  -d : delimit words with dashes\n"
    "  -s : delimit words with spaces\n"
    "  (default) : no delimiters\n"
)


def build_parser() -> argparse.ArgumentParser:
    # -d and -s share a destination so the later flag wins.
    parser = argparse.ArgumentParser(prog=PROG, add_help=False)
    parser.add_argument(
        "-d", dest="separator", action="store_const", const=SEPARATOR_DASH
    )
    parser.add_argument(
        "-s", dest="separator", action="store_const", const=SEPARATOR_SPACE
    )
    parser.add_argument("-h", dest="help", action="store_true")
    parser.set_defaults(separator=SEPARATOR_NONE)
    return parser


def split_short_flags(argv: List[str]) -> List[str]:
    """Expand bundled short flags (-dsx) into one argument per letter."""
    expanded = []
    for i, arg in enumerate(argv):
        if arg == "--":
            expanded.extend(argv[i:])
            break
        if arg.startswith("-") and not arg.startswith("--") and len(arg) > 2:
            expanded.extend(f"-{letter}" for letter in arg[1:])
        else:
            expanded.append(arg)
    return expanded


def parse_args(argv: Optional[List[str]] = None):
    """Parse options, returning the namespace and any unrecognized arguments."""
    if argv is None:
        argv = sys.argv[1:]
    return build_parser().parse_known_args(split_short_flags(argv))


def main(argv: Optional[List[str]] = None) -> int:
    """Handle command-line arguments and print one passphrase."""
    args, unknown = parse_args(argv)
    if args.help:
        sys.stderr.write(USAGE)
        return 0

    try:
        config = load_config()
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"{PROG} : invalid configuration: {e}", file=sys.stderr)
        return 1
    setup_logging(config["logging"]["level"])

    for arg in unknown:
        logger.warning(f"Ignoring unrecognized argument: {arg}")

    try:
        generate_and_print(args.separator)
    except EntropySourceUnavailable as e:
        print(f"{PROG} : unable to open {e.source}", file=sys.stderr)
        # Exit statuses wrap modulo 256.
        return e.errno if e.errno and e.errno < 256 else 1
    except EntropyReadFailure as e:
        print(f"{PROG} : {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
