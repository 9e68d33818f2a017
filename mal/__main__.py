from __future__ import annotations

import argparse
import logging
import sys

from mal import config
from mal.repl import Repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mal", description="mal Lisp REPL")
    parser.add_argument("--prompt", default=None, help="prompt string (default: $MAL_PROMPT or 'user> ')")
    parser.add_argument("--no-history", action="store_true", help="do not load or save line history")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    history = None if args.no_history else config.get_history_file()
    return Repl(prompt=args.prompt, history_file=history).run()


if __name__ == "__main__":
    sys.exit(main())
