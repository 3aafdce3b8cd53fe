from __future__ import annotations

import argparse
import logging

from simple_command.runner import simple_command


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="simple-command",
        description=(
            "Run a command and stay quiet unless it fails; on failure, print its "
            "combined stdout/stderr and exit non-zero."
        ),
    )
    p.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Command and arguments (joined with spaces, then split on whitespace).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log the command and its outcome to stderr.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    words = list(args.command)
    # REMAINDER keeps the `--` separator.
    if words[:1] == ["--"]:
        words = words[1:]
    simple_command(" ".join(words))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
