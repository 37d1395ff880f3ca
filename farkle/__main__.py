"""Command line entry point: score dice and print the JSON reply.

    python -m farkle 1 1 1 5 5 5
    python -m farkle --selection 1 5
    python -m farkle --info
"""
from __future__ import annotations
import argparse
import logging
import sys

from farkle.scoring.validation import RollMode
from farkle.service.score_tool import handle_info_request, handle_score_request, render_reply


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="farkle", description="Score a Farkle roll.")
    parser.add_argument("dice", nargs="*", type=int, help="face values (1-6)")
    parser.add_argument("--selection", action="store_true", help="score a kept subset of 1-6 dice")
    parser.add_argument("--info", action="store_true", help="print the scoring rules")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.info:
        print(handle_info_request()["text"])
        return 0
    mode = RollMode.SELECTION if args.selection else RollMode.FULL_ROLL
    reply = handle_score_request({"dice": args.dice}, mode)
    print(render_reply(reply))
    return 1 if reply.get("isError") else 0


if __name__ == "__main__":
    sys.exit(main())
