"""Ask Wikipedia a question from the command line."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from loguru import logger

from wikichat.chat.service import ChatService
from wikichat.config.loader import load_config
from wikichat.search.models import SUPPORTED_LANGUAGES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wikichat", description=__doc__)
    parser.add_argument("query", nargs="+", help="question or subject to look up")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default=None)
    parser.add_argument("--config", type=Path, default=None, help="path to config.json")
    parser.add_argument("--json", action="store_true", help="print ranked results as JSON")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


async def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    service = ChatService(config)
    query = " ".join(args.query).strip()
    if not query:
        print("Error: query must not be empty", file=sys.stderr)
        return 2

    if args.json:
        results = await service.lookup(query, args.lang)
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
        return 0 if results else 1

    reply = await service.ask(query, args.lang)
    print(reply.content)
    if reply.sources:
        print()
        for source in reply.sources:
            print(f"- {source.title}: {source.url}")
    return 0 if reply.found else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    return asyncio.run(run(args))
