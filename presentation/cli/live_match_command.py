from __future__ import annotations

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from application import open_live_ranks_service
from config import settings
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import Credential
from domain.enums import Region
from domain.errors import (
    CatalogUnavailableError,
    InternalFailureError,
    NotFoundError,
    NotInGameError,
)
from presentation.formatters import render_json, render_table

USAGE_HINT = (
    "I will show the ranks of everyone in the current game of the summoner you specify. "
    "Try it out like this:\n  lolranks SomeSummoner"
)
FAILURE_MESSAGE = (
    "Hmh, it looks like something went wrong. Check if the summoner name is spelled "
    "correctly and that the summoner is currently in a match."
)

EXIT_OK = 0
EXIT_LOOKUP_FAILED = 1
EXIT_USAGE = 2
EXIT_STARTUP_FAILED = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lolranks",
        description="Show the ranked standing of everyone in a summoner's live match.",
    )
    parser.add_argument("summoner", nargs="*", help="summoner name (may contain spaces)")
    parser.add_argument("-t", "--token", help="Riot API token (default: $LOLBOT_RIOT_TOKEN)")
    parser.add_argument("-r", "--region", help=f"platform, e.g. EUW1 or eune (default: {settings.DEFAULT_REGION})")
    parser.add_argument("--json", action="store_true", help="print JSON instead of a table")
    parser.add_argument("--ddragon-version", help=f"champion data version (default: {settings.DDRAGON_VERSION})")
    parser.add_argument("-v", "--verbose", action="store_true", help="log to stderr")
    return parser


class LiveMatchCommand:
    """One-shot lookup: parse arguments, query, print."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="cli")
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def resolve_credential(self, args: argparse.Namespace) -> Credential:
        token = args.token or settings.RIOT_API_KEY
        if not token:
            raise ValueError(
                "RIOT API token not provided. Provide a token using the '--token' "
                "argument or the LOLBOT_RIOT_TOKEN environment variable."
            )
        region_name = args.region or settings.RIOT_REGION
        if not region_name:
            region_name = settings.DEFAULT_REGION
            self.logger.info(lambda: f"RIOT region not provided. Defaulting to: {region_name}")
        return Credential(token=token, region=Region.from_string(region_name))

    async def run(self, argv: Optional[Iterable[str]] = None) -> int:
        args = build_parser().parse_args(list(argv or []))
        summoner_name = " ".join(args.summoner).strip()
        if not summoner_name:
            print(USAGE_HINT, file=self.out)
            return EXIT_USAGE

        try:
            credential = self.resolve_credential(args)
        except ValueError as exc:
            print(str(exc), file=self.err)
            return EXIT_USAGE

        self.logger.info(lambda: f"lookup requested for '{summoner_name}'")
        try:
            async with open_live_ranks_service(credential, ddragon_version=args.ddragon_version) as service:
                result = await service.get_live_match_ranks(summoner_name)
        except CatalogUnavailableError as exc:
            self.logger.error(lambda: f"startup failed: {exc}")
            print(f"Could not load champion data: {exc}", file=self.err)
            return EXIT_STARTUP_FAILED
        except (NotFoundError, NotInGameError, InternalFailureError) as exc:
            self.logger.warning(lambda: f"{type(exc).__name__}: {exc}")
            print(FAILURE_MESSAGE, file=self.err)
            return EXIT_LOOKUP_FAILED

        if args.json:
            print(render_json(result, summoner_name), file=self.out)
        else:
            print(render_table(result, summoner_name), file=self.out)
        return EXIT_OK


async def run(argv: Optional[Iterable[str]] = None) -> int:
    return await LiveMatchCommand().run(argv)
