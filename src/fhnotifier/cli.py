"""Command-line entry point for a single notifier run."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

import httpx

from fhnotifier.config.profiles import PROFILE_NAMES
from fhnotifier.espn import EspnFantasyClient
from fhnotifier.espn.client import DEFAULT_TIMEOUT
from fhnotifier.exceptions import NotifierError
from fhnotifier.notifications import build_sinks
from fhnotifier.persistence import build_store
from fhnotifier.runner import RunResult, run_once
from fhnotifier.settings import NotifierSettings, load_settings

logger = logging.getLogger("fhnotifier")


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Send a digest of new fantasy hockey league transactions",
    )
    parser.add_argument(
        "--earliest-date",
        type=int,
        default=None,
        help="Start of the window in epoch milliseconds (overrides the stored last run time)",
    )
    parser.add_argument(
        "--latest-date",
        type=int,
        default=None,
        help="End of the window in epoch milliseconds, exclusive (default: now)",
    )
    parser.add_argument(
        "--format",
        dest="message_format",
        choices=PROFILE_NAMES,
        default=None,
        help="Digest wording to use (default: FH_MESSAGE_FORMAT or 'current')",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the digest without notifying anyone or updating the last run time",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _apply_overrides(settings: NotifierSettings, args: argparse.Namespace) -> NotifierSettings:
    overrides = {
        "earliest_date": args.earliest_date,
        "latest_date": args.latest_date,
        "message_format": args.message_format,
    }
    return settings.model_copy(update={key: value for key, value in overrides.items() if value is not None})


async def _run(settings: NotifierSettings, dry_run: bool) -> RunResult:
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT) as http:
        client = EspnFantasyClient(
            settings.season,
            settings.league_id,
            settings.espn_s2_cookie,
            http=http,
            base_url=settings.api_base,
        )
        store = build_store(
            dynamo_table_name=settings.dynamo_table_name,
            sqlite_path=settings.watermark_db_path,
            file_path=settings.last_run_file_path,
        )
        sinks = [] if dry_run else build_sinks(
            sns_topic_arn=settings.sns_topic_arn,
            discord_webhook=settings.discord_webhook,
            http=http,
        )
        return await run_once(settings, client, store, sinks, dry_run=dry_run)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = _apply_overrides(load_settings(), args)
        result = asyncio.run(_run(settings, args.dry_run))
    except NotifierError as exc:
        logger.error("%s", exc)
        return 1
    except httpx.HTTPError as exc:
        logger.error("HTTP request failed: %s", exc)
        return 1

    if args.dry_run:
        print(result.digest or "No new transactions")
    return 0


if __name__ == "__main__":
    sys.exit(main())
