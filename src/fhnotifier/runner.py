"""One notifier run: pick the time window, fetch, render, notify, record."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Sequence

from fhnotifier.config.profiles import RenderProfile, get_profile
from fhnotifier.digest import ReferenceData, render_digest
from fhnotifier.espn import EspnFantasyClient
from fhnotifier.notifications import NotificationSink, dispatch
from fhnotifier.persistence import WatermarkStore
from fhnotifier.settings import NotifierSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimeWindow:
    """Half-open ``[earliest, latest)`` window in epoch milliseconds.

    ``latest`` is stored already decremented by one, which is the inclusive
    upper bound the API filter expects.
    """

    earliest: int
    latest: int


@dataclass
class RunResult:
    started_at: int
    window: Optional[TimeWindow]
    digest: str = ""
    topic_count: int = 0
    sinks_notified: int = 0
    watermark_updated: bool = False


def now_millis() -> int:
    return int(time.time() * 1000)


def _describe(epoch_millis: int) -> str:
    return datetime.fromtimestamp(epoch_millis / 1000, tz=timezone.utc).isoformat()


def resolve_window(
    run_started_at: int,
    watermark: Optional[int],
    earliest_override: Optional[int] = None,
    latest_override: Optional[int] = None,
) -> Optional[TimeWindow]:
    earliest = earliest_override if earliest_override else watermark
    if not earliest:
        return None
    latest = (latest_override if latest_override else run_started_at) - 1
    return TimeWindow(earliest=earliest, latest=latest)


def build_message_filter(window: TimeWindow, message_type_ids: Iterable[int]) -> Dict[str, Any]:
    return {
        "topics": {
            "filterIncludeMessageTypeIds": {"value": sorted(message_type_ids)},
            "sortMessageDate": {"sortPriority": 1, "sortAsc": True},
            "sortFor": {"sortPriority": 2, "sortAsc": True},
            "filterDateRange": {"value": window.earliest, "additionalValue": window.latest},
        }
    }


async def build_digest(client: EspnFantasyClient, window: TimeWindow, profile: RenderProfile) -> tuple[str, int]:
    """Fetch the feed and reference data concurrently and render the digest."""

    topics, players, fantasy_teams, pro_teams = await asyncio.gather(
        client.get_messages(build_message_filter(window, profile.message_type_ids)),
        client.get_players(),
        client.get_fantasy_teams(),
        client.get_pro_teams(),
    )
    reference = ReferenceData.build(players, fantasy_teams, pro_teams)
    return render_digest(topics, reference, profile), len(topics)


async def run_once(
    settings: NotifierSettings,
    client: EspnFantasyClient,
    store: WatermarkStore,
    sinks: Sequence[NotificationSink],
    *,
    now: Optional[int] = None,
    dry_run: bool = False,
) -> RunResult:
    started_at = now_millis() if now is None else now
    profile = get_profile(settings.message_format)
    window = resolve_window(started_at, store.get(), settings.earliest_date, settings.latest_date)
    result = RunResult(started_at=started_at, window=window)

    if window is None:
        logger.warning(
            "No EARLIEST_DATE given and no stored last run time; no notifications will be sent"
        )
    else:
        logger.info("Earliest date: %s (%s)", window.earliest, _describe(window.earliest))
        logger.info("Latest date: %s (%s)", window.latest, _describe(window.latest))
        result.digest, result.topic_count = await build_digest(client, window, profile)
        if dry_run:
            logger.info("Dry run; digest not sent")
        else:
            result.sinks_notified = await dispatch(result.digest, sinks)

    if dry_run:
        return result
    store.set(started_at)
    result.watermark_updated = True
    logger.info("Updated last run time to %s", started_at)
    return result
