"""Notification sinks that receive the rendered digest."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Protocol, Sequence

import boto3
import httpx

logger = logging.getLogger(__name__)


class NotificationSink(Protocol):
    name: str

    async def publish(self, message: str) -> None:
        ...


class DiscordSink:
    """Posts the digest to a Discord channel webhook."""

    name = "discord"

    def __init__(self, webhook_url: str, http: Optional[httpx.AsyncClient] = None):
        self.webhook_url = webhook_url
        self._http = http

    async def publish(self, message: str) -> None:
        if self._http is not None:
            response = await self._http.post(self.webhook_url, json={"content": message})
            response.raise_for_status()
            return
        async with httpx.AsyncClient() as http:
            response = await http.post(self.webhook_url, json={"content": message})
            response.raise_for_status()


class SnsSink:
    """Publishes the digest to an AWS SNS topic."""

    name = "sns"

    def __init__(self, topic_arn: str, client: Any = None):
        self.topic_arn = topic_arn
        self._client = client or boto3.client("sns")

    async def publish(self, message: str) -> None:
        # boto3 is blocking
        await asyncio.to_thread(self._client.publish, TopicArn=self.topic_arn, Message=message)


def build_sinks(
    *,
    sns_topic_arn: Optional[str] = None,
    discord_webhook: Optional[str] = None,
    http: Optional[httpx.AsyncClient] = None,
) -> List[NotificationSink]:
    sinks: List[NotificationSink] = []
    if sns_topic_arn:
        sinks.append(SnsSink(sns_topic_arn))
    if discord_webhook:
        sinks.append(DiscordSink(discord_webhook, http=http))
    return sinks


async def dispatch(message: str, sinks: Sequence[NotificationSink]) -> int:
    """Publish to every sink concurrently; the first failure propagates.

    Returns the number of sinks the message was published to.
    """

    if not message:
        logger.info("No notifications to send")
        return 0
    logger.info("Message to be sent via notification streams:\n%s", message)
    if not sinks:
        logger.warning("No notification sinks configured")
        return 0
    await asyncio.gather(*(sink.publish(message) for sink in sinks))
    logger.info("Published digest to %s", ", ".join(sink.name for sink in sinks))
    return len(sinks)


__all__ = ["DiscordSink", "NotificationSink", "SnsSink", "build_sinks", "dispatch"]
