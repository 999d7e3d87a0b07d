"""Transaction digest rendering: lookups, per-message wording and topic layout."""

from .aggregator import (
    RenderedMessage,
    RenderedTopic,
    collation_key,
    format_topics,
    render_digest,
    render_topic,
    topic_header,
)
from .classifier import DraftPickSlot, format_player, pick_position, render_message
from .lookup import ReferenceData, find_fantasy_team, find_player, find_pro_team

__all__ = [
    "DraftPickSlot",
    "ReferenceData",
    "RenderedMessage",
    "RenderedTopic",
    "collation_key",
    "find_fantasy_team",
    "find_player",
    "find_pro_team",
    "format_player",
    "format_topics",
    "pick_position",
    "render_digest",
    "render_message",
    "render_topic",
    "topic_header",
]
