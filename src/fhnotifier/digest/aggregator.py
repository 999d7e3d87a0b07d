"""Assemble rendered messages into the digest text sent to notification sinks."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from fhnotifier.config.profiles import RenderProfile
from fhnotifier.models import MessageTopic

from .classifier import render_message
from .lookup import ReferenceData

INDENT = "    "

_DIGITS = re.compile(r"(\d+)")


@dataclass(frozen=True)
class RenderedMessage:
    message_id: str
    message_type_id: int
    text: Optional[str]


@dataclass(frozen=True)
class RenderedTopic:
    topic_id: str
    header: Optional[str]
    lines: Tuple[RenderedMessage, ...]

    @property
    def printable_lines(self) -> List[str]:
        return [line.text for line in self.lines if line.text]


def collation_key(text: str) -> Tuple[Union[Tuple[int, int], Tuple[int, str]], ...]:
    """Sort key ignoring case and accents, comparing digit runs as numbers."""

    folded = unicodedata.normalize("NFKD", text)
    folded = "".join(char for char in folded if not unicodedata.combining(char)).casefold()
    key: List[Union[Tuple[int, int], Tuple[int, str]]] = []
    for chunk in _DIGITS.split(folded):
        if not chunk:
            continue
        if chunk.isdigit():
            key.append((0, int(chunk)))
        else:
            key.append((1, chunk))
    return tuple(key)


def _line_sort_key(line: RenderedMessage) -> Tuple[int, tuple]:
    if not line.text:
        return (0, ())
    return (1, collation_key(line.text))


def topic_header(topic: MessageTopic, profile: RenderProfile) -> Optional[str]:
    type_ids = {message.message_type_id for message in topic.messages}
    for rule in profile.headers:
        if type_ids & rule.codes:
            return rule.label
    return None


def render_topic(topic: MessageTopic, reference: ReferenceData, profile: RenderProfile) -> RenderedTopic:
    lines = [
        RenderedMessage(
            message_id=message.id,
            message_type_id=message.message_type_id,
            text=render_message(message, reference, profile),
        )
        for message in topic.messages
    ]
    lines.sort(key=_line_sort_key)
    return RenderedTopic(topic_id=topic.id, header=topic_header(topic, profile), lines=tuple(lines))


def format_topics(rendered: Iterable[RenderedTopic]) -> str:
    blocks: List[str] = []
    for topic in rendered:
        texts = topic.printable_lines
        if not texts:
            continue
        block: List[str] = []
        if topic.header:
            block.append(topic.header)
            block.extend(f"{INDENT}{text}" for text in texts)
        else:
            block.extend(texts)
        blocks.append("\n".join(block) + "\n\n")
    return "".join(blocks).rstrip()


def render_digest(
    topics: Sequence[MessageTopic],
    reference: ReferenceData,
    profile: RenderProfile,
) -> str:
    """Render every topic in feed order; an empty string means nothing to report."""

    return format_topics(render_topic(topic, reference, profile) for topic in topics)
