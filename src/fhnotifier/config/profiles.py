"""Versioned rendering modes for the transaction digest.

Two wordings have shipped for this league's notifications:

``current``
    Position suffix is the default position followed by any other eligible
    positions sorted by abbreviation (``C/LW/RW``). Draft pick trades are
    rendered and trade topics get a header line.
``legacy``
    Position suffix is every eligible position in the order the API lists
    them. Draft pick trades are not part of the taxonomy and topics have no
    header.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Mapping, Tuple

from .taxonomy import MESSAGE_TYPES, TOPIC_HEADERS, HeaderRule, MessageTypeRule

PositionStyle = Literal["non_primary", "eligible"]


@dataclass(frozen=True)
class RenderProfile:
    name: str
    position_style: PositionStyle
    message_types: Mapping[int, MessageTypeRule]
    headers: Tuple[HeaderRule, ...]

    @property
    def message_type_ids(self) -> list[int]:
        return sorted(self.message_types)


_PROFILES: Dict[str, RenderProfile] = {
    "current": RenderProfile(
        name="current",
        position_style="non_primary",
        message_types=MESSAGE_TYPES,
        headers=TOPIC_HEADERS,
    ),
    "legacy": RenderProfile(
        name="legacy",
        position_style="eligible",
        message_types={
            code: rule for code, rule in MESSAGE_TYPES.items() if not rule.targets_draft_pick
        },
        headers=(),
    ),
}

PROFILE_NAMES: Tuple[str, ...] = tuple(_PROFILES)


def iter_profiles() -> Iterable[RenderProfile]:
    return _PROFILES.values()


def get_profile(name: str) -> RenderProfile:
    key = name.lower()
    if key not in _PROFILES:
        raise KeyError(f"No render profile named {name!r}; expected one of {', '.join(PROFILE_NAMES)}")
    return _PROFILES[key]
