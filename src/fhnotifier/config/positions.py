"""Lineup slot and position codes used by the fantasy hockey API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Tuple

from fhnotifier.exceptions import UnrecognizedCode
from fhnotifier.models import Player


@dataclass(frozen=True)
class PlayerPosition:
    abbrev: str
    name: str


CENTER = PlayerPosition("C", "Center")
LEFT_WING = PlayerPosition("LW", "Left Wing")
RIGHT_WING = PlayerPosition("RW", "Right Wing")
FORWARD = PlayerPosition("F", "Forward")
DEFENSEMAN = PlayerPosition("D", "Defenseman")
GOALIE = PlayerPosition("G", "Goalie")
UTILITY = PlayerPosition("UTIL", "Utility")
BENCH = PlayerPosition("BE", "Bench")
INJURY_RESERVE = PlayerPosition("IR", "Injury Reserve")
INVALID = PlayerPosition("INV", "Invalid Player")
SKATER = PlayerPosition("SK", "Skater")

_SLOT_POSITIONS: Dict[int, PlayerPosition] = {
    0: CENTER,
    1: LEFT_WING,
    2: RIGHT_WING,
    3: FORWARD,
    4: DEFENSEMAN,
    5: GOALIE,
    6: UTILITY,
    7: BENCH,
    8: INJURY_RESERVE,
    9: INVALID,
    10: SKATER,
}

# Default position ids use a different numbering than lineup slots.
_DEFAULT_POSITIONS: Dict[int, PlayerPosition] = {
    1: CENTER,
    2: LEFT_WING,
    3: RIGHT_WING,
    4: DEFENSEMAN,
    5: GOALIE,
}

# Slots describing roster mechanics rather than a position a player plays.
META_SLOTS = frozenset({FORWARD, UTILITY, BENCH, INJURY_RESERVE, INVALID, SKATER})

SLOT_POSITIONS: Mapping[int, PlayerPosition] = dict(_SLOT_POSITIONS)


@dataclass(frozen=True)
class PlayerPositions:
    default: PlayerPosition
    eligible: Tuple[PlayerPosition, ...]
    non_primary: Tuple[PlayerPosition, ...]


def resolve_position(code: int) -> PlayerPosition:
    """Map a lineup slot code to its position, raising on unknown codes."""

    try:
        return _SLOT_POSITIONS[code]
    except (KeyError, TypeError):
        raise UnrecognizedCode("position ID", code) from None


def resolve_default_position(default_position_id: int) -> PlayerPosition:
    try:
        return _DEFAULT_POSITIONS[default_position_id]
    except (KeyError, TypeError):
        raise UnrecognizedCode("default position ID", default_position_id) from None


def compute_eligible_positions(eligible_slots: Iterable[int]) -> Tuple[PlayerPosition, ...]:
    """Resolve slots to real positions, keeping the order the API sent them in."""

    positions = (resolve_position(slot) for slot in eligible_slots)
    return tuple(position for position in positions if position not in META_SLOTS)


def compute_non_primary_positions(
    eligible: Iterable[PlayerPosition],
    default: PlayerPosition,
) -> Tuple[PlayerPosition, ...]:
    others = [position for position in eligible if position.abbrev != default.abbrev]
    return tuple(sorted(others, key=lambda position: position.abbrev))


def describe_player_positions(player: Player) -> PlayerPositions:
    """Derive display positions for a player without touching the record."""

    default = resolve_default_position(player.default_position_id)
    eligible = compute_eligible_positions(player.eligible_slots)
    return PlayerPositions(
        default=default,
        eligible=eligible,
        non_primary=compute_non_primary_positions(eligible, default),
    )
