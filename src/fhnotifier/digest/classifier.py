"""Turn a single transaction message into a one-line summary."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from fhnotifier.config.positions import PlayerPositions, describe_player_positions
from fhnotifier.config.profiles import PositionStyle, RenderProfile
from fhnotifier.config.taxonomy import MessageTypeRule, TeamField, get_message_type
from fhnotifier.models import FantasyTeam, Message, Player, ProTeam
from fhnotifier.models.communication import Reference

from .lookup import ReferenceData

NO_TEAM = -1


@dataclass(frozen=True)
class DraftPickSlot:
    overall: int
    round: int
    pick: int


def pick_position(overall: int, num_teams: int) -> DraftPickSlot:
    """Split a 1-based overall pick number into its round and pick in round.

    The last pick of a round is ``num_teams``, never ``0``.
    """

    if num_teams < 1:
        raise ValueError("num_teams must be at least 1")
    if overall < 1:
        raise ValueError(f"overall pick must be at least 1, got {overall}")
    remainder = overall % num_teams
    return DraftPickSlot(
        overall=overall,
        round=math.ceil(overall / num_teams),
        pick=remainder if remainder else num_teams,
    )


def _is_reference(value: Reference) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value not in (0, NO_TEAM)


def _team_reference(message: Message, field: Optional[TeamField]) -> Reference:
    if field == "to":
        return message.to_team_id
    if field == "from":
        return message.from_team_id
    if field == "for":
        return message.for_team_id
    return None


def _resolve_team(message: Message, field: Optional[TeamField], reference: ReferenceData) -> Optional[FantasyTeam]:
    team_id = _team_reference(message, field)
    if not _is_reference(team_id):
        return None
    return reference.fantasy_team(team_id)  # type: ignore[arg-type]


def format_positions(positions: PlayerPositions, style: PositionStyle) -> str:
    if style == "eligible":
        return "/".join(position.abbrev for position in positions.eligible)
    return "/".join(
        [positions.default.abbrev] + [position.abbrev for position in positions.non_primary]
    )


def format_player(player: Player, pro_team: ProTeam, style: PositionStyle) -> str:
    suffix = format_positions(describe_player_positions(player), style)
    team_and_positions = " ".join(part for part in (pro_team.abbrev, suffix) if part)
    return f"{player.display_name}, {team_and_positions}"


def _render_pick(
    rule: MessageTypeRule,
    message: Message,
    team: Optional[FantasyTeam],
    to_team: Optional[FantasyTeam],
    reference: ReferenceData,
) -> Optional[str]:
    if team is None or to_team is None or not _is_reference(message.target_id):
        return None
    slot = pick_position(message.target_id, reference.num_teams)  # type: ignore[arg-type]
    return (
        f"{team.abbrev} {rule.verb} pick {slot.overall} "
        f"(round {slot.round}, pick {slot.pick}) to {to_team.abbrev}"
    )


def render_message(message: Message, reference: ReferenceData, profile: RenderProfile) -> Optional[str]:
    """Render one message, or return ``None`` when its teams do not resolve.

    Unknown message types and ids missing from the reference data raise; a
    message that simply lacks the team context its template needs does not.
    """

    rule = get_message_type(message.message_type_id, profile.message_types)

    player = None
    pro_team = None
    if not rule.targets_draft_pick and _is_reference(message.target_id):
        player = reference.player(message.target_id)  # type: ignore[arg-type]
        pro_team = reference.pro_team(player.pro_team_id)

    team = _resolve_team(message, rule.team_field, reference)
    to_team = _resolve_team(message, rule.to_team_field, reference)

    if rule.targets_draft_pick:
        return _render_pick(rule, message, team, to_team, reference)
    if team is None or player is None or pro_team is None:
        return None

    player_text = format_player(player, pro_team, profile.position_style)
    if to_team is not None:
        return f"{team.abbrev} {rule.verb} {player_text} to {to_team.abbrev}"
    if rule.source:
        return f"{team.abbrev} {rule.verb} {player_text} from {rule.source}"
    return f"{team.abbrev} {rule.verb} {player_text}"
