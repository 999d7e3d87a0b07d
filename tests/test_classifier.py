import pytest

from fhnotifier.config import get_profile
from fhnotifier.digest import pick_position, render_message
from fhnotifier.exceptions import EntityNotFound, UnrecognizedMessageType
from fhnotifier.models import ProTeam

from tests.sample_data import message, reference

CURRENT = get_profile("current")
LEGACY = get_profile("legacy")


def test_pick_position_last_pick_of_round():
    slot = pick_position(24, 12)
    assert (slot.round, slot.pick) == (2, 12)


def test_pick_position_first_pick_of_round():
    slot = pick_position(25, 12)
    assert (slot.overall, slot.round, slot.pick) == (25, 3, 1)
    assert (pick_position(1, 12).round, pick_position(1, 12).pick) == (1, 1)


def test_pick_position_rejects_empty_league():
    with pytest.raises(ValueError):
        pick_position(3, 0)


def test_free_agent_add():
    text = render_message(message(178, to=1, targetId=101), reference(), CURRENT)
    assert text == "SHRK added Artemi Panarin, NYR LW/RW from Free Agency"


def test_waiver_add():
    text = render_message(message(180, to=2, targetId=103), reference(), CURRENT)
    assert text == "WOLF added Morgan Rielly, TOR D from Waivers"


@pytest.mark.parametrize("type_id", [179, 181])
def test_drop_uses_to_team(type_id):
    text = render_message(message(type_id, to=3, targetId=104), reference(), CURRENT)
    assert text == "BEAR dropped Igor Shesterkin, NYR G"


def test_roster_drop_uses_for_team():
    text = render_message(message(239, to=-1, targetId=104, **{"for": 4}), reference(), CURRENT)
    assert text == "HAWK dropped Igor Shesterkin, NYR G"


def test_trade_leg_current_and_legacy_suffix():
    msg = message(224, targetId=102, to=2, **{"from": 1})
    assert render_message(msg, reference(), CURRENT) == "SHRK trades Mika Zibanejad, NYR C/RW to WOLF"
    assert render_message(msg, reference(), LEGACY) == "SHRK trades Mika Zibanejad, NYR RW/C to WOLF"


def test_trade_processed_and_trade_drops():
    ref = reference()
    assert (
        render_message(message(244, targetId=101, to=1, **{"from": 2}), ref, CURRENT)
        == "WOLF traded Artemi Panarin, NYR LW/RW to SHRK"
    )
    assert render_message(message(225, targetId=103, **{"from": 3}), ref, CURRENT) == (
        "BEAR drops Morgan Rielly, TOR D"
    )
    assert render_message(message(245, targetId=103, **{"from": 3}), ref, CURRENT) == (
        "BEAR dropped Morgan Rielly, TOR D"
    )


def test_trade_without_destination_omits_to_clause():
    text = render_message(message(241, targetId=102, to=-1, **{"from": 1}), reference(), CURRENT)
    assert text == "SHRK trades Mika Zibanejad, NYR C/RW"


def test_draft_pick_trade():
    ref = reference()
    accepted = message(226, targetId=8, to=2, **{"from": 1})
    processed = message(246, targetId=5, to=1, **{"from": 2})
    assert render_message(accepted, ref, CURRENT) == "SHRK trades pick 8 (round 2, pick 4) to WOLF"
    assert render_message(processed, ref, CURRENT) == "WOLF traded pick 5 (round 2, pick 1) to SHRK"


def test_draft_pick_needs_both_teams():
    assert render_message(message(243, targetId=8, **{"from": 1}), reference(), CURRENT) is None


def test_draft_pick_types_unknown_in_legacy_profile():
    with pytest.raises(UnrecognizedMessageType):
        render_message(message(226, targetId=8, to=2, **{"from": 1}), reference(), LEGACY)


@pytest.mark.parametrize("team_ref", [-1, "3", None, 0])
def test_unresolvable_team_renders_nothing(team_ref):
    fields = {"targetId": 101}
    if team_ref is not None:
        fields["to"] = team_ref
    assert render_message(message(178, **fields), reference(), CURRENT) is None


def test_unknown_message_type_raises():
    with pytest.raises(UnrecognizedMessageType) as excinfo:
        render_message(message(999, to=1, targetId=101), reference(), CURRENT)
    assert excinfo.value.code == 999


def test_missing_player_raises():
    with pytest.raises(EntityNotFound) as excinfo:
        render_message(message(178, to=1, targetId=555), reference(), CURRENT)
    assert (excinfo.value.entity_kind, excinfo.value.entity_id) == ("player", 555)


def test_missing_fantasy_team_raises():
    with pytest.raises(EntityNotFound) as excinfo:
        render_message(message(178, to=77, targetId=101), reference(), CURRENT)
    assert excinfo.value.entity_kind == "fantasy team"


def test_missing_pro_team_raises():
    ref = reference()
    ref = type(ref).build(ref.players, ref.fantasy_teams, [ProTeam(id=21, abbrev="TOR")])
    with pytest.raises(EntityNotFound) as excinfo:
        render_message(message(178, to=1, targetId=101), ref, CURRENT)
    assert (excinfo.value.entity_kind, excinfo.value.entity_id) == ("pro team", 13)


def test_rendering_is_repeatable():
    ref = reference()
    msg = message(224, targetId=102, to=2, **{"from": 1})
    first = render_message(msg, ref, CURRENT)
    assert render_message(msg, ref, CURRENT) == first
    assert ref.player(102).eligible_slots == [2, 0, 3, 6, 7, 8]
