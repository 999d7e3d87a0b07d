import pytest

from fhnotifier.config import get_message_type, get_profile, iter_message_types, iter_profiles
from fhnotifier.exceptions import UnrecognizedMessageType


def test_taxonomy_covers_transaction_codes():
    codes = sorted(rule.code for rule in iter_message_types())
    assert codes == [178, 179, 180, 181, 224, 225, 226, 239, 241, 242, 243, 244, 245, 246]


def test_get_message_type_roles():
    waiver_add = get_message_type(180)
    assert (waiver_add.kind, waiver_add.team_field, waiver_add.source) == ("add", "to", "Waivers")

    roster_drop = get_message_type(239)
    assert roster_drop.team_field == "for"

    processed_pick = get_message_type(246)
    assert processed_pick.targets_draft_pick
    assert (processed_pick.verb, processed_pick.team_field, processed_pick.to_team_field) == ("traded", "from", "to")


def test_get_message_type_unknown_raises():
    with pytest.raises(UnrecognizedMessageType) as excinfo:
        get_message_type(999)
    assert excinfo.value.code == 999


def test_get_profile_case_insensitive():
    assert get_profile("CURRENT").name == "current"
    assert {profile.name for profile in iter_profiles()} == {"current", "legacy"}


def test_get_profile_missing_raises():
    with pytest.raises(KeyError):
        get_profile("v0")


def test_legacy_profile_has_no_picks_or_headers():
    legacy = get_profile("legacy")
    assert legacy.position_style == "eligible"
    assert legacy.headers == ()
    assert not {226, 243, 246} & set(legacy.message_type_ids)
    assert 224 in legacy.message_type_ids

    current = get_profile("current")
    assert current.position_style == "non_primary"
    assert [header.label for header in current.headers] == [
        "Trade Accepted:",
        "Trade Processed:",
        "Trade Vetoed by LM:",
    ]
