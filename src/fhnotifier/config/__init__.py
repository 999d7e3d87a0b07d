"""Code tables and rendering modes for transaction digests."""

from .positions import (
    PlayerPosition,
    PlayerPositions,
    compute_eligible_positions,
    compute_non_primary_positions,
    describe_player_positions,
    resolve_default_position,
    resolve_position,
)
from .profiles import PROFILE_NAMES, RenderProfile, get_profile, iter_profiles
from .taxonomy import HeaderRule, MessageTypeRule, get_message_type, iter_message_types

__all__ = [
    "HeaderRule",
    "MessageTypeRule",
    "PROFILE_NAMES",
    "PlayerPosition",
    "PlayerPositions",
    "RenderProfile",
    "compute_eligible_positions",
    "compute_non_primary_positions",
    "describe_player_positions",
    "get_message_type",
    "get_profile",
    "iter_message_types",
    "iter_profiles",
    "resolve_default_position",
    "resolve_position",
]
