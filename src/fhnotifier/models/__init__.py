"""Typed records for the fantasy hockey API payloads."""

from .communication import (
    CommunicationResponse,
    FantasyGameInfo,
    LeagueData,
    Message,
    MessageTopic,
    ProTeamSettings,
)
from .player import FantasyTeam, Player, ProTeam

__all__ = [
    "CommunicationResponse",
    "FantasyGameInfo",
    "FantasyTeam",
    "LeagueData",
    "Message",
    "MessageTopic",
    "Player",
    "ProTeam",
    "ProTeamSettings",
]
