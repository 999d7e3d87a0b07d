"""League communication feed: topics and the transaction messages inside them."""

from __future__ import annotations

from typing import List, Optional, Union

from pydantic import Field

from fhnotifier.models.player import ApiRecord, FantasyTeam, ProTeam

# The API sends team and target references as numbers, but occasionally as
# strings (or not at all); only integer references are resolvable.
Reference = Optional[Union[int, str]]


class Message(ApiRecord):
    """One atomic transaction, e.g. a single player moving in a trade."""

    id: str = ""
    topic_id: str = ""
    message_type_id: int
    date: int = 0
    target_id: Reference = None
    for_team_id: Reference = Field(default=None, alias="for")
    from_team_id: Reference = Field(default=None, alias="from")
    to_team_id: Reference = Field(default=None, alias="to")


class MessageTopic(ApiRecord):
    """A group of related messages, e.g. every leg of one trade."""

    id: str = ""
    date: int = 0
    type: str = ""
    messages: List[Message] = Field(default_factory=list)


class CommunicationResponse(ApiRecord):
    topics: List[MessageTopic] = Field(default_factory=list)


class LeagueData(ApiRecord):
    id: int = 0
    season_id: int = 0
    teams: List[FantasyTeam] = Field(default_factory=list)


class ProTeamSettings(ApiRecord):
    pro_teams: List[ProTeam] = Field(default_factory=list)


class FantasyGameInfo(ApiRecord):
    """Season-wide settings from ``view=proTeamSchedules_wl``."""

    settings: ProTeamSettings = Field(default_factory=ProTeamSettings)
