"""Player and team records as returned by the fantasy hockey API."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class ApiRecord(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Player(ApiRecord):
    """An NHL player from the ``players_wl`` view."""

    id: int
    first_name: str = ""
    last_name: str = ""
    full_name: str = ""
    default_position_id: int
    eligible_slots: List[int] = Field(default_factory=list)
    pro_team_id: int
    droppable: bool = True

    @property
    def display_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.full_name


class FantasyTeam(ApiRecord):
    id: int
    abbrev: str
    location: str = ""
    nickname: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.location} {self.nickname}".strip() or self.abbrev


class ProTeam(ApiRecord):
    id: int
    abbrev: str
    location: str = ""
    name: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.location} {self.name}".strip() or self.abbrev
