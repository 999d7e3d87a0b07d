"""Id lookups against the reference data fetched for a run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Sequence, Tuple, TypeVar

from fhnotifier.exceptions import EntityNotFound
from fhnotifier.models import FantasyTeam, Player, ProTeam

T = TypeVar("T", Player, FantasyTeam, ProTeam)


def _index(records: Iterable[T]) -> Dict[int, T]:
    index: Dict[int, T] = {}
    for record in records:
        # first match wins, same as a linear scan
        index.setdefault(record.id, record)
    return index


def _find(records: Iterable[T], entity_id: int, kind: str) -> T:
    for record in records:
        if type(record.id) is type(entity_id) and record.id == entity_id:
            return record
    raise EntityNotFound(kind, entity_id)


def find_player(players: Sequence[Player], player_id: int) -> Player:
    return _find(players, player_id, "player")


def find_fantasy_team(teams: Sequence[FantasyTeam], team_id: int) -> FantasyTeam:
    return _find(teams, team_id, "fantasy team")


def find_pro_team(teams: Sequence[ProTeam], team_id: int) -> ProTeam:
    return _find(teams, team_id, "pro team")


@dataclass(frozen=True)
class ReferenceData:
    """Players and teams a digest is rendered against, indexed by id."""

    players: Tuple[Player, ...]
    fantasy_teams: Tuple[FantasyTeam, ...]
    pro_teams: Tuple[ProTeam, ...]
    _players_by_id: Mapping[int, Player] = field(init=False, repr=False, compare=False)
    _fantasy_teams_by_id: Mapping[int, FantasyTeam] = field(init=False, repr=False, compare=False)
    _pro_teams_by_id: Mapping[int, ProTeam] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_players_by_id", _index(self.players))
        object.__setattr__(self, "_fantasy_teams_by_id", _index(self.fantasy_teams))
        object.__setattr__(self, "_pro_teams_by_id", _index(self.pro_teams))

    @classmethod
    def build(
        cls,
        players: Iterable[Player],
        fantasy_teams: Iterable[FantasyTeam],
        pro_teams: Iterable[ProTeam],
    ) -> "ReferenceData":
        return cls(tuple(players), tuple(fantasy_teams), tuple(pro_teams))

    @property
    def num_teams(self) -> int:
        return len(self.fantasy_teams)

    def player(self, player_id: int) -> Player:
        return self._get(self._players_by_id, player_id, "player")

    def fantasy_team(self, team_id: int) -> FantasyTeam:
        return self._get(self._fantasy_teams_by_id, team_id, "fantasy team")

    def pro_team(self, team_id: int) -> ProTeam:
        return self._get(self._pro_teams_by_id, team_id, "pro team")

    @staticmethod
    def _get(index: Mapping[int, T], entity_id: int, kind: str) -> T:
        if not isinstance(entity_id, int) or isinstance(entity_id, bool):
            raise EntityNotFound(kind, entity_id)
        try:
            return index[entity_id]
        except KeyError:
            raise EntityNotFound(kind, entity_id) from None
