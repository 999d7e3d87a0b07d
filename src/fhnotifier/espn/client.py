"""Async client for the ESPN fantasy hockey read API."""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping, Optional

import httpx

from fhnotifier.models import (
    CommunicationResponse,
    FantasyGameInfo,
    FantasyTeam,
    LeagueData,
    MessageTopic,
    Player,
    ProTeam,
)

logger = logging.getLogger(__name__)

API_BASE = "https://fantasy.espn.com/apis/v3/games/fhl"
FILTER_HEADER = "x-fantasy-filter"
DEFAULT_TIMEOUT = 10.0


class EspnFantasyClient:
    """Fetches league communication and reference data for one league season."""

    def __init__(
        self,
        season: int,
        league_id: str,
        espn_s2_cookie: str,
        http: Optional[httpx.AsyncClient] = None,
        base_url: str = API_BASE,
    ) -> None:
        self.season = season
        self.league_id = league_id
        self._cookie = espn_s2_cookie
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=DEFAULT_TIMEOUT)
        self._base_url = base_url.rstrip("/")

    async def __aenter__(self) -> "EspnFantasyClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    @property
    def _season_url(self) -> str:
        return f"{self._base_url}/seasons/{self.season}"

    @property
    def _league_url(self) -> str:
        return f"{self._season_url}/segments/0/leagues/{self.league_id}"

    def _auth_headers(self) -> dict[str, str]:
        return {"Cookie": f"espn_s2={self._cookie}"}

    async def _get_json(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        response = await self._http.get(url, params=params, headers=headers)
        response.raise_for_status()
        return response.json()

    async def get_messages(self, message_filter: Optional[Mapping[str, Any]] = None) -> List[MessageTopic]:
        headers = self._auth_headers()
        if message_filter:
            headers[FILTER_HEADER] = json.dumps(message_filter)
        payload = await self._get_json(
            f"{self._league_url}/communication/",
            params={"view": "kona_league_communication"},
            headers=headers,
        )
        logger.debug("Messages API response: %s", payload)
        topics = CommunicationResponse.model_validate(payload).topics
        logger.info("Fetched %s message topics", len(topics))
        return topics

    async def get_players(self, active_only: bool = True) -> List[Player]:
        payload = await self._get_json(
            f"{self._season_url}/players",
            params={"scoringPeriodId": 0, "view": "players_wl"},
            headers={FILTER_HEADER: json.dumps({"filterActive": {"value": active_only}})},
        )
        players = [Player.model_validate(item) for item in payload]
        logger.info("Fetched %s players", len(players))
        return players

    async def get_league(self) -> LeagueData:
        payload = await self._get_json(self._league_url, headers=self._auth_headers())
        return LeagueData.model_validate(payload)

    async def get_fantasy_teams(self) -> List[FantasyTeam]:
        league = await self.get_league()
        logger.info("Fetched %s fantasy teams", len(league.teams))
        return league.teams

    async def get_pro_teams(self) -> List[ProTeam]:
        payload = await self._get_json(
            self._season_url,
            params={"view": "proTeamSchedules_wl"},
            headers=self._auth_headers(),
        )
        teams = FantasyGameInfo.model_validate(payload).settings.pro_teams
        logger.info("Fetched %s pro teams", len(teams))
        return teams
