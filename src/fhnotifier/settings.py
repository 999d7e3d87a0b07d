"""Runtime configuration resolved from environment variables and SSM."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import boto3
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from fhnotifier.config.profiles import PROFILE_NAMES
from fhnotifier.espn import API_BASE
from fhnotifier.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_SSM_SUFFIX = "_SSM"
# Variables that may be provided as an SSM parameter path instead of a value.
_SECRET_VARS = ("FH_SEASON", "FH_LEAGUE_ID", "ESPN_S2_COOKIE", "DISCORD_WEBHOOK")


class NotifierSettings(BaseModel):
    season: int
    league_id: str = Field(..., min_length=1)
    espn_s2_cookie: str = Field(..., min_length=1)
    discord_webhook: Optional[str] = None
    sns_topic_arn: Optional[str] = None
    dynamo_table_name: Optional[str] = None
    last_run_file_path: Path = Path(".lastrun")
    watermark_db_path: Optional[Path] = None
    earliest_date: Optional[int] = None
    latest_date: Optional[int] = None
    message_format: str = "current"
    api_base: str = API_BASE

    model_config = ConfigDict(frozen=True)


def _get_parameter(name: str, environ: Mapping[str, str], ssm: Any) -> Optional[str]:
    """Value of ``name``, preferring a non-empty SSM parameter named by ``name_SSM``."""

    ssm_path = environ.get(name + _SSM_SUFFIX)
    if ssm_path:
        response = ssm.get_parameter(Name=ssm_path, WithDecryption=True)
        value = response.get("Parameter", {}).get("Value")
        if value:
            return value
        logger.warning("SSM parameter %s for %s is empty; falling back to %s", ssm_path, name, name)
    return environ.get(name) or None


def _parse_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(environ: Optional[Mapping[str, str]] = None, ssm: Any = None) -> NotifierSettings:
    env = os.environ if environ is None else environ

    if ssm is None and any(env.get(name + _SSM_SUFFIX) for name in _SECRET_VARS):
        ssm = boto3.client("ssm")
    values = {name: _get_parameter(name, env, ssm) for name in _SECRET_VARS}

    missing = [name for name in ("FH_SEASON", "FH_LEAGUE_ID", "ESPN_S2_COOKIE") if not values[name]]
    if missing:
        raise ConfigurationError(
            "At least one of FH_SEASON, FH_LEAGUE_ID, and ESPN_S2_COOKIE not defined "
            f"(missing: {', '.join(missing)})"
        )

    message_format = (env.get("FH_MESSAGE_FORMAT") or "current").lower()
    if message_format not in PROFILE_NAMES:
        raise ConfigurationError(
            f"FH_MESSAGE_FORMAT must be one of {', '.join(PROFILE_NAMES)}, got {message_format!r}"
        )

    return NotifierSettings(
        season=_parse_int("FH_SEASON", values["FH_SEASON"]),
        league_id=values["FH_LEAGUE_ID"],
        espn_s2_cookie=values["ESPN_S2_COOKIE"],
        discord_webhook=values["DISCORD_WEBHOOK"],
        sns_topic_arn=env.get("AWS_SNS_TOPIC_ARN") or None,
        dynamo_table_name=env.get("AWS_DYNAMO_DB_TABLE_NAME") or None,
        last_run_file_path=Path(env.get("LAST_RUN_FILE_PATH") or ".lastrun"),
        watermark_db_path=env.get("FH_WATERMARK_DB") or None,
        earliest_date=_parse_int("EARLIEST_DATE", env.get("EARLIEST_DATE")),
        latest_date=_parse_int("LATEST_DATE", env.get("LATEST_DATE")),
        message_format=message_format,
        api_base=env.get("FH_API_BASE") or API_BASE,
    )
