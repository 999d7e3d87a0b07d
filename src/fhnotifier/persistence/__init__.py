"""Storage for the "last successful run" watermark."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Any, Optional, Protocol

import boto3

logger = logging.getLogger(__name__)

WATERMARK_KEY = "lastRun"


class WatermarkStore(Protocol):
    def get(self) -> Optional[int]:
        ...

    def set(self, value: int) -> None:
        ...


class FileWatermarkStore:
    """Watermark kept as plain text in a local file."""

    def __init__(self, path: Path | str = ".lastrun"):
        self.path = Path(path)

    def get(self) -> Optional[int]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning("Ignoring unreadable watermark in %s: %r", self.path, raw)
            return None

    def set(self, value: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(str(value), encoding="utf-8")


class SqliteWatermarkStore:
    """Watermark kept in a single-row SQLite table."""

    def __init__(self, db_path: Path | str, key_name: str = WATERMARK_KEY):
        self.db_path = Path(db_path)
        self.key_name = key_name
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS watermarks (
                    key_name TEXT PRIMARY KEY,
                    item_value INTEGER NOT NULL
                )
                """
            )

    def get(self) -> Optional[int]:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT item_value FROM watermarks WHERE key_name = ?",
                (self.key_name,),
            ).fetchone()
        return None if row is None else int(row["item_value"])

    def set(self, value: int) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO watermarks (key_name, item_value) VALUES (?, ?)
                ON CONFLICT(key_name) DO UPDATE SET item_value = excluded.item_value
                """,
                (self.key_name, value),
            )


class DynamoWatermarkStore:
    """Watermark kept as ``{keyName, itemValue}`` in a DynamoDB table."""

    def __init__(self, table_name: str, client: Any = None, key_name: str = WATERMARK_KEY):
        self.table_name = table_name
        self.key_name = key_name
        self._client = client or boto3.client("dynamodb")

    def _key(self) -> dict:
        return {"keyName": {"S": self.key_name}}

    def get(self) -> Optional[int]:
        response = self._client.get_item(TableName=self.table_name, Key=self._key())
        value = response.get("Item", {}).get("itemValue", {}).get("N")
        return int(value) if value else None

    def set(self, value: int) -> None:
        self._client.update_item(
            TableName=self.table_name,
            Key=self._key(),
            UpdateExpression="SET #IV = :t",
            ExpressionAttributeNames={"#IV": "itemValue"},
            ExpressionAttributeValues={":t": {"N": str(value)}},
            ReturnValues="UPDATED_NEW",
        )


def build_store(
    *,
    dynamo_table_name: Optional[str] = None,
    sqlite_path: Optional[Path | str] = None,
    file_path: Path | str = ".lastrun",
) -> WatermarkStore:
    if dynamo_table_name:
        logger.debug("Using DynamoDB table %s for the watermark", dynamo_table_name)
        return DynamoWatermarkStore(dynamo_table_name)
    if sqlite_path:
        logger.debug("Using SQLite database %s for the watermark", sqlite_path)
        return SqliteWatermarkStore(sqlite_path)
    logger.debug("Using file %s for the watermark", file_path)
    return FileWatermarkStore(file_path)


__all__ = [
    "DynamoWatermarkStore",
    "FileWatermarkStore",
    "SqliteWatermarkStore",
    "WATERMARK_KEY",
    "WatermarkStore",
    "build_store",
]
