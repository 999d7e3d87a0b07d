"""HTTP access to the ESPN fantasy hockey API."""

from .client import API_BASE, EspnFantasyClient

__all__ = ["API_BASE", "EspnFantasyClient"]
