"""Errors raised while building a transaction digest."""

from __future__ import annotations


class NotifierError(Exception):
    """Base class for notifier failures that should abort a run."""


class ConfigurationError(NotifierError):
    pass


class UnrecognizedCode(NotifierError):
    """A numeric code from the fantasy API has no known mapping."""

    def __init__(self, kind: str, code: object):
        super().__init__(f"Unexpected {kind}: {code!r}")
        self.kind = kind
        self.code = code


class UnrecognizedMessageType(UnrecognizedCode):
    def __init__(self, code: object):
        super().__init__("message type", code)


class EntityNotFound(NotifierError):
    """A message references an id missing from the reference data."""

    def __init__(self, entity_kind: str, entity_id: object):
        super().__init__(f"Could not find {entity_kind} (ID: {entity_id!r})")
        self.entity_kind = entity_kind
        self.entity_id = entity_id
