"""Transaction message types and how each one is worded."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Literal, Mapping, Optional, Tuple

from fhnotifier.exceptions import UnrecognizedMessageType

MessageKind = Literal["add", "drop", "trade", "trade_pick"]
TeamField = Literal["to", "from", "for"]


@dataclass(frozen=True)
class MessageTypeRule:
    code: int
    kind: MessageKind
    verb: str
    team_field: TeamField
    to_team_field: Optional[TeamField] = None
    source: Optional[str] = None
    description: str = ""

    @property
    def targets_draft_pick(self) -> bool:
        return self.kind == "trade_pick"


@dataclass(frozen=True)
class HeaderRule:
    label: str
    codes: frozenset[int]


def _rules(*rules: MessageTypeRule) -> Dict[int, MessageTypeRule]:
    return {rule.code: rule for rule in rules}


_MESSAGE_TYPES: Dict[int, MessageTypeRule] = _rules(
    MessageTypeRule(178, "add", "added", "to", source="Free Agency", description="Add from free agency"),
    MessageTypeRule(180, "add", "added", "to", source="Waivers", description="Add from waivers"),
    MessageTypeRule(179, "drop", "dropped", "to", description="Drop"),
    MessageTypeRule(181, "drop", "dropped", "to", description="Drop"),
    MessageTypeRule(239, "drop", "dropped", "for", description="Drop from roster"),
    MessageTypeRule(224, "trade", "trades", "from", "to", description="Trade accepted"),
    MessageTypeRule(241, "trade", "trades", "from", "to", description="Trade vetoed by LM"),
    MessageTypeRule(226, "trade_pick", "trades", "from", "to", description="Draft pick trade accepted"),
    MessageTypeRule(243, "trade_pick", "trades", "from", "to", description="Draft pick trade vetoed by LM"),
    MessageTypeRule(244, "trade", "traded", "from", "to", description="Trade processed"),
    MessageTypeRule(246, "trade_pick", "traded", "from", "to", description="Draft pick trade processed"),
    MessageTypeRule(225, "drop", "drops", "from", description="Trade accepted drop"),
    MessageTypeRule(242, "drop", "drops", "from", description="Trade vetoed by LM drop"),
    MessageTypeRule(245, "drop", "dropped", "from", description="Trade processed drop"),
)

_TOPIC_HEADERS: Tuple[HeaderRule, ...] = (
    HeaderRule("Trade Accepted:", frozenset({224, 226})),
    HeaderRule("Trade Processed:", frozenset({244, 246})),
    HeaderRule("Trade Vetoed by LM:", frozenset({241, 242, 243})),
)

# Read-only views; profiles build their own tables from these.
MESSAGE_TYPES: Mapping[int, MessageTypeRule] = dict(_MESSAGE_TYPES)
TOPIC_HEADERS: Tuple[HeaderRule, ...] = _TOPIC_HEADERS


def iter_message_types() -> Iterable[MessageTypeRule]:
    return _MESSAGE_TYPES.values()


def get_message_type(code: int, table: Optional[Mapping[int, MessageTypeRule]] = None) -> MessageTypeRule:
    """Look up the rule for a message type, raising for codes outside the table."""

    rules = _MESSAGE_TYPES if table is None else table
    try:
        return rules[code]
    except (KeyError, TypeError):
        raise UnrecognizedMessageType(code) from None
