"""Conversation turn and session state models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(str, Enum):
    """Author of a conversational turn."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Utterance:
    """One message in a conversation."""

    text: str
    role: Role

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role(self.role))


@dataclass
class ExtractedSignal:
    """Clinical signal extracted from a single user utterance.

    Symptoms are deduplicated by canonical keyword. Medications and allergy
    mentions keep order of appearance and are never deduplicated.
    """

    symptoms: set[str] = field(default_factory=set)
    medications: list[str] = field(default_factory=list)
    allergy_mentions: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.symptoms or self.medications or self.allergy_mentions)


@dataclass
class ConversationState:
    """Session-scoped accumulated signal.

    Only ConversationAccumulator mutates this. Readers receive a snapshot
    from ``copy()``.
    """

    symptoms: set[str] = field(default_factory=set)
    medications: list[str] = field(default_factory=list)
    allergy_mentions: list[str] = field(default_factory=list)
    user_turns: int = 0

    def copy(self) -> "ConversationState":
        return ConversationState(
            symptoms=set(self.symptoms),
            medications=list(self.medications),
            allergy_mentions=list(self.allergy_mentions),
            user_turns=self.user_turns,
        )

    def clear(self) -> None:
        self.symptoms.clear()
        self.medications.clear()
        self.allergy_mentions.clear()
        self.user_turns = 0

    @property
    def is_empty(self) -> bool:
        return not (self.symptoms or self.medications or self.allergy_mentions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "symptoms": sorted(self.symptoms),
            "medications": list(self.medications),
            "allergy_mentions": list(self.allergy_mentions),
            "user_turns": self.user_turns,
        }
