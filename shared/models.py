"""
shared/models.py

Common data models and type definitions used across the study assistant.

The enums and the dialogue state are plain value types: they are created for a single chat turn and
discarded afterwards. The Pydantic models describe the JSON shapes returned by the HTTP layer so the
frontend can rely on a stable contract:

   success: {"reply": str}
   failure: {"error": str, "details": str | absent}
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum
from pydantic import BaseModel, Field


class Topic(Enum):
    """
    Academic subjects the rule-based assistant can recognise.

    The value is the display text echoed back to the user, which is why linear algebra
    keeps its space instead of a snake_case identifier.
    """
    DERIVATIVES = "derivatives"
    INTEGRALS = "integrals"
    LIMITS = "limits"
    LINEAR_ALGEBRA = "linear algebra"
    STATISTICS = "statistics"


class Mode(Enum):
    """
    Interaction styles a student can ask for:
    - EXPLAIN: walk through the idea and the rules
    - PRACTICE: a short list of exercises
    - SUMMARY: a compact cheat sheet
    """
    EXPLAIN = "explain"
    PRACTICE = "practice"
    SUMMARY = "summary"


class Backend(Enum):
    """Reply backends selectable through `assistant.backend`."""
    RULE_BASED = "rule_based"
    LLM = "llm"


@dataclass(frozen=True)
class DialogueState:
    """
    Effective topic and mode for one turn, after merging the message with recent history.

    Either field may be None; absence is a valid outcome of detection, not an error.
    """
    topic: Optional[Topic] = None
    mode: Optional[Mode] = None

    def to_dict(self) -> dict:
        """
        Flatten the state for structured logging.

        Returns:
            dict: {'topic': str | None, 'mode': str | None}
        """
        return {
            'topic': self.topic.value if self.topic else None,
            'mode': self.mode.value if self.mode else None,
        }


class ChatResponse(BaseModel):
    """Successful turn: the assistant's reply text."""
    reply: str = Field(..., description="Assistant reply for this turn")


class ErrorResponse(BaseModel):
    """
    Failed turn.

    `details` is only set for server-class failures and carries the underlying exception text
    so that the failure is visible to the caller and never silently swallowed.
    """
    error: str = Field(..., description="Human-readable error message")
    details: Optional[str] = Field(None, description="Underlying failure description")
