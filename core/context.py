"""
core/context.py

Resolve the effective topic and mode of a turn.

The assistant keeps no server-side memory. Context is re-derived on every turn from the history the
client sends back: the last HISTORY_WINDOW user messages are joined into one blob and run through the
same detectors as the current message. Whatever the current message says wins; history only fills
the gaps, and topic and mode are filled independently of each other.
"""

from typing import Iterable, Optional

from shared.models import DialogueState
from .detection import detect_mode, detect_topic

HISTORY_WINDOW = 6
HISTORY_SEPARATOR = " | "


def normalize_history(history: Optional[Iterable]) -> list:
    """
    Coerce client-supplied history into the list of strings inside the history window.

    Anything that is not a list or tuple is treated as empty history. The window is cut before
    non-string entries are dropped, so dropping them never pulls older messages into view.
    """
    if not isinstance(history, (list, tuple)):
        return []
    return [entry for entry in history[-HISTORY_WINDOW:] if isinstance(entry, str)]


def history_window(history: Iterable[str]) -> str:
    """Join the last HISTORY_WINDOW entries of `history` into a single text blob."""
    recent = list(history)[-HISTORY_WINDOW:]
    return HISTORY_SEPARATOR.join(recent)


def resolve_context(message: str, history: Iterable[str] = ()) -> DialogueState:
    """
    Merge the detections from the current message and the recent history.

    Args:
        message (str): The latest user message.
        history (Iterable[str]): Earlier user messages, oldest first.

    Returns:
        DialogueState: Message topic/mode where present, otherwise the ones found in the history window.
    """
    recent = history_window(history)

    topic = detect_topic(message)
    if topic is None:
        topic = detect_topic(recent)

    mode = detect_mode(message)
    if mode is None:
        mode = detect_mode(recent)

    return DialogueState(topic=topic, mode=mode)
