"""
core/responses.py

Canned replies and the decision table that picks one.

RESPONSE_RULES is an ordered tuple of (predicate, responder) pairs evaluated top to bottom; the first
predicate that holds produces the reply. The last rule always matches, so `select_response` is total.

Only derivatives has explain/practice/summary bodies. Any other topic combined with a mode falls
through to the generic prompt until content for it is written.
"""

from typing import Callable, Tuple

from shared.models import DialogueState, Mode, Topic

GREETING_MESSAGES = ("hi", "hello")

GREETING = (
    "Hi! What are you studying today? (example: derivatives) "
    "And do you want explain, practice, or summary?"
)

DERIVATIVES_EXPLAIN = (
    "Derivatives tell you the *instant rate of change* (slope) of a function at a point.\n\n"
    "Quick intuition: if f(x) is position, then f′(x) is speed.\n\n"
    "Rules you must know:\n"
    "1) Power: d/dx(x^n) = n·x^(n−1)\n"
    "2) Constant: d/dx(c) = 0\n"
    "3) Sum: d/dx(f+g) = f′+g′\n"
    "4) Product: (fg)′ = f′g + fg′\n"
    "5) Quotient: (f/g)′ = (f′g − fg′)/g^2\n"
    "6) Chain: d/dx f(g(x)) = f′(g(x))·g′(x)\n\n"
    "Send ONE function and I’ll do it step-by-step (example: 3x^2+5x, or sin(x^2))."
)

DERIVATIVES_PRACTICE = (
    "Practice (reply with your answers):\n"
    "1) d/dx(5x^3)\n"
    "2) d/dx(x^2 + 4x + 7)\n"
    "3) d/dx(sin x)\n"
    "4) d/dx(sin(x^2))  (chain rule)\n"
)

DERIVATIVES_SUMMARY = (
    "Derivative summary:\n"
    "- Meaning: slope / rate of change\n"
    "- Power: (x^n)' = n x^(n−1)\n"
    "- Product: (fg)' = f'g + fg'\n"
    "- Quotient: (f/g)' = (f'g − fg')/g^2\n"
    "- Chain: f(g(x))' = f'(g(x)) g'(x)\n\n"
    "Want 5 quick examples to memorize?"
)

ASK_FOR_MODE = "Got it: **{topic}**. Do you want **explain**, **practice**, or a **summary**?"

ASK_FOR_TOPIC = "Cool — you want **{mode}**. What topic? (example: derivatives, integrals, limits)"

FALLBACK = "Tell me: (1) topic, and (2) explain/practice/summary. Example: `explain derivatives`."

Predicate = Callable[[DialogueState, str], bool]
Responder = Callable[[DialogueState], str]


def _is_greeting(state: DialogueState, clean_message: str) -> bool:
    return clean_message in GREETING_MESSAGES


def _is(topic: Topic, mode: Mode) -> Predicate:
    return lambda state, clean_message: state.topic is topic and state.mode is mode


def _topic_only(state: DialogueState, clean_message: str) -> bool:
    return state.topic is not None and state.mode is None


def _mode_only(state: DialogueState, clean_message: str) -> bool:
    return state.topic is None and state.mode is not None


def _always(state: DialogueState, clean_message: str) -> bool:
    return True


def _fixed(text: str) -> Responder:
    return lambda state: text


RESPONSE_RULES: Tuple[Tuple[str, Predicate, Responder], ...] = (
    ("greeting", _is_greeting, _fixed(GREETING)),
    ("derivatives_explain", _is(Topic.DERIVATIVES, Mode.EXPLAIN), _fixed(DERIVATIVES_EXPLAIN)),
    ("derivatives_practice", _is(Topic.DERIVATIVES, Mode.PRACTICE), _fixed(DERIVATIVES_PRACTICE)),
    ("derivatives_summary", _is(Topic.DERIVATIVES, Mode.SUMMARY), _fixed(DERIVATIVES_SUMMARY)),
    ("ask_for_mode", _topic_only, lambda state: ASK_FOR_MODE.format(topic=state.topic.value)),
    ("ask_for_topic", _mode_only, lambda state: ASK_FOR_TOPIC.format(mode=state.mode.value)),
    ("fallback", _always, _fixed(FALLBACK)),
)


def clean_message(message: str) -> str:
    """Trim and lower-case a message for exact-match checks such as greetings."""
    return message.strip().lower()


def match_rule(state: DialogueState, clean: str) -> Tuple[str, Responder]:
    """
    Find the first response rule that applies.

    Args:
        state (DialogueState): Effective topic and mode of the turn.
        clean (str): The trimmed, lower-cased current message.

    Returns:
        Tuple[str, Responder]: The rule name (used for logging) and its responder.
    """
    for name, predicate, responder in RESPONSE_RULES:
        if predicate(state, clean):
            return name, responder
    # Unreachable while the last rule is `_always`.
    raise LookupError("No response rule matched")


def select_response(state: DialogueState, clean: str) -> str:
    """Return the reply text for a resolved dialogue state and cleaned message."""
    _, responder = match_rule(state, clean)
    return responder(state)
