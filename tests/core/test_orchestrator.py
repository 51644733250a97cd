"""
Unit tests for `core/orchestrator.py` – TurnOrchestrator end to end over the core modules.

No collaborators are mocked: the orchestrator is a pure function of (message, history), so these tests
double as the end-to-end conversation scenarios for the rule-based assistant.
"""

import pytest

from core.orchestrator import TurnOrchestrator
from core.responses import DERIVATIVES_PRACTICE, GREETING, FALLBACK


@pytest.fixture
def orchestrator():
    return TurnOrchestrator()


def test_explain_derivatives(orchestrator):
    reply = orchestrator.reply("explain derivatives", [])
    assert reply.startswith("Derivatives tell you the *instant rate of change*")


def test_practice_uses_topic_from_history(orchestrator):
    reply = orchestrator.reply("give me practice questions", ["let's do derivatives"])
    assert reply == DERIVATIVES_PRACTICE


def test_topic_only_asks_for_mode(orchestrator):
    reply = orchestrator.reply("derivatives", [])
    assert "**derivatives**" in reply
    for mode in ("explain", "practice", "summary"):
        assert mode in reply


def test_mode_only_asks_for_topic(orchestrator):
    reply = orchestrator.reply("summary", [])
    assert "What topic?" in reply
    assert "summary" in reply


def test_hello(orchestrator):
    assert orchestrator.reply("hello", []) == GREETING


@pytest.mark.parametrize("message", ["hi", "Hi ", "  HELLO  "])
def test_greeting_ignores_history(orchestrator, message):
    assert orchestrator.reply(message, ["explain derivatives", "practice"]) == GREETING


def test_history_defaults_to_empty(orchestrator):
    assert orchestrator.reply("what should I do") == FALLBACK


def test_non_list_history_is_ignored(orchestrator):
    assert orchestrator.reply("practice", "derivatives") == orchestrator.reply("practice", [])


def test_turns_are_independent(orchestrator):
    first = orchestrator.reply("explain derivatives", [])
    orchestrator.reply("summary of statistics", ["limits"])
    assert orchestrator.reply("explain derivatives", []) == first


def test_non_string_entries_do_not_widen_the_window(orchestrator):
    reply = orchestrator.reply("practice", ["let's do derivatives", 1, 2, 3, 4, 5, 6])
    assert reply != DERIVATIVES_PRACTICE
    assert "What topic?" in reply


def test_old_history_is_forgotten(orchestrator):
    history = ["let's do derivatives"] + ["ok"] * 6
    reply = orchestrator.reply("practice", history)
    assert reply != DERIVATIVES_PRACTICE
    assert "What topic?" in reply
