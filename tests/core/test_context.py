"""
Unit tests for `core/context.py` – merging the current message with the recent history window.
"""

from core.context import HISTORY_WINDOW, history_window, normalize_history, resolve_context
from shared.models import DialogueState, Mode, Topic


def test_history_window_is_six_entries():
    assert HISTORY_WINDOW == 6


def test_history_window_joins_last_entries():
    history = [f"m{i}" for i in range(8)]
    assert history_window(history) == "m2 | m3 | m4 | m5 | m6 | m7"


def test_history_window_empty():
    assert history_window([]) == ""


def test_message_detection_takes_precedence_over_history():
    state = resolve_context("explain integrals", ["practice derivatives"])
    assert state == DialogueState(topic=Topic.INTEGRALS, mode=Mode.EXPLAIN)


def test_history_fills_missing_topic():
    state = resolve_context("give me practice questions", ["let's do derivatives"])
    assert state == DialogueState(topic=Topic.DERIVATIVES, mode=Mode.PRACTICE)


def test_topic_and_mode_fall_back_independently():
    state = resolve_context("limits", ["summary of derivatives"])
    assert state.topic is Topic.LIMITS
    assert state.mode is Mode.SUMMARY


def test_history_is_scanned_as_one_blob():
    # topic in one entry, mode in another; both are picked up from the joined window
    state = resolve_context("ok", ["statistics", "notes please"])
    assert state == DialogueState(topic=Topic.STATISTICS, mode=Mode.SUMMARY)


def test_entry_seven_from_end_is_ignored():
    history = ["derivatives"] + ["something else"] * HISTORY_WINDOW
    assert resolve_context("explain", history).topic is None


def test_entry_six_from_end_is_used():
    history = ["derivatives"] + ["something else"] * (HISTORY_WINDOW - 1)
    assert resolve_context("explain", history).topic is Topic.DERIVATIVES


def test_nothing_detected():
    assert resolve_context("hey", []) == DialogueState()


def test_normalize_history_non_list_is_empty():
    assert normalize_history(None) == []
    assert normalize_history("derivatives") == []
    assert normalize_history({"0": "derivatives"}) == []


def test_normalize_history_windows_before_dropping_non_strings():
    history = ["derivatives", 1, 2, 3, 4, 5, 6]
    assert normalize_history(history) == []
    assert resolve_context("practice", normalize_history(history)).topic is None


def test_normalize_history_drops_non_strings():
    assert normalize_history(["a", 1, None, "b", {"x": 1}]) == ["a", "b"]
    assert normalize_history(("a", "b")) == ["a", "b"]
