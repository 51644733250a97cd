"""
Unit tests for `pipelines/rule_based` and the backend factory in `pipelines/__init__.py`.
"""

from unittest.mock import patch

import pytest
from prometheus_client import REGISTRY

from core.responses import GREETING
from pipelines import LLMPipeline, RuleBasedPipeline, get_backend, get_pipeline
from shared.models import Backend


def test_rule_based_reply():
    result = RuleBasedPipeline().process_message("hello", [], "id-1")
    assert result == {"reply": GREETING, "interaction_id": "id-1"}


def test_rule_based_uses_history():
    result = RuleBasedPipeline().process_message("summary", ["derivatives"], "id-2")
    assert result["reply"].startswith("Derivative summary:")


def test_pipeline_errors_are_counted_and_reraised():
    labels = {"type": "pipeline", "location": "rule_based"}
    before = REGISTRY.get_sample_value("chat_errors_total", labels) or 0.0

    pipeline = RuleBasedPipeline()
    with patch.object(pipeline.orchestrator, "reply", side_effect=ValueError("bad")):
        with pytest.raises(ValueError):
            pipeline.process_message("hello", [], "id-3")

    assert REGISTRY.get_sample_value("chat_errors_total", labels) == before + 1


def test_get_backend_defaults_to_rule_based():
    assert get_backend({}) is Backend.RULE_BASED
    assert get_backend({"assistant": {"backend": " LLM "}}) is Backend.LLM


def test_get_backend_rejects_unknown():
    with pytest.raises(ValueError, match="Unsupported assistant backend"):
        get_backend({"assistant": {"backend": "oracle"}})


def test_get_pipeline_builds_configured_backend():
    assert isinstance(get_pipeline({"assistant": {"backend": "rule_based"}}), RuleBasedPipeline)
    with patch("pipelines.llm.pipeline_llm.get_client"):
        assert isinstance(get_pipeline({"assistant": {"backend": "llm"}}), LLMPipeline)


def test_get_pipeline_reuses_built_pipeline():
    config = {"assistant": {"backend": "rule_based"}}
    assert get_pipeline(config) is get_pipeline(config)


def test_failed_build_is_not_cached():
    config = {"assistant": {"backend": "llm"}}
    with patch("pipelines.llm.pipeline_llm.get_client", side_effect=RuntimeError("no key")):
        with pytest.raises(RuntimeError):
            get_pipeline(config)
    with patch("pipelines.llm.pipeline_llm.get_client"):
        assert isinstance(get_pipeline(config), LLMPipeline)
