"""
pipelines/__init__.py

Reply pipelines for the study assistant. Exactly one is active, chosen by CONFIG["assistant"]["backend"]:
- rule_based: keyword detection of topic/mode and canned replies (default)
- llm: pass-through to a hosted OpenAI-compatible completion API

Each pipeline follows the BasePipeline interface.
"""

from typing import Any, Dict

from shared.models import Backend

from .base import BasePipeline
from .llm import LLMPipeline
from .rule_based import RuleBasedPipeline

PIPELINES = {
    Backend.RULE_BASED: RuleBasedPipeline,
    Backend.LLM: LLMPipeline,
}


def get_backend(config: Dict[str, Any]) -> Backend:
    """
    Read the configured backend.

    Raises:
        ValueError: If `assistant.backend` is not one of the supported backends.
    """
    name = str(config.get("assistant", {}).get("backend", Backend.RULE_BASED.value)).strip().lower()
    try:
        return Backend(name)
    except ValueError:
        raise ValueError(f"Unsupported assistant backend: {name}") from None


# One pipeline per backend per process. Only successfully built pipelines are stored, so a missing
# API key keeps failing per request until it is configured.
_pipeline_cache: Dict[Backend, BasePipeline] = {}


def get_pipeline(config: Dict[str, Any]) -> BasePipeline:
    """
    Return the shared pipeline for the configured backend, building it on first use.

    Raises:
        ValueError: If the configured backend is unknown.
        MissingCredentialError: If the llm backend is selected and its API key is not set.
    """
    backend = get_backend(config)
    pipeline = _pipeline_cache.get(backend)
    if pipeline is None:
        pipeline = PIPELINES[backend]()
        _pipeline_cache[backend] = pipeline
    return pipeline


def reset_pipelines() -> None:
    """Drop the cached pipelines so the next request builds them again (e.g. after a config change)."""
    _pipeline_cache.clear()


__all__ = ['BasePipeline', 'LLMPipeline', 'RuleBasedPipeline', 'get_backend', 'get_pipeline', 'reset_pipelines']
