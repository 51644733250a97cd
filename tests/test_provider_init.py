"""
Tests for `llm_cloud/provider.py` – provider routing and credential validation.

The OpenAI constructor is patched, so building a client never opens a connection.
"""

from unittest.mock import patch

import pytest

from config import CONFIG
from llm_cloud.provider import (
    MissingCredentialError,
    get_client,
    require_any_env,
    validate_env_for_provider,
)


def test_require_any_env_returns_first_set(monkeypatch):
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.setenv("NEBIUS_API_KEY", "nb-key")
    assert require_any_env(["LLM_API_KEY", "NEBIUS_API_KEY"]) == ("NEBIUS_API_KEY", "nb-key")


def test_require_any_env_missing(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(MissingCredentialError) as exc_info:
        require_any_env(["OPENAI_API_KEY"])
    assert "Missing OPENAI_API_KEY" in str(exc_info.value)
    assert exc_info.value.var_names == ["OPENAI_API_KEY"]


def test_empty_value_counts_as_missing(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "")
    with pytest.raises(MissingCredentialError):
        validate_env_for_provider({"llm": {"provider": "openai"}})


def test_unsupported_provider():
    with pytest.raises(ValueError, match="Unsupported LLM provider"):
        validate_env_for_provider({"llm": {"provider": "carrier-pigeon"}})


@pytest.mark.parametrize("provider, env_var, expected_base_url", [
    ("openai", "OPENAI_API_KEY", "https://api.openai.com/v1"),
    ("nebius", "NEBIUS_API_KEY", CONFIG["llm"]["base_url"]),
])
def test_get_client_builds(provider, env_var, expected_base_url, monkeypatch):
    monkeypatch.setitem(CONFIG["llm"], "provider", provider)
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.setenv(env_var, "test-key")

    with patch("llm_cloud.provider.OpenAI") as mock_openai:
        client = get_client()

    assert client is mock_openai.return_value
    kwargs = mock_openai.call_args.kwargs
    assert kwargs["api_key"] == "test-key"
    assert kwargs["base_url"] == expected_base_url


def test_validate_env_returns_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert validate_env_for_provider({"llm": {"provider": "openai"}}) == "sk-test"


def test_get_client_reads_env_once(monkeypatch):
    monkeypatch.setitem(CONFIG["llm"], "provider", "openai")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    with patch("llm_cloud.provider.require_any_env", wraps=require_any_env) as spy, \
            patch("llm_cloud.provider.OpenAI"):
        get_client()

    assert spy.call_count == 1
