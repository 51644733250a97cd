"""
provider.py – Build and return a configured OpenAI-compatible client for the hosted LLM backend
------------------------------------------------------------------------------------------------
This is the single place where the study assistant talks to an external LLM platform. Only the `llm`
backend uses it; the rule-based backend never imports a client.

• `get_client()` is a function, not a module-level singleton: nothing is built at import time and
  tests can patch it with a fake client.
• The provider is chosen by CONFIG["llm"]["provider"]:
    - "openai": OpenAI's official API, key in OPENAI_API_KEY
    - "nebius": Nebius OpenAI-compatible API, key in LLM_API_KEY or NEBIUS_API_KEY
  Unsupported providers raise ValueError.
• A missing key raises MissingCredentialError when the client is requested, so the server still
  starts (and the rule-based backend still works) without any secrets configured.
"""

import logging
import os
from typing import Dict, List, Tuple

from openai import OpenAI
from config import CONFIG

logger = logging.getLogger(__name__)

PROVIDER_ENV_VARS: Dict[str, List[str]] = {
    "openai": ["OPENAI_API_KEY"],
    "nebius": ["LLM_API_KEY", "NEBIUS_API_KEY"],
}

OPENAI_BASE_URL = "https://api.openai.com/v1"


class MissingCredentialError(RuntimeError):
    """Raised when none of the environment variables holding the provider API key is set."""

    def __init__(self, var_names: List[str]):
        self.var_names = var_names
        super().__init__(
            f"Missing {' or '.join(var_names)}. Set it in the environment or in a .env file in the project root."
        )


def require_any_env(var_names: List[str]) -> Tuple[str, str]:
    """
    Return the first of `var_names` that is set to a non-empty value.

    Only the variable name is ever logged, never the secret.

    Args:
        var_names (List[str]): Environment variable names, in order of preference.

    Returns:
        Tuple[str, str]: (selected_var_name, value)

    Raises:
        MissingCredentialError: If none of the variables is present and non-empty.
    """
    for var_name in var_names:
        value = os.getenv(var_name, "")
        if value:
            return var_name, value
    raise MissingCredentialError(var_names)


def _provider_name(config: Dict) -> str:
    return str(config.get("llm", {}).get("provider", "openai")).strip().lower()


def validate_env_for_provider(config: Dict) -> str:
    """
    Check that the API key for the configured provider is available and return it.

    Args:
        config (Dict): Configuration with an 'llm' section whose 'provider' is 'openai' or 'nebius'.

    Returns:
        str: The API key (never logged).

    Raises:
        ValueError: If the provider is not supported.
        MissingCredentialError: If the provider's API key is not set.
    """
    provider = _provider_name(config)
    if provider not in PROVIDER_ENV_VARS:
        raise ValueError(f"Unsupported LLM provider: {provider}")

    selected_var, api_key = require_any_env(PROVIDER_ENV_VARS[provider])
    logger.info("LLM provider selected: %s | using environment variable: %s", provider, selected_var)
    return api_key


def get_client() -> OpenAI:
    """
    Build an OpenAI SDK client for the configured provider.

    Returns:
        OpenAI: A ready-to-use client.

    Raises:
        MissingCredentialError: If the provider's API key is not set.
        ValueError: If an unsupported provider is configured.
    """
    api_key = validate_env_for_provider(CONFIG)

    llm_config = CONFIG.get("llm", {})
    provider = _provider_name(CONFIG)

    if provider == "nebius":
        base_url = llm_config.get("base_url", "https://api.studio.nebius.com/v1/")
    else:
        base_url = OPENAI_BASE_URL
    logger.info("Building LLM client | provider=%s base_url=%s", provider, base_url)

    return OpenAI(
        base_url=base_url,
        api_key=api_key,
        timeout=llm_config.get("timeout", 30),
    )
