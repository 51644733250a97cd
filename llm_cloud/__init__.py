"""Hosted LLM infrastructure for the `llm` backend.

    • provider.py – client construction, provider routing and credential validation
"""

from .provider import MissingCredentialError, get_client

__all__ = ["MissingCredentialError", "get_client"]
