"""
Health endpoint for the study assistant server.

Liveness check at GET /api/health. Besides the static "ok" status it reports which reply backend is
configured and the application version, so a quick curl shows what a deployment is actually running.
It never builds a pipeline or touches the LLM provider, so it stays green even when the llm backend
is missing its API key. An unknown backend name is reported as "degraded" with the error, since every
chat request would fail with it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import APIRouter

from config import CONFIG
from pipelines import get_backend
from version import __version__

router = APIRouter()


@router.get("/health")
def health() -> Dict[str, Optional[str]]:
    """
    Return the health status payload.

    Returns:
        Dict[str, Optional[str]]: Keys "status", "backend", "version" and "timestamp" (UTC, ISO-8601), plus
        "error" when the configured backend is not supported.
    """
    payload = {
        "status": "ok",
        "version": __version__,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    try:
        payload["backend"] = get_backend(CONFIG).value
    except ValueError as e:
        payload["status"] = "degraded"
        payload["backend"] = None
        payload["error"] = str(e)
    return payload
