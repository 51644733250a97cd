"""
api/chat.py

The single chat endpoint of the study assistant.

Endpoints:
  - POST /chat: Receives {"message": str, "history": [str, ...]}, runs the configured reply pipeline
                (rule_based or llm) and returns {"reply": str}.

Every failure is converted into a JSON error body at this boundary; nothing escapes as an unhandled
exception:
  - 400 {"error": "Message is required."}             missing/null/empty/non-string message
  - 500 {"error": "Missing OPENAI_API_KEY. ...", ...}  llm backend without its API key
  - 500 {"error": "Server error", "details": "..."}    anything unexpected
"""

import asyncio
import json
import time
import uuid
from typing import Any, Dict

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from config import CONFIG
from config.logging_config import get_logger
from core.context import normalize_history
from llm_cloud.provider import MissingCredentialError
from monitoring.metrics import ERROR_COUNT, REQUEST_COUNT, REQUEST_LATENCY
from pipelines import get_pipeline
from shared.errors import ChatError, ConfigurationError, InvalidRequestError
from shared.models import ChatResponse, ErrorResponse

logger = get_logger(__name__)

router = APIRouter()

ENDPOINT = "/api/chat"


def generate_interaction_id() -> str:
    """Return a UUID4 string that correlates the log lines of one chat turn."""
    return str(uuid.uuid4())


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    A body that is not valid JSON, or is JSON but not an object, is treated as an empty payload so it
    fails message validation with a 400 instead of surfacing as a server error.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return {}
    return payload if isinstance(payload, dict) else {}


def validate_message(payload: Dict[str, Any]) -> str:
    """
    Return the payload's message.

    Raises:
        InvalidRequestError: If the message is missing, null, empty or not a string.
    """
    message = payload.get("message")
    if not message or not isinstance(message, str):
        raise InvalidRequestError()
    return message


def reply_delay_seconds() -> float:
    """Configured cosmetic delay before replying, in seconds. Zero or negative disables it."""
    try:
        delay_ms = int(CONFIG.get("chat", {}).get("reply_delay_ms", 0))
    except (TypeError, ValueError):
        delay_ms = 0
    return max(delay_ms, 0) / 1000.0


def error_response(error: ChatError) -> JSONResponse:
    body = ErrorResponse(error=error.message, details=error.details)
    return JSONResponse(body.model_dump(exclude_none=True), status_code=error.status_code)


@router.post("/chat")
async def handle_chat(request: Request) -> JSONResponse:
    """
    Process one chat turn.

    The payload is validated, the pipeline for the configured backend is built and asked for a reply,
    and the optional reply delay (CONFIG["chat"]["reply_delay_ms"]) is awaited before responding. The
    delay only exists so the UI's "Thinking..." indicator does not flicker; it does not block other requests.

    Args:
        request (Request): JSON body with a required "message" string and an optional "history" list
            of earlier user messages. A non-list history is treated as empty.

    Returns:
        JSONResponse: {"reply": str} with 200, or an error body with 400/500 as described in the module docstring.
    """
    interaction_id = generate_interaction_id()
    start_time = time.perf_counter()

    try:
        payload = await read_payload(request)
        message = validate_message(payload)
        history = normalize_history(payload.get("history"))

        logger.info(
            f"[handle_chat] Received message: '{message[:50]}'",
            extra={'interaction_id': interaction_id, 'history_len': len(history)}
        )

        try:
            pipeline = get_pipeline(CONFIG)
        except MissingCredentialError as e:
            raise ConfigurationError(str(e), details=", ".join(e.var_names)) from e

        result = pipeline.process_message(
            message=message,
            history=history,
            interaction_id=interaction_id
        )

        delay = reply_delay_seconds()
        if delay:
            await asyncio.sleep(delay)

        response = JSONResponse(ChatResponse(reply=result["reply"]).model_dump())

    except InvalidRequestError as e:
        logger.warning("[handle_chat] Rejected request without a usable message", extra={'interaction_id': interaction_id})
        ERROR_COUNT.labels(type='client', location='api.chat').inc()
        response = error_response(e)

    except ConfigurationError as e:
        logger.error(f"[handle_chat] Configuration error: {e.message}", extra={'interaction_id': interaction_id})
        ERROR_COUNT.labels(type='configuration', location='api.chat').inc()
        response = error_response(e)

    except Exception as e:
        logger.error(f"[handle_chat] Unexpected error: {e}", extra={'interaction_id': interaction_id}, exc_info=True)
        ERROR_COUNT.labels(type='server', location='api.chat').inc()
        response = error_response(ChatError("Server error", details=str(e) or type(e).__name__))

    REQUEST_COUNT.labels(endpoint=ENDPOINT, status=str(response.status_code)).inc()
    REQUEST_LATENCY.labels(endpoint=ENDPOINT).observe(time.perf_counter() - start_time)
    return response
