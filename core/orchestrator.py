"""
core/orchestrator.py

Turn orchestrator for the rule-based study assistant.

For every turn it:
1. Normalizes the client-supplied history
2. Resolves the effective topic and mode (current message first, then recent history)
3. Picks the reply from the response decision table

No state is kept between turns; two requests never influence each other.
"""

from typing import Iterable, Optional

from config.logging_config import get_logger
from monitoring.metrics import RESPONSE_RULE_COUNT

from .context import normalize_history, resolve_context
from .responses import clean_message, match_rule

logger = get_logger(__name__)


class TurnOrchestrator:
    """
    Produces one reply per (message, history) pair.

    The orchestrator is stateless, so a single instance can be shared by concurrent requests.
    """

    def reply(self, message: str, history: Optional[Iterable[str]] = None, interaction_id: str = "no_id") -> str:
        """
        Build the assistant reply for one turn.

        Args:
            message (str): The latest user message.
            history (Optional[Iterable[str]]): Earlier user messages, oldest first. Entries beyond the
                last six are ignored; non-string entries are dropped.
            interaction_id (str): Identifier used to correlate log lines for this turn.

        Returns:
            str: The reply text.
        """
        recent = normalize_history(history)
        state = resolve_context(message, recent)
        rule_name, responder = match_rule(state, clean_message(message))

        logger.info(
            "Resolved dialogue state",
            extra={
                'interaction_id': interaction_id,
                'history_len': len(recent),
                'rule': rule_name,
                **state.to_dict()
            }
        )
        RESPONSE_RULE_COUNT.labels(rule=rule_name).inc()
        return responder(state)
