"""
pipelines/rule_based/pipeline_rule_based.py

Rule-based pipeline: wraps the turn orchestrator from `core` in the common pipeline lifecycle.
"""

from typing import List

from core.orchestrator import TurnOrchestrator
from shared.models import Backend

from ..base import BasePipeline


class RuleBasedPipeline(BasePipeline):
    """Reply from the keyword tables and canned responses. Deterministic and stateless."""

    def setup(self) -> None:
        self.orchestrator = TurnOrchestrator()

    def get_pipeline_name(self) -> str:
        return Backend.RULE_BASED.value

    def _process_message_internal(self, message: str, history: List[str], interaction_id: str) -> str:
        return self.orchestrator.reply(message, history, interaction_id=interaction_id)
