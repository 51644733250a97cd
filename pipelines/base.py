"""
Base class for the study assistant's reply pipelines.

A pipeline turns one user message (plus the recent history) into a reply string. The two concrete
pipelines, rule-based and hosted LLM, share the lifecycle defined here: setup once, then
`process_message` per turn with uniform logging, latency metrics and error counting.
"""

from abc import ABC, abstractmethod
import logging
from typing import Dict, List
from monitoring.metrics import track_latency, track_errors, PIPELINE_PROCESSING_TIME
from config import CONFIG

logger = logging.getLogger(__name__)

class BasePipeline(ABC):
    """
    Abstract base class for all study assistant pipelines.

    Concrete pipelines override `setup`, `get_pipeline_name` and `_process_message_internal`.
    """

    def __init__(self):
        """
        Initialize the namespaced logger and configuration, then run pipeline-specific setup.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.config = CONFIG

        self.setup()

    @abstractmethod
    def setup(self) -> None:
        """
        Set up the pipeline with necessary resources (e.g. an LLM client or the turn orchestrator).
        """
        pass

    @abstractmethod
    def get_pipeline_name(self) -> str:
        """
        Get the name of the pipeline.

        Returns:
            str: The pipeline's name for use in logging and metrics.
        """
        pass

    @track_latency(PIPELINE_PROCESSING_TIME, lambda self: {'pipeline_name': self.get_pipeline_name()})
    @track_errors('pipeline', lambda self: self.get_pipeline_name())
    def process_message(self, message: str, history: List[str], interaction_id: str) -> Dict[str, str]:
        """
        Process a user message through the pipeline.

        Args:
            message (str): The user's latest message
            history (List[str]): Earlier user messages, oldest first
            interaction_id (str): Unique identifier for this turn

        Returns:
            Dict[str, str]: {'reply': str, 'interaction_id': str}
        """
        self._log_processing_start(message, interaction_id)

        try:
            reply = self._process_message_internal(
                message=message,
                history=history,
                interaction_id=interaction_id
            )
        except Exception:
            self._log_processing_end(interaction_id, success=False)
            raise

        self._log_processing_end(interaction_id, success=True)
        return {"reply": reply, "interaction_id": interaction_id}

    @abstractmethod
    def _process_message_internal(self, message: str, history: List[str], interaction_id: str) -> str:
        """
        Pipeline-specific reply generation.

        Returns:
            str: The reply text.
        """
        pass

    def _log_processing_start(self, message: str, interaction_id: str) -> None:
        pipeline_name = self.get_pipeline_name()
        self.logger.info(
            f"[{pipeline_name}] Starting message processing: '{message[:50]}'",
            extra={'interaction_id': interaction_id, 'pipeline_name': pipeline_name}
        )

    def _log_processing_end(self, interaction_id: str, success: bool = True) -> None:
        pipeline_name = self.get_pipeline_name()
        status = "completed successfully" if success else "failed"
        self.logger.info(
            f"[{pipeline_name}] Message processing {status}",
            extra={'interaction_id': interaction_id, 'pipeline_name': pipeline_name}
        )
