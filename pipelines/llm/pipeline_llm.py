"""
pipelines/llm/pipeline_llm.py

Hosted LLM pipeline implementation.

The user's message is sent verbatim, after the study-assistant system instruction loaded from
`config/study_assistant_system_prompt.txt`, to the model configured under
CONFIG["llm"]["models"]["study_assistant"]. The model's text is returned as the reply. History is not
forwarded; each turn is answered on its own.

The OpenAI client is built in `setup()`, so a missing API key surfaces as `MissingCredentialError`
when the pipeline is created for a request, not when the server starts.
"""

from typing import List

from config.logging_config import get_logger
from llm_cloud.provider import get_client
from monitoring.metrics import LLM_REQUEST_TIME
from shared.models import Backend

from ..base import BasePipeline

logger = get_logger(__name__)


class LLMPipeline(BasePipeline):
    """
    Pipeline that relays the message to a hosted OpenAI-compatible chat completion API.

    Notes:
    - No tools and no retrieval: the model answers from the system instruction and the message alone.
    - No retries. A failing API call propagates to the route, which reports it as a server error.
    """

    def setup(self) -> None:
        """
        Build the LLM client and load the system instruction and model settings from config.
        """
        self.client = get_client()
        self.system_prompt = self.config['study_assistant_message']
        self.model_config = self.config["llm"]["models"]["study_assistant"]

        logger.info(
            "Pipeline setup complete",
            extra={
                'pipeline_name': self.get_pipeline_name(),
                'model_name': self.model_config["name"]
            }
        )

    def get_pipeline_name(self) -> str:
        return Backend.LLM.value

    def _process_message_internal(self, message: str, history: List[str], interaction_id: str) -> str:
        """
        Send the message to the model and return its text.

        Args:
            message (str): User's question, forwarded verbatim
            history (List[str]): Ignored by this pipeline
            interaction_id (str): Unique identifier for this turn

        Returns:
            str: The model's reply, or an empty string if the model returned no text content
        """
        model_name = self.model_config["name"]
        settings = self.model_config.get("settings", {})

        messages = [
            {"role": "system", "content": self.system_prompt},
            {"role": "user", "content": message},
        ]

        logger.info(
            "Making LLM request",
            extra={
                'interaction_id': interaction_id,
                'pipeline_name': self.get_pipeline_name(),
                'model': model_name,
                'message_preview': message[:50]
            }
        )

        with LLM_REQUEST_TIME.labels(model=model_name).time():
            response = self.client.chat.completions.create(
                model=model_name,
                messages=messages,
                max_tokens=settings.get("max_tokens", 1024),
                temperature=settings.get("temperature", 0.3),
                top_p=settings.get("top_p", 0.95),
            )

        return response.choices[0].message.content or ""
