"""
pipelines/llm/__init__.py

Hosted LLM pipeline: forwards the user's message to an OpenAI-compatible completion API
with a fixed study-assistant system instruction and relays the model's text.
"""

from .pipeline_llm import LLMPipeline

__all__ = ['LLMPipeline']
