"""
pipelines/rule_based/__init__.py

Rule-based pipeline: keyword detection of topic and mode plus canned replies.
Needs no network access and no credentials.
"""

from .pipeline_rule_based import RuleBasedPipeline

__all__ = ['RuleBasedPipeline']
