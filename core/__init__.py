"""
core/__init__.py

Dialogue-state resolution for the rule-based study assistant:
- detection: keyword tables and the topic/mode detectors
- context: merging the current message with the recent history window
- responses: canned replies and the ordered decision table
- orchestrator: one reply per turn from the pieces above
"""

from .orchestrator import TurnOrchestrator

__all__ = ["TurnOrchestrator"]
