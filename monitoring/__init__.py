"""
Monitoring package initializer.

This package exposes Prometheus metrics and helper decorators for tracking chat turn
latency, pipeline processing time and error rates.
"""

from .metrics import (
    REQUEST_COUNT,
    REQUEST_LATENCY,
    ERROR_COUNT,
    PIPELINE_PROCESSING_TIME,
    LLM_REQUEST_TIME,
    RESPONSE_RULE_COUNT,
    track_latency,
    track_errors,
)

__all__ = [
    'REQUEST_COUNT',
    'REQUEST_LATENCY',
    'ERROR_COUNT',
    'PIPELINE_PROCESSING_TIME',
    'LLM_REQUEST_TIME',
    'RESPONSE_RULE_COUNT',
    'track_latency',
    'track_errors',
]
