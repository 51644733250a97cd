"""
Core metrics and monitoring decorators for the study assistant.

This module defines Prometheus metrics and decorators for tracking:
- Chat request latency and counts per status
- Error rates per failure class and component
- Pipeline processing time
- Hosted LLM latency
- Which response rule the rule-based assistant picked
"""

import time
import functools
import logging
from typing import Optional, Callable, Union
from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)

# Request metrics
REQUEST_COUNT = Counter(
    'chat_requests_total',
    'Total number of chat requests',
    ['endpoint', 'status']
)

REQUEST_LATENCY = Histogram(
    'chat_request_duration_seconds',
    'Chat request duration in seconds, including the configured reply delay',
    ['endpoint'],
    buckets=[0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, float("inf")]
)

# Error metrics
ERROR_COUNT = Counter(
    'chat_errors_total',
    'Total number of errors',
    ['type', 'location']  # type: 'client', 'configuration', 'server', 'pipeline'; location: component
)

# Pipeline metrics
PIPELINE_PROCESSING_TIME = Histogram(
    'pipeline_processing_duration_seconds',
    'Time spent producing a reply in a pipeline',
    ['pipeline_name'],
    buckets=[0.001, 0.01, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, float("inf")]
)

# External API metrics
LLM_REQUEST_TIME = Histogram(
    'llm_request_duration_seconds',
    'Time spent waiting for the hosted LLM API',
    ['model'],
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, float("inf")]
)

RESPONSE_RULE_COUNT = Counter(
    'response_rule_total',
    'Number of replies produced by each rule-based response rule',
    ['rule']
)


def track_latency(metric: Histogram, labels: Optional[Callable] = None) -> Callable:
    """
    A decorator factory that tracks the execution time of a function using a Prometheus Histogram.

    Args:
        metric (Histogram): The Prometheus Histogram to record the timing in
        labels (Callable, optional): Function of the first positional argument (usually `self`)
            that returns the metric labels dictionary

    Returns:
        Callable: The decorated function
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start_time
                if labels and args:
                    metric.labels(**labels(args[0])).observe(duration)
                else:
                    metric.observe(duration)

                logger.debug(
                    f"Function {func.__name__} execution time: {duration:.4f} seconds",
                    extra={'duration': duration, 'function': func.__name__}
                )
        return wrapper
    return decorator


def track_errors(error_type: str, location: Union[str, Callable]) -> Callable:
    """
    A decorator factory that counts exceptions raised by a function and re-raises them.

    Args:
        error_type (str): Failure class (e.g., 'pipeline', 'server')
        location (Union[str, Callable]): Component name, or a function of the first positional
            argument returning it (so instance methods can label by pipeline name)

    Returns:
        Callable: The decorated function

    Example:
        @track_errors('pipeline', lambda self: self.get_pipeline_name())
        def process_message(self, message: str):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                where = location(args[0]) if callable(location) and args else location
                ERROR_COUNT.labels(type=error_type, location=where).inc()
                logger.error(
                    f"Error in {where} ({error_type}): {e}",
                    extra={'error_type': error_type, 'location': where},
                    exc_info=True
                )
                raise
        return wrapper
    return decorator
