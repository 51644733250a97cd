"""
shared/__init__.py

Shared models and error types used across the core, pipelines and API layers.

- models: Topic/Mode enums, the dialogue state and the HTTP payload schemas
- errors: exceptions that carry their HTTP status classification
"""
