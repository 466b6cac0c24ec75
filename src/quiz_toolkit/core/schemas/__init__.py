"""
Schema Validation Package

Validation for raw configuration and question payloads.
"""

from .validator import ValidationError, validate_config, validate_question

__all__ = [
    "ValidationError",
    "validate_config",
    "validate_question",
]
