"""
Core Utilities Package

Serialization helpers for question records and session output.
"""

from .serialization import (
    deserialize_question,
    infer_scheme,
    serialize_answer_record,
    serialize_question,
    serialize_session,
)

__all__ = [
    "deserialize_question",
    "infer_scheme",
    "serialize_answer_record",
    "serialize_question",
    "serialize_session",
]
