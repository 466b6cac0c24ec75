"""
Module: session

Purpose:
    Explicit session state and its lifecycle operations.

Key Functions:
    - start_session(): Plan a session
    - submit_answer(): Answer the current question
    - restart_session(): Start over with the same inputs

Key Classes:
    - Session: One quiz run
    - SessionError: Invalid session operation
"""

from .controller import Session, SessionError, restart_session, start_session, submit_answer

__all__ = [
    "Session",
    "SessionError",
    "restart_session",
    "start_session",
    "submit_answer",
]
