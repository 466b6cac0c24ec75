"""
Module: selection

Purpose:
    Session planning: picks a topic-balanced question set from the bank
    and orders it for presentation.

Key Functions:
    - plan_session(): Main entry point for planning
    - diversity_reorder(): Reduce consecutive same-topic questions

Key Classes:
    - SessionConfig: Planning configuration
    - SessionPlanner: Planning orchestrator
    - InsufficientData: No session can be planned

Used By:
    - session.controller: start_session()
    - cli: plan and run commands
"""

from .config import SessionConfig
from .diversity import count_adjacent_repeats, diversity_reorder
from .planner import InsufficientData, SessionPlanner, plan_session

__all__ = [
    "SessionConfig",
    "count_adjacent_repeats",
    "diversity_reorder",
    "InsufficientData",
    "SessionPlanner",
    "plan_session",
]
