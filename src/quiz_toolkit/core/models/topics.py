"""
Module: topics

Purpose:
    Provides the Topic dataclass - a tagged knowledge area that questions
    belong to. Topics are loaded once from the quiz configuration and never
    change for the lifetime of the process.

Key Classes:
    - Topic: Immutable topic record (id, display name, icon)

Used By:
    - core.models.questions.Question (via topic ids)
    - scoring.aggregator: per-topic tallies
    - output: report rendering
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Topic:
    """
    Knowledge area a question can be tagged with (immutable).

    Attributes:
        id: Unique topic identifier like "basics"
        name: Display name like "Python Basics"
        icon: Short display glyph shown next to the name

    Example:
        >>> Topic("basics", "Python Basics", "*").label
        '* Python Basics'
    """

    id: str
    name: str
    icon: str = ""

    def __post_init__(self) -> None:
        """Validate topic on construction."""
        if not self.id:
            raise ValueError("topic id must be non-empty")

    @property
    def label(self) -> str:
        """Icon and name joined for display."""
        return f"{self.icon} {self.name}".strip()

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "icon": self.icon}

    @classmethod
    def from_dict(cls, data: dict) -> Topic:
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            icon=data.get("icon", ""),
        )
