"""Core rules engine package for Nine Men's Morris."""

__all__ = [
    "board",
    "pieces",
    "actions",
    "mechanics",
    "state",
    "history",
    "outcome",
    "game",
    "notation",
    "rules_schema",
    "service",
]
