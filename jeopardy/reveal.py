"""
Click-to-reveal state machine for a single clue.

    HIDDEN -> QUESTION -> ANSWER (terminal)
"""

from __future__ import annotations
from dataclasses import dataclass

from .board import Clue, RevealState

PLACEHOLDER = "?"


@dataclass(frozen=True)
class RevealStep:
    """Outcome of advancing one clue."""
    state: RevealState
    text: str
    changed: bool      # False means the caller should leave the cell alone
    retired: bool      # True once the clue has reached its terminal state


def display_text(clue: Clue) -> str:
    """Text a rendering sink should show for the clue's current state."""
    if clue.reveal is RevealState.QUESTION:
        return clue.question
    if clue.reveal is RevealState.ANSWER:
        return clue.answer
    return PLACEHOLDER


def advance(clue: Clue) -> RevealStep:
    """Move `clue` one step forward and return what to display."""
    if clue.reveal is RevealState.HIDDEN:
        clue.reveal = RevealState.QUESTION
        return RevealStep(RevealState.QUESTION, clue.question, changed=True, retired=False)

    if clue.reveal is RevealState.QUESTION:
        clue.reveal = RevealState.ANSWER
        return RevealStep(RevealState.ANSWER, clue.answer, changed=True, retired=True)

    return RevealStep(clue.reveal, display_text(clue), changed=False, retired=True)
