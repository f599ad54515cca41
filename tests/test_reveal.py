"""
Tests for the clue reveal state machine.
"""

from jeopardy.board import Clue, RevealState
from jeopardy.reveal import PLACEHOLDER, advance, display_text


def test_advance_sequence_is_question_then_answer_then_stuck():
    clue = Clue(question="Hamlet author", answer="Shakespeare")

    steps = [advance(clue) for _ in range(5)]

    assert [s.state for s in steps] == [
        RevealState.QUESTION, RevealState.ANSWER, RevealState.ANSWER,
        RevealState.ANSWER, RevealState.ANSWER,
    ]
    assert [s.text for s in steps] == [
        "Hamlet author", "Shakespeare", "Shakespeare", "Shakespeare", "Shakespeare",
    ]
    assert [s.changed for s in steps] == [True, True, False, False, False]
    assert [s.retired for s in steps] == [False, True, True, True, True]
    assert clue.reveal is RevealState.ANSWER


def test_display_text_follows_state():
    clue = Clue(question="q", answer="a")
    assert display_text(clue) == PLACEHOLDER == "?"
    advance(clue)
    assert display_text(clue) == "q"
    advance(clue)
    assert display_text(clue) == "a"


def test_advance_only_touches_the_given_clue():
    first = Clue(question="q1", answer="a1")
    second = Clue(question="q2", answer="a2")
    advance(first)
    assert second.reveal is RevealState.HIDDEN
