"""
Transition control for the task board.

Main exports:
- TransitionController: Optimistic stage transitions with reload rollback
- TransitionOutcome: Result of a transition request
"""

from taskboard.controller.transition import TransitionController, TransitionOutcome

__all__ = [
    "TransitionController",
    "TransitionOutcome",
]
