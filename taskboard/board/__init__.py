"""
Board layer: stage partitioning, drop-event resolution and view snapshots.
"""

from taskboard.board.partition import partition, effective_stage
from taskboard.board.gesture import DropEvent, TransitionRequest, resolve_drop
from taskboard.board.view import BoardView, Column

__all__ = [
    "partition",
    "effective_stage",
    "DropEvent",
    "TransitionRequest",
    "resolve_drop",
    "BoardView",
    "Column",
]
