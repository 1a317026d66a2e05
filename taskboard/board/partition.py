"""Stage partitioner: groups tasks into one bucket per workflow stage."""

from typing import Dict, Iterable, List, Sequence

from taskboard.constants import STAGE_ORDER, DEFAULT_STAGE
from taskboard.core.models import Task


def effective_stage(task: Task) -> str:
    """Stage a task is shown under; a missing status counts as CREATED."""
    return task.status if task.status is not None else DEFAULT_STAGE


def partition(
    tasks: Iterable[Task],
    stages: Sequence[str] = STAGE_ORDER,
) -> Dict[str, List[Task]]:
    """
    Group tasks by stage.

    Args:
        tasks: Tasks in store order
        stages: Stages to produce buckets for, in display order

    Returns:
        Dict with one list per stage (insertion order follows ``stages``).
        Tasks keep their relative store order inside each bucket.
    """
    buckets: Dict[str, List[Task]] = {stage: [] for stage in stages}
    for task in tasks:
        bucket = buckets.get(effective_stage(task))
        if bucket is not None:
            bucket.append(task)
    return buckets
