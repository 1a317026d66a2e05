"""
Tests for grouping tasks into stage buckets.
"""

import random

from taskboard.board.partition import partition, effective_stage
from taskboard.constants import STAGE_ORDER


class TestPartition:
    """Test partition() bucket contents."""

    def test_one_bucket_per_stage_in_order(self, sample_tasks):
        buckets = partition(sample_tasks)
        assert list(buckets.keys()) == list(STAGE_ORDER)

    def test_missing_status_goes_to_created(self, sample_tasks):
        """Test that a task without status is shown under CREATED."""
        buckets = partition(sample_tasks)
        assert [t.id for t in buckets["CREATED"]] == [1, 3]
        assert [t.id for t in buckets["IN_PROGRESS"]] == [2]
        assert buckets["RESOLVED"] == []
        assert [t.id for t in buckets["DONE"]] == [4]

    def test_stored_status_not_rewritten(self, sample_tasks):
        buckets = partition(sample_tasks)
        untitled = [t for t in buckets["CREATED"] if t.id == 3][0]
        assert untitled.status is None

    def test_every_task_in_exactly_one_bucket(self, make_task):
        """Test the no-loss, no-duplicate property over random boards."""
        rng = random.Random(7)
        choices = list(STAGE_ORDER) + [None]
        for _ in range(50):
            tasks = [make_task(i, rng.choice(choices)) for i in range(rng.randint(0, 30))]
            buckets = partition(tasks)
            placed = [t.id for bucket in buckets.values() for t in bucket]
            assert sorted(placed) == [t.id for t in tasks]
            for task in tasks:
                in_created = task in buckets["CREATED"]
                assert in_created == (task.status in (None, "CREATED"))

    def test_bucket_order_follows_store_order(self, make_task):
        tasks = [make_task(5, "DONE"), make_task(2, "DONE"), make_task(9, "DONE")]
        assert [t.id for t in partition(tasks)["DONE"]] == [5, 2, 9]

    def test_custom_stage_order(self, sample_tasks):
        buckets = partition(sample_tasks, ("DONE", "CREATED"))
        assert list(buckets.keys()) == ["DONE", "CREATED"]
        assert [t.id for t in buckets["CREATED"]] == [1, 3]

    def test_empty_input(self):
        assert partition([]) == {stage: [] for stage in STAGE_ORDER}


class TestStageHelpers:
    def test_effective_stage(self, make_task):
        assert effective_stage(make_task(1, None)) == "CREATED"
        assert effective_stage(make_task(1, "DONE")) == "DONE"
