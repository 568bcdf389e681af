"""
Tests for the status counter.
"""

import threading

import pytest

from task_bridge.core.status_counter import StatusCounter
from task_bridge.io.schema import StatusCategory


def test_fresh_counter_is_all_zero():
    assert StatusCounter().snapshot() == {
        "applied": 0,
        "alreadyApplied": 0,
        "noLongerAvailable": 0,
        "fail": 0,
        "skipped": 0,
    }


@pytest.mark.parametrize("category", StatusCategory.names())
def test_increment_touches_only_its_category(category):
    counter = StatusCounter()
    before = counter.snapshot()

    counter.increment(category)

    after = counter.snapshot()
    assert after[category] == before[category] + 1
    assert {k: v for k, v in after.items() if k != category} == {
        k: v for k, v in before.items() if k != category
    }


@pytest.mark.parametrize("category", ["failed", "Applied", "", "unknown"])
def test_unknown_category_is_ignored(category):
    counter = StatusCounter()

    counter.increment(category)

    assert counter.snapshot() == StatusCounter().snapshot()


def test_snapshot_is_a_copy():
    counter = StatusCounter()
    snapshot = counter.snapshot()

    snapshot["applied"] = 99

    assert counter.snapshot()["applied"] == 0


def test_concurrent_increments_are_exact():
    counter = StatusCounter()

    def bump():
        for _ in range(500):
            counter.increment("applied")

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counter.snapshot()["applied"] == 4000
