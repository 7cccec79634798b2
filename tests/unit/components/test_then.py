import pytest

from onepass import (
    NotRefCollectorError,
    RefCollector,
    Signal,
    count,
    drive,
    sum_,
    to_list,
)
from tests.helpers.recorders import CountingProducer, Recorder, RefRecorder


def test_then_length_and_items_in_one_pass():
    assert drive([1, 3, 2], count().then(to_list())) == (3, [1, 3, 2])


def test_then_offers_left_by_reference_before_right_by_value():
    log = []
    left = RefRecorder("left", log=log)
    right = Recorder("right", log=log)

    drive([1, 2], left.then(right))

    assert log == [
        ("left", "accept_ref", 1),
        ("right", "accept", 1),
        ("left", "accept_ref", 2),
        ("right", "accept", 2),
    ]


def test_right_sees_every_item_after_left_stops():
    log = []
    left = RefRecorder("left", stop_after=1, log=log)
    right = Recorder("right", log=log)

    assert drive([1, 2, 3], left.then(right)) == ([1], [1, 2, 3])
    assert [entry for entry in log if entry[0] == "left"] == [("left", "accept_ref", 1)]


def test_left_keeps_seeing_items_after_right_stops():
    producer = CountingProducer([1, 2, 3])
    left = RefRecorder("left")
    right = Recorder("right", stop_after=1)

    assert drive(producer, left.then(right)) == ([1, 2, 3], [1])
    assert producer.pulls == 3


def test_then_stops_only_when_both_branches_stop():
    collector = RefRecorder("left", stop_after=1).then(Recorder("right", stop_after=2))
    assert collector.accept("a") is Signal.CONTINUE
    assert collector.accept("b") is Signal.STOP


def test_then_short_circuits_the_driver():
    producer = CountingProducer()
    collector = count().take(2).then(to_list().take(4))
    assert drive(producer, collector) == (2, [0, 1, 2, 3])
    assert producer.pulls == 4


def test_then_finishes_each_branch_once():
    left, right = RefRecorder("left"), Recorder("right")
    collector = left.then(right)
    collector.accept(1)
    collector.finish()
    assert left.finish_calls == 1
    assert right.finish_calls == 1


def test_then_requires_a_reference_capable_left_branch():
    with pytest.raises(NotRefCollectorError):
        to_list().then(count())
    with pytest.raises(TypeError):
        to_list().then(count())


def test_then_is_reference_capable_when_both_branches_are():
    assert isinstance(count().then(sum_()), RefCollector)
    assert not isinstance(count().then(to_list()), RefCollector)

    collector = count().then(sum_())
    for item in (1, 2, 3):
        collector.accept_ref(item)
    assert collector.finish() == (3, 6)


def test_then_can_be_nested():
    collector = count().then(sum_().then(to_list()))
    assert drive([4, 5], collector) == (2, (9, [4, 5]))
