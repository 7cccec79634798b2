import pytest
from typeguard import TypeCheckError

from onepass import RefCollector, Signal, count, drive, to_list
from tests.helpers.recorders import CountingProducer, RefRecorder


def test_take_limits_the_collector():
    producer = CountingProducer()
    assert drive(producer, to_list().take(3)) == [0, 1, 2]
    assert producer.pulls == 3


def test_take_signals_stop_on_the_last_item():
    collector = to_list().take(2)
    assert collector.accept("a") is Signal.CONTINUE
    assert collector.accept("b") is Signal.STOP
    # Fed again after STOP, the item is ignored.
    assert collector.accept("c") is Signal.STOP
    assert collector.finish() == ["a", "b"]


def test_take_zero_is_done_before_any_item():
    collector = to_list().take(0)
    assert collector.break_hint() is Signal.STOP
    assert collector.accept("x") is Signal.STOP
    assert collector.finish() == []


def test_take_keeps_reference_capability():
    recorder = RefRecorder("inner")
    collector = recorder.take(1)
    assert isinstance(collector, RefCollector)
    collector.accept_ref("x")
    assert recorder.log == [("inner", "accept_ref", "x")]


def test_take_validates_count():
    with pytest.raises(ValueError):
        count().take(-1)
    with pytest.raises(TypeCheckError):
        count().take("3")


def test_take_while():
    producer = CountingProducer([1, 2, 3, 4, 1])
    assert drive(producer, to_list().take_while(lambda x: x < 3)) == [1, 2]
    assert producer.pulls == 3


def test_take_while_ignores_items_after_failing():
    collector = to_list().take_while(lambda x: x > 0)
    assert collector.accept(1) is Signal.CONTINUE
    assert collector.accept(0) is Signal.STOP
    assert collector.break_hint() is Signal.STOP
    assert collector.accept(5) is Signal.STOP
    assert collector.finish() == [1]


def test_take_while_keeps_reference_capability():
    assert isinstance(count().take_while(bool), RefCollector)
    assert not isinstance(to_list().take_while(bool), RefCollector)


def test_take_while_lends_borrowed_items_while_the_predicate_holds():
    recorder = RefRecorder("inner")
    collector = recorder.take_while(lambda x: x < 3)

    assert collector.accept_ref(1) is Signal.CONTINUE
    assert collector.accept_ref(2) is Signal.CONTINUE
    assert collector.accept_ref(3) is Signal.STOP
    assert collector.accept_ref(1) is Signal.STOP
    assert recorder.log == [("inner", "accept_ref", 1), ("inner", "accept_ref", 2)]
    assert collector.finish() == [1, 2]
