import pytest

from onepass import (
    NotRefCollectorError,
    RefCollector,
    Signal,
    concat_str,
    count,
    drive,
    sum_,
    to_list,
)
from tests.helpers.recorders import Recorder, RefRecorder


def double(x):
    return x * 2


# --- map ---


def test_map_transforms_before_delegating():
    assert drive([1, 2, 3], to_list().map(double)) == [2, 4, 6]


def test_map_is_transparent():
    mapped, plain = Recorder("mapped"), Recorder("plain")
    collector = mapped.map(double)
    for x in (0, 7, -3):
        assert collector.accept(x) is plain.accept(double(x))
    assert collector.finish() == plain.finish()


def test_map_preserves_stop_signalling():
    collector = to_list().take(2).map(str)
    assert drive(range(10), collector) == ["0", "1"]


def test_map_is_not_reference_capable():
    assert not isinstance(count().map(double), RefCollector)


# --- map_ref ---


def test_map_ref_derives_from_a_borrowed_item():
    collector = sum_().map_ref(len).then(to_list())
    assert drive(["ab", "c"], collector) == (3, ["ab", "c"])


def test_map_ref_is_reference_capable_and_path_independent():
    by_ref = to_list().map_ref(len)
    by_value = to_list().map_ref(len)
    assert isinstance(by_ref, RefCollector)

    for word in ("a", "bcd"):
        by_ref.accept_ref(word)
        by_value.accept(word)
    assert by_ref.finish() == by_value.finish() == [1, 3]


def test_map_ref_delegates_derived_value_by_value():
    recorder = Recorder("inner")
    collector = recorder.map_ref(len)
    collector.accept_ref("abc")
    assert recorder.log == [("inner", "accept", 3)]


# --- funnel ---


def test_funnel_lends_a_part_of_the_item():
    recorder = RefRecorder("inner")
    collector = recorder.funnel(lambda pair: pair[0])
    assert drive([("a", 1), ("b", 2)], collector) == ["a", "b"]
    assert recorder.log == [("inner", "accept_ref", "a"), ("inner", "accept_ref", "b")]


def test_funnel_requires_a_reference_capable_collector():
    with pytest.raises(NotRefCollectorError):
        to_list().funnel(lambda pair: pair[0])


def test_funnel_in_a_then_branch():
    collector = concat_str().funnel(lambda pair: pair[0]).then(to_list())
    assert drive([("a", 1), ("b", 2)], collector) == ("ab", [("a", 1), ("b", 2)])


# --- map_output ---


def test_map_output():
    assert drive([1, 2], count().map_output(str)) == "2"


def test_map_output_keeps_reference_capability():
    assert isinstance(count().map_output(str), RefCollector)
    assert not isinstance(to_list().map_output(len), RefCollector)


def test_map_output_lends_borrowed_items_unchanged():
    log = []
    collector = RefRecorder("inner", stop_after=2, log=log).map_output(len)

    assert collector.accept_ref("a") is Signal.CONTINUE
    assert collector.accept_ref("b") is Signal.STOP
    assert log == [("inner", "accept_ref", "a"), ("inner", "accept_ref", "b")]
    assert collector.finish() == 2
