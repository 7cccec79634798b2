import copy

import pytest
from typeguard import TypeCheckError

from onepass import (
    AliasedCollectorError,
    RefCollector,
    Signal,
    concat_str,
    drive,
    fuse,
    sum_,
    to_list,
)
from onepass.components.fuse import Fuse
from tests.helpers.recorders import Recorder, RefRecorder


# --- fuse ---


def test_fuse_never_calls_a_stopped_collector_again():
    recorder = Recorder("inner", stop_after=1)
    fused = recorder.fuse()

    assert fused.accept(1) is Signal.STOP
    assert fused.accept(2) is Signal.STOP
    assert fused.stopped
    assert fused.break_hint() is Signal.STOP
    assert fused.finish() == [1]


def test_fuse_is_idempotent():
    fused = fuse(to_list())
    assert fuse(fused) is fused


def test_fuse_keeps_reference_capability():
    assert isinstance(fuse(RefRecorder()), RefCollector)
    assert isinstance(fuse(Recorder()), Fuse)
    assert not isinstance(fuse(Recorder()), RefCollector)



def test_fuse_treats_an_already_done_collector_as_stopped():
    recorder = RefRecorder("done", stop_after=0)
    fused = fuse(recorder)

    assert fused.stopped
    assert fused.accept_ref(1) is Signal.STOP
    assert recorder.log == []
    assert fused.finish() == []


def test_done_branch_is_never_fed():
    done = RefRecorder("done", stop_after=0)
    assert drive([1, 2, 3], done.tee(Recorder("live"))) == ([], [1, 2, 3])
    assert done.log == []

    done = RefRecorder("done", stop_after=0)
    assert drive([1, 2, 3], done.then(to_list())) == ([], [1, 2, 3])
    assert done.log == []

    done = Recorder("done", stop_after=0)
    assert drive([(1, "a")], done.unzip(to_list())) == ([], ["a"])


def test_fuse_validates_its_argument():
    with pytest.raises(TypeCheckError):
        fuse([1, 2])


# --- aliasing ---


def test_combinators_reject_the_same_instance_twice():
    shared = RefRecorder("shared")
    with pytest.raises(AliasedCollectorError):
        shared.tee(shared)
    with pytest.raises(AliasedCollectorError):
        shared.tee(RefRecorder("other"), shared)
    with pytest.raises(AliasedCollectorError):
        shared.tee_clone(shared)
    with pytest.raises(AliasedCollectorError):
        shared.tee_funnel(shared)
    with pytest.raises(AliasedCollectorError):
        shared.then(shared)
    with pytest.raises(AliasedCollectorError):
        shared.chain(shared)
    with pytest.raises(AliasedCollectorError):
        shared.unzip(shared)


def test_aliasing_is_reported_as_a_value_error():
    plain = to_list()
    with pytest.raises(ValueError, match="tee"):
        plain.tee(plain)

# --- cloning ---


def test_cloning_stores_a_copy_of_borrowed_items():
    item = [1, 2]
    collector = to_list().cloning()
    assert isinstance(collector, RefCollector)

    collector.accept_ref(item)
    item.append(3)
    assert collector.finish() == [[1, 2]]


def test_cloning_passes_owned_items_through():
    item = [1]
    collector = to_list().cloning()
    collector.accept(item)
    assert collector.finish()[0] is item


def test_cloning_with_shallow_copy():
    inner = [1]
    collector = to_list().cloning(clone=copy.copy)
    collector.accept_ref([inner])
    (stored,) = collector.finish()
    assert stored[0] is inner


def test_cloning_enables_then():
    assert drive([[1], [2]], to_list().cloning().then(to_list())) == ([[1], [2]], [[1], [2]])


# --- unzip ---


def test_unzip_splits_pairs():
    assert drive([(1, "a"), (2, "b")], sum_().unzip(concat_str())) == (3, "ab")


def test_unzip_stops_when_both_sides_stop():
    collector = to_list().take(1).unzip(to_list().take(2))
    assert collector.accept((1, "a")) is Signal.CONTINUE
    assert collector.accept((2, "b")) is Signal.STOP
    assert collector.finish() == ([1], ["a", "b"])


def test_unzip_reference_capability():
    assert isinstance(sum_().unzip(concat_str()), RefCollector)
    assert not isinstance(sum_().unzip(to_list()), RefCollector)


def test_unzip_lends_both_halves_of_a_borrowed_pair():
    log = []
    collector = RefRecorder("left", log=log).unzip(RefRecorder("right", log=log))

    assert collector.accept_ref((1, "a")) is Signal.CONTINUE
    assert collector.accept_ref((2, "b")) is Signal.CONTINUE
    assert log == [
        ("left", "accept_ref", 1),
        ("right", "accept_ref", "a"),
        ("left", "accept_ref", 2),
        ("right", "accept_ref", "b"),
    ]
    assert collector.finish() == ([1, 2], ["a", "b"])


def test_unzip_borrowed_pairs_stop_when_both_sides_stop():
    collector = RefRecorder("left", stop_after=1).unzip(RefRecorder("right", stop_after=2))
    assert collector.accept_ref((1, "a")) is Signal.CONTINUE
    assert collector.accept_ref((2, "b")) is Signal.STOP
    assert collector.finish() == ([1], ["a", "b"])
