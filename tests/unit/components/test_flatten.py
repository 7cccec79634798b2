from onepass import (
    RefCollector,
    Signal,
    concat_str,
    count,
    drive,
    flatten,
    sum_,
    to_list,
)
from tests.helpers.recorders import CountingProducer, Recorder, RefRecorder


# --- flatten ---


def test_flatten_feeds_elements_in_order():
    assert drive([[1, 2], [], [3]], to_list().flatten()) == [1, 2, 3]


def test_flatten_stops_in_the_middle_of_a_batch():
    batch = CountingProducer([3, 4, 5])
    producer = CountingProducer([[1, 2], batch, [6]])

    assert drive(producer, to_list().take(3).flatten()) == [1, 2, 3]
    assert batch.pulls == 1
    assert producer.pulls == 2


def test_flatten_reports_stop_for_an_already_done_collector():
    collector = flatten(to_list().take(0))
    assert collector.break_hint() is Signal.STOP
    assert collector.accept([1]) is Signal.STOP
    assert collector.finish() == []


def test_flatten_lends_elements_of_a_borrowed_batch():
    recorder = RefRecorder("inner", stop_after=3)
    collector = recorder.flatten()
    assert isinstance(collector, RefCollector)
    assert not isinstance(to_list().flatten(), RefCollector)

    assert collector.accept_ref([1, 2]) is Signal.CONTINUE
    assert collector.accept_ref([3, 4]) is Signal.STOP
    assert recorder.log == [
        ("inner", "accept_ref", 1),
        ("inner", "accept_ref", 2),
        ("inner", "accept_ref", 3),
    ]


def test_flatten_beside_a_batch_counter():
    batches = [[1, 2], [3]]
    assert drive(batches, count().then(sum_().flatten())) == (2, 6)


# --- flat_map ---


def test_flat_map_expands_each_item():
    assert drive(["a b", "c"], count().flat_map(str.split)) == 3
    assert drive(["ab", "c"], concat_str(sep="-").flat_map(list)) == "a-b-c"


def test_flat_map_stops_calling_func_once_done():
    calls = []

    def expand(n):
        calls.append(n)
        return range(n)

    producer = CountingProducer([2, 3, 4])
    assert drive(producer, to_list().take(3).flat_map(expand)) == [0, 1, 0]
    assert calls == [2, 3]
    assert producer.pulls == 2


def test_flat_map_is_not_reference_capable():
    assert not isinstance(count().flat_map(list), RefCollector)


# --- unbatching ---


def runs(inner, pair):
    value, times = pair
    return inner.collect_many([value] * times)


def test_unbatching_lets_func_feed_the_collector():
    assert drive([("a", 2), ("b", 1)], concat_str().unbatching(runs)) == "aab"


def test_unbatching_passes_on_the_signal_of_func():
    producer = CountingProducer([("a", 2), ("b", 3), ("c", 1)])
    collector = to_list().take(4).unbatching(runs)
    assert drive(producer, collector) == ["a", "a", "b", "b"]
    assert producer.pulls == 2


def test_unbatching_may_skip_the_collector():
    recorder = Recorder("inner")

    def only_positive(inner, n):
        if n > 0:
            return inner.accept(n)
        return Signal.CONTINUE

    assert drive([1, -2, 3], recorder.unbatching(only_positive)) == [1, 3]
