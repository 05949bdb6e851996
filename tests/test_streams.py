# Tests for events, observables and operators

import pytest

from pushstream import (
    Event,
    EventKind,
    EventRecorder,
    Observable,
    SessionObserver,
    StreamError,
    TranscriptProjection,
    describe_failure,
    operators,
)


def collect(observable):
    recorder = EventRecorder()
    observable.subscribe(recorder)
    return recorder.events


# ========== Event Tests ==========

class TestEvent:
    def test_constructors(self):
        """Test each constructor builds the matching shape."""
        assert Event.next(1).kind == EventKind.NEXT
        assert Event.next(1).value == 1
        assert Event.completed().kind == EventKind.COMPLETED
        assert Event.error("boom").kind == EventKind.ERROR
        assert Event.error("boom").message == "boom"

    def test_terminal_flags(self):
        """Test only completed and error are terminal."""
        assert not Event.next(0).is_terminal
        assert Event.completed().is_terminal
        assert Event.error("x").is_terminal
        assert Event.error("x").is_error
        assert Event.completed().is_completed

    def test_rendering(self):
        """Test the human-readable rendering."""
        assert str(Event.next(1)) == "next(1)"
        assert str(Event.next("1")) == 'next("1")'
        assert str(Event.completed()) == "completed"
        assert str(Event.error("message")) == 'error("message")'

    def test_equality(self):
        """Test events compare by value."""
        assert Event.next(1) == Event.next(1)
        assert Event.next(1) != Event.next("1")
        assert Event.completed() == Event.completed()

    def test_error_requires_string(self):
        """Test error messages must be text."""
        with pytest.raises(TypeError):
            Event.error(42)

    def test_serialization(self):
        """Test to_dict() and from_dict()."""
        assert Event.next(3).to_dict() == {"kind": "next", "value": 3}
        assert Event.completed().to_dict() == {"kind": "completed"}
        assert Event.error("bad").to_dict() == {"kind": "error", "message": "bad"}

        for event in (Event.next([1, 2]), Event.completed(), Event.error("bad")):
            assert Event.from_dict(event.to_dict()) == event

    def test_from_dict_rejects_unknown_kind(self):
        """Test that unknown kinds raise ValueError."""
        with pytest.raises(ValueError):
            Event.from_dict({"kind": "maybe"})
        with pytest.raises(ValueError):
            Event.from_dict({})

    def test_from_dict_rejects_malformed_input(self):
        """Test non-mapping input and non-text messages raise ValueError."""
        with pytest.raises(ValueError):
            Event.from_dict(["kind", "next"])
        with pytest.raises(ValueError):
            Event.from_dict(None)
        with pytest.raises(ValueError):
            Event.from_dict({"kind": "error", "message": 5})


# ========== Observable Tests ==========

class TestFromSequence:
    def test_empty_sequence_only_completes(self):
        """Test from_sequence([]) delivers exactly [completed]."""
        assert collect(Observable.from_sequence([])) == [Event.completed()]

    def test_values_then_completed(self):
        """Test from_sequence([1, 2, 3]) delivers the values in order."""
        assert collect(Observable.from_sequence([1, 2, 3])) == [
            Event.next(1),
            Event.next(2),
            Event.next(3),
            Event.completed(),
        ]

    def test_resubscribe_is_independent(self):
        """Test two subscriptions produce identical, separate sequences."""
        source = Observable.from_sequence([1, 2, 3])
        first = EventRecorder()
        second = EventRecorder()

        source.subscribe(first)
        source.subscribe(second)

        assert first.events == second.events
        assert first.count() == 4

    def test_one_shot_iterator_replays(self):
        """Test a generator input is captured once and replayed."""
        source = Observable.from_sequence(n * 10 for n in range(3))

        assert collect(source) == collect(source)
        recorder = EventRecorder()
        source.subscribe(recorder)
        assert recorder.values == [0, 10, 20]

    def test_empty_and_failed(self):
        """Test the convenience constructors."""
        assert collect(Observable.empty()) == [Event.completed()]
        assert collect(Observable.failed("nope")) == [Event.error("nope")]


class TestFromHandler:
    def test_handler_sequence_is_reproduced(self):
        """Test a handler's four events arrive exactly as emitted."""
        def routine(observer):
            observer(Event.next(1))
            observer(Event.next(2))
            observer(Event.next(3))
            observer(Event.completed())

        assert collect(Observable.from_handler(routine)) == [
            Event.next(1),
            Event.next(2),
            Event.next(3),
            Event.completed(),
        ]

    def test_silent_handler_delivers_nothing(self):
        """Test a routine that never calls its observer is legal."""
        recorder = EventRecorder()
        Observable.from_handler(lambda observer: None).subscribe(recorder)

        assert recorder.count() == 0
        assert not recorder.is_terminated

    def test_lazy_until_subscribe(self):
        """Test the routine runs once per subscribe, not at construction."""
        calls = []

        def routine(observer):
            calls.append(1)
            observer(Event.completed())

        source = Observable.from_handler(routine)
        assert calls == []

        source.subscribe(EventRecorder())
        source.subscribe(EventRecorder())
        assert len(calls) == 2

    def test_events_after_terminal_are_dropped(self):
        """Test nothing follows the first terminal event."""
        def routine(observer):
            observer(Event.next(1))
            observer(Event.completed())
            observer(Event.next(2))
            observer(Event.error("late"))
            observer(Event.completed())

        assert collect(Observable.from_handler(routine)) == [
            Event.next(1),
            Event.completed(),
        ]

    def test_raising_routine_becomes_error_event(self):
        """Test an exception in the routine is delivered as an error."""
        def routine(observer):
            observer(Event.next(1))
            raise RuntimeError("producer broke")

        assert collect(Observable.from_handler(routine)) == [
            Event.next(1),
            Event.error("producer broke"),
        ]

    def test_raise_after_terminal_is_swallowed(self):
        """Test a routine failing after completion does not add events."""
        def routine(observer):
            observer(Event.completed())
            raise RuntimeError("too late")

        assert collect(Observable.from_handler(routine)) == [Event.completed()]


class TestSessionObserver:
    def test_stops_after_terminal(self):
        """Test the guard reports and enforces termination."""
        recorder = EventRecorder()
        session = SessionObserver(recorder)

        session(Event.next("a"))
        assert not session.stopped
        session(Event.error("x"))
        assert session.stopped
        session(Event.next("b"))

        assert recorder.events == [Event.next("a"), Event.error("x")]


# ========== Operator Tests ==========

class TestMap:
    def test_map_to_string(self):
        """Test from_sequence([1, 2, 3]).map(str)."""
        assert collect(Observable.from_sequence([1, 2, 3]).map(str)) == [
            Event.next("1"),
            Event.next("2"),
            Event.next("3"),
            Event.completed(),
        ]

    def test_function_form(self):
        """Test operators.map matches the method form."""
        source = Observable.from_sequence([1, 2])
        assert collect(operators.map(source, lambda n: n * n)) == collect(source.map(lambda n: n * n))

    def test_error_passes_through(self):
        """Test upstream errors reach the observer unchanged."""
        def routine(observer):
            observer(Event.next(1))
            observer(Event.error("upstream"))

        mapped = Observable.from_handler(routine).map(lambda n: n + 1)
        assert collect(mapped) == [Event.next(2), Event.error("upstream")]

    def test_transform_applied_once_per_value(self):
        """Test transform is called exactly once per next, in order."""
        seen = []

        def transform(n):
            seen.append(n)
            return n

        collect(Observable.from_sequence([3, 1, 2]).map(transform))
        assert seen == [3, 1, 2]

    def test_transform_failure_becomes_error(self):
        """Test a raising transform ends the session with one error."""
        seen = []

        def transform(n):
            seen.append(n)
            if n == 2:
                raise ValueError("cannot map 2")
            return n

        events = collect(Observable.from_sequence([1, 2, 3]).map(transform))

        assert events == [Event.next(1), Event.error("cannot map 2")]
        assert seen == [1, 2]

    def test_failure_without_message_uses_class_name(self):
        """Test exceptions with no text are described by type."""
        def transform(n):
            raise KeyError

        events = collect(Observable.from_sequence([1]).map(transform))
        assert events == [Event.error("KeyError")]


class TestFilter:
    def test_filter_odd(self):
        """Test from_sequence([1, 2, 3]).filter(odd)."""
        assert collect(Observable.from_sequence([1, 2, 3]).filter(lambda n: n % 2 != 0)) == [
            Event.next(1),
            Event.next(3),
            Event.completed(),
        ]

    def test_filter_everything_out(self):
        """Test completion still arrives when no value survives."""
        assert collect(Observable.from_sequence([2, 4]).filter(lambda n: n % 2)) == [
            Event.completed()
        ]

    def test_predicate_failure_becomes_error(self):
        """Test a raising predicate ends the session with one error."""
        def predicate(n):
            return 10 / n > 1

        events = collect(Observable.from_sequence([5, 0, 1]).filter(predicate))
        assert events == [Event.next(5), Event.error("division by zero")]

    def test_error_passes_through(self):
        """Test upstream errors reach the observer unchanged."""
        filtered = Observable.failed("down").filter(lambda n: True)
        assert collect(filtered) == [Event.error("down")]


class TestChaining:
    def test_map_filter_map(self):
        """Test a deeper chain keeps order and the terminal event."""
        chain = (
            Observable.from_sequence(range(1, 7))
            .filter(lambda n: n % 2 == 0)
            .map(lambda n: n * 10)
            .filter(lambda n: n != 40)
            .map(str)
        )

        assert collect(chain) == [Event.next("20"), Event.next("60"), Event.completed()]

    def test_chain_is_lazy(self):
        """Test no operator runs before the outermost subscribe."""
        calls = []
        chain = Observable.from_sequence([1, 2]).map(lambda n: calls.append(n) or n)

        assert calls == []
        chain.subscribe(EventRecorder())
        chain.subscribe(EventRecorder())
        assert calls == [1, 2, 1, 2]

    def test_failure_mid_chain_is_single_terminal(self):
        """Test a failure in an inner hop yields exactly one terminal event."""
        def hop(n):
            if n == 2:
                raise ValueError("bad hop")
            return n

        chain = (
            Observable.from_sequence([1, 2, 3])
            .map(hop)
            .filter(lambda n: True)
            .map(lambda n: n)
        )

        events = collect(chain)
        assert [e for e in events if e.is_terminal] == [Event.error("bad hop")]
        assert events[-1].is_error

    def test_downstream_failure_is_reported_once(self):
        """Test an observer raising on a value still sees one terminal event."""
        received = []

        def observer(event):
            received.append(event)
            if event == Event.next(2):
                raise RuntimeError("consumer broke")

        Observable.from_sequence([1, 2, 3]).map(lambda n: n).subscribe(observer)

        assert received == [Event.next(1), Event.next(2), Event.error("consumer broke")]


# ========== Consumer Tests ==========

class TestEventRecorder:
    def test_values_and_terminal(self):
        """Test the recorder's views of a finished sequence."""
        recorder = EventRecorder()
        Observable.from_sequence(["a", "b"]).subscribe(recorder)

        assert recorder.values == ["a", "b"]
        assert recorder.terminal_event == Event.completed()
        assert recorder.is_terminated
        recorder.raise_for_error()

    def test_raise_for_error(self):
        """Test StreamError carries the error message."""
        recorder = EventRecorder()
        Observable.failed("broken pipe").subscribe(recorder)

        with pytest.raises(StreamError) as exc_info:
            recorder.raise_for_error()
        assert exc_info.value.message == "broken pipe"

    def test_clear(self):
        """Test clearing for reuse."""
        recorder = EventRecorder()
        Observable.empty().subscribe(recorder)
        recorder.clear()
        assert recorder.count() == 0


class TestTranscriptProjection:
    def test_plain_transcript(self):
        """Test one rendered event per line."""
        events = collect(Observable.from_sequence([1, 2, 3]).map(str))
        assert TranscriptProjection().project(events) == '\n'.join([
            'next("1")',
            'next("2")',
            'next("3")',
            'completed',
        ])

    def test_numbered_with_header(self):
        """Test numbering and the summary header."""
        events = collect(Observable.failed("bad"))
        transcript = TranscriptProjection(numbered=True, header=True)(events)

        assert transcript.splitlines() == [
            "=== 0 value(s), error ===",
            '  1: error("bad")',
        ]

    def test_open_sequence_header(self):
        """Test a sequence without a terminal event is reported open."""
        transcript = TranscriptProjection(header=True).project([Event.next(1)])
        assert transcript.splitlines()[0] == "=== 1 value(s), open ==="


class TestDescribeFailure:
    def test_uses_message(self):
        assert describe_failure(ValueError("bad input")) == "bad input"

    def test_falls_back_to_type(self):
        assert describe_failure(RuntimeError()) == "RuntimeError"
