# Minimal example of using pushstream
from pushstream import Event, EventRecorder, InteractionSource, Observable, TranscriptProjection

# Example: values from a fixed sequence, mapped to strings
Observable.from_sequence([1, 2, 3]).map(str).subscribe(print)

# Example: keep only odd numbers
Observable.from_sequence([1, 2, 3]).filter(lambda n: n % 2 != 0).subscribe(print)


# Example: a hand-written source
def count_to_three(observer):
    observer(Event.next(1))
    observer(Event.next(2))
    observer(Event.next(3))
    observer(Event.completed())


recorder = EventRecorder()
Observable.from_handler(count_to_three).subscribe(recorder)
print(TranscriptProjection(numbered=True, header=True).project(recorder.events))

# Example: an unbounded stream of button taps
button = InteractionSource("button")
button.observable().map(lambda _: "tapped").subscribe(print)
button.tap()
button.tap()
