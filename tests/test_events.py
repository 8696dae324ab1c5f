from vega.events import Event, EventQueue, EventType, InputEvent


class _Recorder:
    def __init__(self, log, name, consume=False):
        self.log = log
        self.name = name
        self.consume = consume

    def on_event(self, event):
        self.log.append((self.name, event.get()))
        if self.consume:
            event.use()


def test_event_wraps_source_and_starts_unused():
    raw = InputEvent(EventType.KEY_PRESSED, "Return")
    event = Event(raw)
    assert event.get() == raw
    assert event.used is False


def test_use_marks_event():
    event = Event(InputEvent(EventType.CLOSED))
    event.use()
    assert event.used is True


def test_copying_an_event_keeps_used_flag():
    original = Event(InputEvent(EventType.KEY_RELEASED, "Left"))
    original.use()
    copy = Event(original)
    assert copy.used is True
    assert copy.get() == original.get()


def test_queue_push_len_and_iteration_order():
    queue = EventQueue()
    assert len(queue) == 0
    first = InputEvent(EventType.KEY_PRESSED, "Left")
    second = InputEvent(EventType.KEY_PRESSED, "Right")
    queue.push(first)
    queue.push(second)
    assert len(queue) == 2
    assert [e.get() for e in queue] == [first, second]


def test_dispatch_reaches_every_layer_when_unused():
    log = []
    queue = EventQueue()
    raw = InputEvent(EventType.KEY_PRESSED, "Escape")
    queue.push(raw)
    queue.dispatch_to([_Recorder(log, "a"), _Recorder(log, "b")])
    assert log == [("a", raw), ("b", raw)]


def test_dispatch_stops_after_event_is_used():
    log = []
    queue = EventQueue()
    raw = InputEvent(EventType.KEY_PRESSED, "Return")
    queue.push(raw)
    layers = [_Recorder(log, "a", consume=True), _Recorder(log, "b")]
    queue.dispatch_to(layers)
    assert log == [("a", raw)]
    assert all(e.used for e in queue)


def test_consumption_of_one_event_does_not_block_the_next():
    log = []
    queue = EventQueue()
    first = InputEvent(EventType.KEY_PRESSED, "Left")
    second = InputEvent(EventType.KEY_RELEASED, "Left")
    queue.push(first)
    queue.push(second)
    queue.dispatch_to([_Recorder(log, "a", consume=True), _Recorder(log, "b")])
    assert log == [("a", first), ("a", second)]