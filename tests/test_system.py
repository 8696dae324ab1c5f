import pytest

from vega.collision import ColliderManager, FloatRect
from vega.events import EventType, InputEvent
from vega.layer import Layer
from vega.system import System, WindowInfo, begin_process


@pytest.fixture(autouse=True)
def _clean_colliders():
    manager = ColliderManager.get_instance()
    for collider in manager:
        manager.detach(collider)
    yield
    for collider in manager:
        manager.detach(collider)


class FakeWindow:
    def __init__(self, events=None, open_frames=None):
        self.created = 0
        self.released = 0
        self.batches = list(events or [])
        self.open_frames = open_frames
        self.frames = []

    def create(self):
        self.created += 1

    def release(self):
        self.released += 1

    def is_open(self):
        return self.open_frames is None or len(self.frames) < self.open_frames

    def poll_events(self, queue):
        if self.batches:
            for event in self.batches.pop(0):
                queue.push(event)

    def present(self, frame):
        self.frames.append((frame.clear_color, list(frame.items)))


class Recorder(Layer):
    def __init__(self, label, log=None, consume=False):
        super().__init__()
        self.label = label
        self.log = log if log is not None else []
        self.consume = consume
        self.attached = 0
        self.detached = 0
        self.updates = []
        self.hits = []

    @property
    def name(self):
        return self.label

    def on_attach(self):
        self.attached += 1

    def on_detach(self):
        self.detached += 1

    def on_event(self, event):
        self.log.append((self.label, event.get()))
        if self.consume:
            event.use()

    def on_update(self, dt):
        self.updates.append(dt)

    def on_draw(self, device):
        device.draw(("draw", self.label))

    def on_ui(self, device):
        device.draw(("ui", self.label))

    def on_collide(self, layer, class_name):
        self.hits.append((layer, class_name))


def make_system(window=None):
    system = System()
    window = window or FakeWindow()
    system.init(WindowInfo(640, 480, "Test"), window)
    return system, window


def test_init_records_size_and_creates_window():
    system, window = make_system()
    assert (system.width, system.height) == (640, 480)
    assert window.created == 1


def test_second_init_is_ignored():
    system, _ = make_system()
    other = FakeWindow()
    system.init(WindowInfo(100, 100, "Other"), other)
    assert other.created == 0
    assert system.width == 640


def test_step_without_window_raises():
    with pytest.raises(RuntimeError):
        System().step(0.1)


def test_attach_is_deferred_until_step():
    system, _ = make_system()
    layer = Recorder("A")
    system.attach_layer(layer)
    assert layer.attached == 1
    assert system.find_layer("A") is None
    system.step(0.0)
    assert system.find_layer("A") is layer


def test_find_layer_missing_returns_none():
    system, _ = make_system()
    system.attach_layer(Recorder("A"))
    system.step(0.0)
    assert system.find_layer("Nope") is None


def test_overlays_precede_layers():
    system, _ = make_system()
    system.attach_layer(Recorder("a"))
    system.attach_overlay(Recorder("o1"))
    system.attach_overlay(Recorder("o2"))
    system.step(0.0)
    assert [layer.name for layer in system.layers] == ["o1", "o2", "a"]


def test_used_event_stops_propagation():
    press = InputEvent(EventType.KEY_PRESSED, "enter")
    system, _ = make_system(FakeWindow(events=[[press]]))
    log = []
    system.attach_layer(Recorder("first", log, consume=True))
    system.attach_layer(Recorder("second", log))
    system.step(0.0)
    assert log == [("first", press)]


def test_unused_event_reaches_every_layer():
    press = InputEvent(EventType.KEY_PRESSED, "left")
    system, _ = make_system(FakeWindow(events=[[press]]))
    log = []
    system.attach_layer(Recorder("first", log))
    system.attach_layer(Recorder("second", log))
    system.step(0.0)
    assert [label for label, _ in log] == ["first", "second"]


def test_update_receives_dt():
    system, _ = make_system()
    layer = Recorder("A")
    system.attach_layer(layer)
    system.step(0.25)
    system.step(0.5)
    assert layer.updates == [0.25, 0.5]


def test_frame_draws_world_then_ui():
    system, window = make_system()
    system.attach_layer(Recorder("a"))
    system.attach_layer(Recorder("b"))
    system.step(0.0)
    color, items = window.frames[0]
    assert color == "red"
    assert items == [("draw", "a"), ("draw", "b"), ("ui", "a"), ("ui", "b")]


def test_pause_sets_time_scale():
    system, _ = make_system()
    system.set_pause(True)
    assert system.is_paused()
    assert system.time_scale == 0.0
    system.step(0.1)
    assert system.time_scale == 0.0
    system.set_pause(False)
    assert system.time_scale == 1.0


def test_reset_request_stops_run():
    system, window = make_system()
    system.set_reset(True)
    system.run()
    assert window.frames == []
    assert system.is_reset()


def test_exit_program_stops_run_without_reset():
    system, window = make_system()
    system.exit_program()
    system.run()
    assert window.frames == []
    assert not system.is_reset()


def test_run_until_window_closes():
    system, window = make_system(FakeWindow(open_frames=3))
    system.run()
    assert len(window.frames) == 3


def test_reset_without_request_keeps_layers():
    system, _ = make_system()
    layer = Recorder("A")
    system.attach_layer(layer)
    system.step(0.0)
    system.reset()
    assert system.find_layer("A") is layer


def test_reset_clears_layers_and_resources(tmp_path):
    path = tmp_path / "tex.png"
    path.write_bytes(b"\x89PNG")
    system, _ = make_system()
    layer = Recorder("A")
    system.attach_layer(layer)
    system.step(0.0)
    system.textures.load(str(path))
    assert system.textures.get(str(path)) == b"\x89PNG"
    system.set_pause(True)
    system.set_reset(True)
    before = Layer.get_count()
    system.reset()
    assert Layer.get_count() == before - 1
    assert system.find_layer("A") is None
    assert len(system.textures) == 0
    assert not system.is_reset()
    assert not system.is_paused()
    assert system.time_scale == 1.0


def test_detach_layer_removes_after_step():
    system, _ = make_system()
    layer = Recorder("A")
    system.attach_layer(layer)
    system.step(0.0)
    system.detach_layer(layer)
    assert system.find_layer("A") is layer
    system.step(0.0)
    assert system.find_layer("A") is None
    assert layer.detached == 2


def test_colliding_layers_are_notified_and_boxes_drawn():
    system, window = make_system()
    a = Recorder("A")
    b = Recorder("B")
    for layer in (a, b):
        system.attach_layer(layer)
        layer.activate_collider(True, layer.name)
    a.set_collider((0.0, 0.0), FloatRect(0.0, 0.0, 10.0, 10.0))
    b.set_collider((0.0, 0.0), FloatRect(5.0, 5.0, 10.0, 10.0))
    a.set_collider_display_mode(True)
    system.step(0.0)
    assert (b, "B") in a.hits
    assert (a, "A") in b.hits
    _, items = window.frames[0]
    assert a.collider in items
    assert b.collider not in items


def test_get_instance_shares_state():
    System.get_instance().set_pause(True)
    try:
        assert System.get_instance().is_paused() is True
    finally:
        System.get_instance().set_pause(False)
    assert System.get_instance().is_paused() is False


def test_begin_process_repeats_runtime_while_reset():
    runs = []

    class Driver(Layer):
        @property
        def name(self):
            return "Driver"

        def on_update(self, dt):
            system = System.get_instance()
            if len(runs) == 1:
                system.set_reset(True)
            else:
                system.exit_program()

    def runtime():
        runs.append(True)
        System.get_instance().attach_layer(Driver())

    window = FakeWindow()
    system = begin_process(lambda: WindowInfo(320, 240, "Game"), runtime, window)
    assert system is System.get_instance()
    assert len(runs) == 2
    assert window.created == 1
    assert len(window.frames) == 2
    assert not system.is_reset()