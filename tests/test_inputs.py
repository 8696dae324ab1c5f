from vega.events import EventType, InputEvent
from vega.inputs import InputManager


def _press(key):
    return InputEvent(EventType.KEY_PRESSED, key)


def _release(key):
    return InputEvent(EventType.KEY_RELEASED, key)


def test_fresh_manager_reports_nothing():
    inputs = InputManager()
    assert inputs.get_key("Left") is False
    assert inputs.get_key_down("Left") is False
    assert inputs.get_key_up("Left") is False


def test_press_sets_down_and_held():
    inputs = InputManager()
    inputs.update_event(_press("Left"))
    assert inputs.get_key_down("Left") is True
    assert inputs.get_key("Left") is True
    assert inputs.get_key_up("Left") is False


def test_clear_keeps_held_but_drops_down():
    inputs = InputManager()
    inputs.update_event(_press("Left"))
    inputs.clear()
    assert inputs.get_key_down("Left") is False
    assert inputs.get_key("Left") is True


def test_repeated_press_while_held_is_not_a_new_down():
    inputs = InputManager()
    inputs.update_event(_press("Right"))
    inputs.clear()
    inputs.update_event(_press("Right"))
    assert inputs.get_key_down("Right") is False
    assert inputs.get_key("Right") is True


def test_release_sets_up_and_clears_held():
    inputs = InputManager()
    inputs.update_event(_press("Return"))
    inputs.clear()
    inputs.update_event(_release("Return"))
    assert inputs.get_key("Return") is False
    assert inputs.get_key_up("Return") is True
    inputs.clear()
    assert inputs.get_key_up("Return") is False


def test_other_event_types_are_ignored():
    inputs = InputManager()
    inputs.update_event(InputEvent(EventType.CLOSED))
    inputs.update_event(InputEvent(EventType.MOUSE_MOVED, "Left"))
    assert inputs.get_key("Left") is False
    assert inputs.get_key_down("Left") is False


def test_keys_are_tracked_independently():
    inputs = InputManager()
    inputs.update_event(_press("Left"))
    inputs.update_event(_press("Right"))
    inputs.update_event(_release("Left"))
    assert inputs.get_key("Right") is True
    assert inputs.get_key("Left") is False
    assert inputs.get_key_down("Left") is True
    assert inputs.get_key_up("Left") is True