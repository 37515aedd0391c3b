import os

import pytest

from meshui.input.linux import (
    KEYPAD,
    POINTER,
    LinuxInputDriver,
    glob_paths,
    keyboard_devices,
    pointer_devices,
)


def make_factory(works=True):
    calls = []

    def factory(kind, path):
        calls.append((kind, path))
        return object() if works else None

    return factory, calls


@pytest.fixture
def by_id(tmp_path):
    root = tmp_path / "by-id"
    root.mkdir()
    os.symlink("../event3", root / "usb-board-kbd-event-kbd")
    os.symlink("../event7", root / "usb-board-mouse-event-mouse")
    return root


def test_glob_paths_sorted(tmp_path):
    (tmp_path / "b.txt").write_text("")
    (tmp_path / "a.txt").write_text("")
    (tmp_path / "c.log").write_text("")
    found = glob_paths(str(tmp_path / "*.txt"))
    assert found == [str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]


def test_keyboard_devices(by_id):
    assert keyboard_devices(by_id) == ["event3"]


def test_pointer_devices(by_id):
    assert pointer_devices(by_id) == ["event7"]


def test_init_without_devices():
    factory, calls = make_factory()
    driver = LinuxInputDriver("", "", factory)
    driver.init()
    assert driver.keyboard_device == "none"
    assert driver.pointer_device == "none"
    assert calls == []


def test_use_keyboard_by_event_name():
    factory, calls = make_factory()
    driver = LinuxInputDriver("", "", factory)
    assert driver.use_keyboard_device("event4") is True
    assert calls == [(KEYPAD, "/dev/input/event4")]
    assert driver.keyboard_device == "event4"


def test_use_pointer_by_full_path(by_id):
    factory, calls = make_factory()
    driver = LinuxInputDriver("", "", factory)
    link = str(by_id / "usb-board-mouse-event-mouse")
    assert driver.use_pointer_device(link) is True
    assert calls == [(POINTER, link)]
    assert driver.pointer_device == "event7"


def test_failed_device_marks_none():
    factory, _ = make_factory(works=False)
    driver = LinuxInputDriver("", "", factory)
    assert driver.use_keyboard_device("event1") is False
    assert driver.keyboard_device == "none"
    assert driver.keyboard is None


def test_init_uses_configured_devices():
    factory, calls = make_factory()
    driver = LinuxInputDriver("event1", "event2", factory)
    driver.init()
    assert [kind for kind, _ in calls] == [KEYPAD, POINTER]
    assert driver.keyboard_device == "event1"
    assert driver.pointer_device == "event2"


def test_release_and_close():
    factory, _ = make_factory()
    driver = LinuxInputDriver("event1", "event2", factory)
    driver.init()
    assert driver.release_keyboard_device() is True
    assert driver.keyboard is None
    assert driver.keyboard_device == "none"
    driver.close()
    assert driver.pointer is None
    assert driver.pointer_device == "none"


def test_empty_name_rejected():
    factory, _ = make_factory()
    driver = LinuxInputDriver("", "", factory)
    with pytest.raises(ValueError):
        driver.use_keyboard_device("")


def test_custom_input_dir(tmp_path):
    factory, calls = make_factory()
    driver = LinuxInputDriver("", "", factory)
    driver.input_dir = str(tmp_path)
    driver.use_pointer_device("event9")
    assert calls == [(POINTER, os.path.join(str(tmp_path), "event9"))]