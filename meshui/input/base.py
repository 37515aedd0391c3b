"""Common types shared by all input drivers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Optional


class Key(IntEnum):
    """Navigation and editing key codes understood by the UI toolkit."""

    HOME = 2
    END = 3
    BACKSPACE = 8
    NEXT = 9
    ENTER = 10
    PREV = 11
    UP = 17
    DOWN = 18
    RIGHT = 19
    LEFT = 20
    ESC = 27
    DEL = 127


class IndevState(IntEnum):
    """Pressed state reported by an input device."""

    RELEASED = 0
    PRESSED = 1


@dataclass
class InputData:
    """One sample read from an input device."""

    state: IndevState = IndevState.RELEASED
    key: int = 0
    enc_diff: int = 0
    btn_id: int = 0


class InputDriver:
    """Base input driver holding the devices it has registered."""

    _driver: ClassVar[Optional["InputDriver"]] = None

    def __init__(self) -> None:
        self.keyboard: Any = None
        self.pointer: Any = None
        self.encoder: Any = None
        self.button: Any = None
        self.input_group: Any = None

    @classmethod
    def instance(cls) -> "InputDriver":
        """Return the shared driver, creating it on first use."""
        if InputDriver._driver is None:
            InputDriver._driver = cls()
        return InputDriver._driver

    def release_keyboard_device(self) -> bool:
        """Drop the keyboard device; return whether one was held."""
        held = self.keyboard is not None
        self.keyboard = None
        return held

    def release_pointer_device(self) -> bool:
        """Drop the pointer device; return whether one was held."""
        held = self.pointer is not None
        self.pointer = None
        return held

    def close(self) -> None:
        """Release every device still held."""
        if self.keyboard is not None:
            self.release_keyboard_device()
        if self.pointer is not None:
            self.release_pointer_device()

    def __enter__(self) -> "InputDriver":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()