"""Rotary encoder and trackball input driver."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

from meshui.input.base import IndevState, InputData, InputDriver, Key

_REPEAT_MS = 250


def _millis() -> int:
    return int(time.monotonic() * 1000)


class EncoderAction(Enum):
    NONE = 0
    PRESSED = 1
    UP = 2
    DOWN = 3
    LEFT = 4
    RIGHT = 5


class EncoderInputDriver(InputDriver):
    """Encoder driver.

    Type 1 polls left/right/button lines directly. Type 3 is a trackball or
    joystick whose directions are delivered through the handler methods.
    Pin readers return the line level; the button is active low.
    """

    def __init__(
        self,
        encoder_type: int = 3,
        clock: Optional[Callable[[], int]] = None,
        read_button: Optional[Callable[[], int]] = None,
        read_left: Optional[Callable[[], int]] = None,
        read_right: Optional[Callable[[], int]] = None,
    ) -> None:
        super().__init__()
        self.encoder_type = encoder_type
        self._clock = clock or _millis
        self._read_button = read_button
        self._read_left = read_left
        self._read_right = read_right
        self.action = EncoderAction.NONE
        self._prevkey = 0
        self._last_pressed: Optional[int] = None

    def press(self) -> None:
        self.action = EncoderAction.PRESSED

    def up(self) -> None:
        self.action = EncoderAction.UP

    def down(self) -> None:
        self.action = EncoderAction.DOWN

    def left(self) -> None:
        self.action = EncoderAction.LEFT

    def right(self) -> None:
        self.action = EncoderAction.RIGHT

    def read(self) -> InputData:
        """Sample the encoder."""
        data = InputData()
        if self.encoder_type == 1:
            self._read_polled(data)
        elif self.encoder_type == 3:
            self._read_trackball(data)
        return data

    def _read_polled(self, data: InputData) -> None:
        if self._read_left is not None and self._read_left():
            data.enc_diff = -1
        if self._read_right is not None and self._read_right():
            data.enc_diff = 1
        if self._read_button is not None and not self._read_button():
            data.key = Key.ENTER
            data.state = IndevState.PRESSED

    def _read_trackball(self, data: InputData) -> None:
        if self._last_pressed is None:
            self._last_pressed = self._clock()

        if self.action is EncoderAction.NONE and self._read_button is not None:
            if not self._read_button():
                self.action = EncoderAction.PRESSED

        action = self.action
        # repeat at most four times per second; the button is exempt so
        # long presses can be detected
        if action is not EncoderAction.NONE and (
            action is EncoderAction.PRESSED
            or self._clock() > self._last_pressed + _REPEAT_MS
        ):
            if action is EncoderAction.PRESSED:
                data.key = Key.ENTER
                data.state = IndevState.PRESSED
            elif action is EncoderAction.UP:
                data.enc_diff = -1
            elif action is EncoderAction.DOWN:
                data.enc_diff = 1
            elif action is EncoderAction.LEFT:
                data.key = Key.DOWN
                data.state = IndevState.PRESSED
            elif action is EncoderAction.RIGHT:
                data.key = Key.UP
                data.state = IndevState.PRESSED
            self._last_pressed = self._clock()
            self._prevkey = data.key
            self.action = EncoderAction.NONE
        elif self._prevkey != 0:
            # report the released key so long presses are recognised
            data.state = IndevState.RELEASED
            data.key = self._prevkey
            self._prevkey = 0