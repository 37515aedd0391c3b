"""Single push-button input driver."""

from __future__ import annotations

from typing import Callable

from meshui.input.base import IndevState, InputData, InputDriver


class ButtonInputDriver(InputDriver):
    """Reads one active-low button and reports it as button id 0."""

    # screen point the button is mapped to (cog symbol / blank screen)
    button_points = ((10, 235),)

    def __init__(self, read_pin: Callable[[], int]) -> None:
        super().__init__()
        self._read_pin = read_pin
        self._last_btn = 0

    def pressed_id(self) -> int:
        """Return the id of the pressed button, or -1 if none is pressed."""
        return 0 if not self._read_pin() else -1

    def read(self) -> InputData:
        """Sample the button."""
        data = InputData()
        act = self.pressed_id()
        if act >= 0:
            data.state = IndevState.PRESSED
            self._last_btn = act
        else:
            data.state = IndevState.RELEASED
        data.btn_id = self._last_btn
        return data