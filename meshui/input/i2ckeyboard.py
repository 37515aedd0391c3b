"""Keyboard attached over I2C that returns one key code per request."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from meshui.input.base import IndevState, InputData, InputDriver, Key

logger = logging.getLogger(__name__)

_CARRIAGE_RETURN = 0x0D


class I2CKeyboardInputDriver(InputDriver):
    """Polls a keyboard; ``read_byte`` returns a byte or None if none is available."""

    def __init__(self, read_byte: Callable[[], Optional[int]]) -> None:
        super().__init__()
        self._read_byte = read_byte

    def read(self) -> InputData:
        """Sample the keyboard."""
        data = InputData()
        value = 0
        received = self._read_byte()
        if received is not None:
            value = received
            if value != 0:
                data.state = IndevState.PRESSED
                logger.debug("key press value: %d", value)
                if value == _CARRIAGE_RETURN:
                    value = Key.ENTER
            else:
                data.state = IndevState.RELEASED
        data.key = int(value)
        return data