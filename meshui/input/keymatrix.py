"""Scanned key-matrix keyboard driver with three shift layers."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Sequence

from meshui.input.base import IndevState, InputData, InputDriver, Key

logger = logging.getLogger(__name__)

# pins driving the rows and sensing the columns of the matrix
KEY_COLS = (44, 47, 17, 15, 13, 41)
KEY_ROWS = (12, 16, 42, 18, 14, 7)

# key that cycles through the shift layers instead of producing input
SHIFT_KEY = 0x1A

_REPEAT_MS = 200


def _millis() -> int:
    return int(time.monotonic() * 1000)


def _row(*keys: object) -> tuple:
    return tuple(ord(k) if isinstance(k, str) else k for k in keys)


KEY_MAP = (
    (
        _row(" ", ".", "m", "n", "b", Key.NEXT),
        _row(Key.ENTER, "l", "k", "j", "h", Key.DOWN),
        _row("p", "o", "i", "u", "y", Key.PREV),
        _row(Key.BACKSPACE, "z", "x", "c", "v", Key.UP),
        _row("a", "s", "d", "f", "g", Key.ESC),
        _row("q", "w", "e", "r", "t", SHIFT_KEY),
    ),
    (
        _row("_", ",", "M", "N", "B", Key.END),
        _row(0x0D, "L", "K", "J", "H", Key.LEFT),
        _row("P", "O", "I", "U", "Y", Key.HOME),
        _row(Key.DEL, "Z", "X", "C", "V", Key.RIGHT),
        _row("A", "S", "D", "F", "G", Key.NEXT),
        _row("Q", "W", "E", "R", "T", SHIFT_KEY),
    ),
    (
        _row(":", ";", ">", "<", '"', "{"),
        _row("~", "-", "*", "&", "+", "["),
        _row("0", "9", "8", "7", "6", "}"),
        _row("=", "(", ")", "?", "/", "]"),
        _row("!", "@", "#", "$", "%", "\\"),
        _row("1", "2", "3", "4", "5", SHIFT_KEY),
    ),
)


class KeyMatrixInputDriver(InputDriver):
    """Keyboard read by driving one row at a time and sensing the columns.

    ``scan(row)`` drives the given row and returns one flag per column,
    True where the column line reads low (key pressed).
    """

    def __init__(
        self,
        scan: Callable[[int], Sequence[bool]],
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        super().__init__()
        self._scan = scan
        self._clock = clock or _millis
        self.shift = 0
        self._prevkey = 0
        self._last_pressed: Optional[int] = None

    def lookup(self, row: int, col: int) -> int:
        """Return the key code at ``row``/``col`` in the active shift layer."""
        return int(KEY_MAP[self.shift][row][col])

    def _scan_key(self) -> int:
        key = 0
        for row, _pin in enumerate(KEY_ROWS):
            for col, pressed in enumerate(self._scan(row)):
                if pressed:
                    key = self.lookup(row, col)
                    break
        return key

    def read(self) -> InputData:
        """Scan the matrix and report at most one key."""
        data = InputData()
        key = self._scan_key()

        if self._last_pressed is None:
            self._last_pressed = self._clock()
        # repeat at most five times per second; enter is exempt so long
        # presses can be detected
        if key != 0 and (
            key == Key.ENTER or self._clock() > self._last_pressed + _REPEAT_MS
        ):
            self._last_pressed = self._clock()
            self._prevkey = key
            if key == SHIFT_KEY:
                self.shift = (self.shift + 1) % len(KEY_MAP)
                return data
            data.key = key
            data.state = IndevState.PRESSED
            logger.debug("Key 0x%x pressed", key)
        elif self._prevkey != 0:
            # the released key must be reported
            data.state = IndevState.RELEASED
            data.key = self._prevkey
            self._prevkey = 0
        return data