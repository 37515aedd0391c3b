"""Input driver for keyboards and pointers exposed as Linux event devices."""

from __future__ import annotations

import glob
import logging
import os
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from meshui.input.base import InputDriver

logger = logging.getLogger(__name__)

BY_ID_DIR = "/dev/input/by-id"
KEYPAD = "keypad"
POINTER = "pointer"
NONE = "none"

DeviceFactory = Callable[[str, str], Any]


def glob_paths(pattern: str) -> List[str]:
    """Return all paths matching ``pattern`` (``~`` expanded), sorted."""
    return sorted(glob.glob(os.path.expanduser(pattern)))


def _event_name(link: str) -> Optional[str]:
    """Return the event name a by-id link points to, without its ``../``."""
    try:
        return os.readlink(link)[3:]
    except OSError:
        return None


def _events(root: Union[str, Path], suffix: str) -> List[str]:
    events = (_event_name(path) for path in glob_paths(os.path.join(str(root), suffix)))
    return [event for event in events if event is not None]


def keyboard_devices(root: Union[str, Path] = BY_ID_DIR) -> List[str]:
    """List the event names of all keyboards found under ``root``."""
    return _events(root, "*-event-kbd")


def pointer_devices(root: Union[str, Path] = BY_ID_DIR) -> List[str]:
    """List the event names of all mice and touch devices found under ``root``."""
    return _events(root, "*-event-mouse")


def _open_if_readable(kind: str, path: str) -> Optional[str]:
    return path if os.access(path, os.R_OK) else None


class LinuxInputDriver(InputDriver):
    """Attaches event devices given by name (``eventX``) or by full path.

    ``device_factory(kind, path)`` creates the device and returns it, or
    None when the device cannot be used.
    """

    input_dir = "/dev/input"

    def __init__(
        self,
        keyboard_device: str = "",
        pointer_device: str = "",
        device_factory: Optional[DeviceFactory] = None,
    ) -> None:
        super().__init__()
        self.keyboard_device = keyboard_device
        self.pointer_device = pointer_device
        self._factory = device_factory or _open_if_readable

    def init(self) -> None:
        """Attach the configured devices."""
        logger.debug("LinuxInputDriver::init ...")
        if self.keyboard_device:
            self.use_keyboard_device(self.keyboard_device)
        else:
            self.keyboard_device = NONE
        if self.pointer_device:
            self.use_pointer_device(self.pointer_device)
        else:
            self.pointer_device = NONE

    def _resolve(self, name: str) -> tuple:
        if not name:
            raise ValueError("device name must not be empty")
        if not name.startswith("/"):
            return os.path.join(self.input_dir, name), name
        return name, _event_name(name) or ""

    def use_keyboard_device(self, name: str) -> bool:
        """Attach a keyboard; return whether it could be used."""
        path, event = self._resolve(name)
        self.keyboard = self._factory(KEYPAD, path)
        if self.keyboard is not None:
            logger.info("Using keyboard device %s", path)
            self.keyboard_device = event
            return True
        logger.error("Failed to use keyboard device %s", path)
        self.keyboard_device = NONE
        return False

    def use_pointer_device(self, name: str) -> bool:
        """Attach a mouse or touch device; return whether it could be used."""
        path, event = self._resolve(name)
        self.pointer = self._factory(POINTER, path)
        if self.pointer is not None:
            logger.info("Using pointer device %s", path)
            self.pointer_device = event
            return True
        logger.error("Failed to use pointer device %s", path)
        self.pointer_device = NONE
        return False

    def release_keyboard_device(self) -> bool:
        logger.info("Releasing keyboard device %s", self.keyboard_device)
        self.keyboard = None
        self.keyboard_device = NONE
        return True

    def release_pointer_device(self) -> bool:
        logger.info("Releasing pointer device %s", self.pointer_device)
        self.pointer = None
        self.pointer_device = NONE
        return True

    def close(self) -> None:
        if self.keyboard is not None:
            self.release_keyboard_device()
        if self.pointer is not None:
            self.release_pointer_device()