"""Memory figures read from the kernel's meminfo table."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Union

MEMINFO = "/proc/meminfo"
_NUMBER = re.compile(r"\d+")


def read_meminfo_entry(entry: str, path: Union[str, Path] = MEMINFO) -> int:
    """Return the value (kB) of ``entry`` such as ``"MemFree:"``, or 0."""
    try:
        with open(path, encoding="ascii", errors="replace") as fh:
            for line in fh:
                tokens = line.split()
                if not tokens or tokens[0] != entry:
                    continue
                if len(tokens) < 2:
                    return 0
                match = _NUMBER.match(tokens[1])
                return int(match.group()) & 0xFFFFFFFF if match else 0
    except OSError:
        return 0
    return 0


def available_mem(path: Union[str, Path] = MEMINFO) -> int:
    return read_meminfo_entry("MemAvailable:", path)


def free_mem(path: Union[str, Path] = MEMINFO) -> int:
    return read_meminfo_entry("MemFree:", path)


def total_mem(path: Union[str, Path] = MEMINFO) -> int:
    return read_meminfo_entry("MemTotal:", path)