"""Rotating, size-bounded log of serialized entries in numbered files."""

from __future__ import annotations

import logging
import os
import re
import struct
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Tuple, Union

logger = logging.getLogger(__name__)

FILE_PREFIX = "log_"
_NAME = re.compile(r"^" + FILE_PREFIX + r"(\d+)")
_LENGTH = struct.Struct("<I")


@dataclass
class LogEntry:
    """A log record stored as a length-prefixed payload."""

    payload: bytes = b""

    def size(self) -> int:
        return _LENGTH.size + len(self.payload)

    def serialize(self, write: Callable[[bytes], int]) -> int:
        """Write the record through ``write``; return what it reports."""
        return write(_LENGTH.pack(len(self.payload)) + self.payload)

    def deserialize(self, read: Callable[[int], bytes]) -> bool:
        """Fill this record from ``read``; return False if no whole record is left."""
        header = read(_LENGTH.size)
        if len(header) < _LENGTH.size:
            return False
        (length,) = _LENGTH.unpack(header)
        data = read(length)
        if len(data) < length:
            return False
        self.payload = bytes(data)
        return True


class LogRotate:
    """Stores entries in ``log_NNNNNN.log`` files, dropping the oldest to stay in bounds."""

    def __init__(
        self,
        log_dir: Union[str, Path],
        max_len: int,
        max_size: int,
        max_files: int,
        max_file_size: int,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.max_len = max_len
        self.max_size = max_size
        self.max_files = max_files
        self.max_file_size = max_file_size
        self._num_files = 0
        self._min_num = 0
        self._max_num = 0
        self._read_num = 0
        self._write_num = 0
        self._current_size = 0
        self._total_size = 0
        self._current_name = ""
        self._reader: Optional[BinaryIO] = None

    def init(self) -> None:
        """Create the directory or pick up the logs already in it."""
        if not self.log_dir.exists():
            self.log_dir.mkdir(parents=True)
            logger.info("LogRotate: no log files found.")
        else:
            (
                self._num_files,
                self._min_num,
                self._max_num,
                self._current_size,
                self._total_size,
            ) = self._scan_log_dir()
            self._read_num = self._min_num
            self._write_num = self._max_num
            logger.info(
                "LogRotate: found %d log files using %d bytes.",
                self._num_files,
                self._total_size,
            )
            if self._current_size > self.max_file_size - self.max_len:
                while (
                    self._num_files > self.max_files
                    or self._total_size >= self.max_size
                ) and self._remove_log():
                    pass
                self._num_files += 1
                self._write_num += 1
                self._current_size = 0

        if self._min_num == 0:
            self._num_files = 1
            self._min_num = 1
            self._read_num = 0
            self._write_num = 1
        self._current_name = self.log_file_name(self._write_num)
        logger.info("Logging to %s", self._current_name)

    def read_next(self, entry: LogEntry) -> bool:
        """Fill ``entry`` with the next stored record; False when none is left."""
        if not self.log_dir.is_dir():
            return False
        while True:
            if self._reader is None and not self._open_next_reader():
                return False
            assert self._reader is not None
            if entry.deserialize(self._reader.read):
                return True
            self._close_reader()
            self._read_num += 1

    def _open_next_reader(self) -> bool:
        if self._read_num == 0 or self._read_num > self._max_num:
            return False
        while self._read_num <= self._max_num:
            name = self.log_file_name(self._read_num)
            try:
                fh = open(name, "rb")
            except OSError:
                fh = None
            if fh is not None:
                size = os.fstat(fh.fileno()).st_size
                if size > 0:
                    self._reader = fh
                    logger.debug("-> reading %s (%d bytes)", name, size)
                    return True
                fh.close()
            self._read_num += 1
        return False

    def _close_reader(self) -> None:
        if self._reader is not None:
            self._reader.close()
            self._reader = None

    def write(self, entry: LogEntry) -> bool:
        """Append ``entry``, rotating and pruning files as needed."""
        start = time.monotonic()
        size = entry.size()
        if (
            self._current_size + size >= self.max_file_size
            or self._total_size + size >= self.max_size
        ):
            logger.debug(
                "LogRotation: %d >= %d || %d >= %d",
                self._current_size + size,
                self.max_file_size,
                self._total_size + size,
                self.max_size,
            )
            self._num_files += 1
            self._current_size = 0
            self._write_num += 1
            self._current_name = self.log_file_name(self._write_num)
            while (
                self._num_files >= self.max_files
                or self._total_size + size > self.max_size
            ) and self._remove_log():
                pass

        with open(self._current_name, "ab") as fh:
            entry.serialize(fh.write)

        self._current_size += size
        self._total_size += size
        logger.debug(
            "LogRotate: %d bytes written in %d ms to %s (%d/%d bytes, total: %d)",
            size,
            int((time.monotonic() - start) * 1000),
            self._current_name,
            self._current_size,
            self.max_file_size,
            self._total_size,
        )
        return True

    def clear(self) -> int:
        """Remove every log file and return how many went.

        Raises OSError, after resetting the counters, if any file could not be removed.
        """
        self._close_reader()
        count = 0
        failed = []
        if self.log_dir.is_dir():
            for path in self.log_dir.iterdir():
                if path.is_dir():
                    continue
                try:
                    path.unlink()
                except OSError:
                    logger.error("failed to remove %s!", path)
                    failed.append(str(path))
                else:
                    count += 1
                    logger.debug("removed %s", path)
        logger.debug("removed %d logs", count)

        self._num_files = 1
        self._min_num = 1
        self._write_num = 1
        self._current_size = 0
        self._total_size = 0
        self._current_name = self.log_file_name(self._write_num)
        if failed:
            raise OSError("failed to remove " + ", ".join(failed))
        return count

    def size(self) -> int:
        """Total bytes held by all log files."""
        return self._total_size

    def count(self) -> int:
        """Number of log files."""
        return self._num_files

    def current(self) -> int:
        """Number of the log file being read."""
        return self._read_num

    def log_file_name(self, num: int) -> str:
        return str(self.log_dir / f"{FILE_PREFIX}{num:06d}.log")

    def _remove_log(self) -> int:
        """Remove the oldest log and return the bytes freed (0 on failure)."""
        logger.debug(
            "removeLog minLogNum=%d, numFiles=%d, totalSize=%d",
            self._min_num,
            self._num_files,
            self._total_size,
        )
        freed = 0
        if self._min_num > 0:
            name = self.log_file_name(self._min_num)
            try:
                freed = os.path.getsize(name)
                os.remove(name)
            except OSError:
                logger.error("failed to remove %s", name)
                freed = 0
            else:
                logger.debug("removed %s, freeing %d bytes", name, freed)
                self._total_size -= freed
                self._num_files -= 1
            self._min_num += 1
        return freed

    def _scan_log_dir(self) -> Tuple[int, int, int, int, int]:
        """Return (files, lowest number, highest number, size of highest, total size)."""
        num = max_log = log_size = total = 0
        min_log: Optional[int] = None
        logger.debug("scanning log folder %s", self.log_dir)
        for path in self.log_dir.iterdir():
            if path.is_dir():
                continue
            num += 1
            size = path.stat().st_size
            total += size
            match = _NAME.match(path.name)
            log_num = int(match.group(1)) if match else 0
            if log_num > 0:
                if min_log is None or log_num < min_log:
                    min_log = log_num
                if log_num > max_log:
                    max_log = log_num
                    log_size = size
            else:
                logger.error("unrecognised log file name %s", path.name)
        return num, min_log or 0, max_log, log_size, total