"""Standard input as an optional payload."""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from mk import consts

logger = logging.getLogger(__name__)


class InputSource:
    """Bytes to write into a created file.

    Reading one byte to check availability is not lossy: the byte is kept and
    written first by `copy_to`. A source built around no stream (a terminal
    on stdin) is empty and never blocks.
    """

    def __init__(self, stream: BinaryIO | None = None) -> None:
        self._stream = stream
        self._head = b""
        self._probed = False

    @classmethod
    def from_stdin(cls) -> InputSource:
        """Use stdin, unless a terminal is attached to it."""
        stream = getattr(sys.stdin, "buffer", None)
        if stream is None or stream.closed or stream.isatty():
            logger.debug("stdin is a terminal, no input")
            return cls(None)
        return cls(stream)

    def available(self) -> bool:
        """Check if at least one byte can be read."""
        if self._stream is None:
            return False
        if not self._probed:
            self._head = self._stream.read(1)
            self._probed = True
        return len(self._head) > 0

    def copy_to(self, handle: BinaryIO) -> int:
        """Write all remaining bytes to `handle`. Returns the number of bytes written."""
        if self._stream is None:
            return 0
        written = 0
        if self._head:
            handle.write(self._head)
            written += len(self._head)
            self._head = b""
        self._probed = True

        while True:
            chunk = self._stream.read(consts.COPY_CHUNK_SIZE)
            if not chunk:
                break
            handle.write(chunk)
            written += len(chunk)
        return written
