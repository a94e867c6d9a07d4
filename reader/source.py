import sys
from abc import ABC, abstractmethod
from logging import getLogger
from typing import BinaryIO, Optional


class Source(ABC):

    @abstractmethod
    def read(self) -> bytes:
        """Returns the whole JSON Feed document, undecoded.

        :raises OSError:
        """
        raise NotImplementedError


class FileSource(Source):
    def __init__(self, path: str):
        self.path = path

    def read(self) -> bytes:
        getLogger().debug(f"Reading from {self.path}")
        with open(self.path, "rb") as f:
            return f.read()


class StdinSource(Source):
    """Reads lines until the first empty one or the end of the stream."""

    def __init__(self, stream: Optional[BinaryIO] = None):
        """

        :param stream: binary stream to read from, the process stdin when not given.
        """
        self.stream = stream

    def read(self) -> bytes:
        stream = self.stream if self.stream is not None else sys.stdin.buffer
        getLogger().info("Reading from stdin...")
        lines = []
        for line in stream:
            line = line.rstrip(b"\r\n")
            if not line:
                break
            lines.append(line)
        return b"\n".join(lines)
