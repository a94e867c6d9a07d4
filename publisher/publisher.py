import os
import sys
import tempfile
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from logging import getLogger
from typing import Optional, TextIO


class Publisher(ABC):
    @abstractmethod
    def publish(self, document: str, updated: datetime) -> bool:
        """Publishes a rendered document.

        :param document: the document without trailing newline.
        :param updated: the time the feed was last updated.
        :returns: whether the document was written.
        :raises OSError:
        """
        raise NotImplementedError


class StdoutPublisher(Publisher):
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def publish(self, document: str, updated: datetime) -> bool:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(document + "\n")
        stream.flush()
        return True


def get_mtime(path: str) -> Optional[datetime]:
    """Last modification time of path in the local timezone, None if it can't be read."""
    try:
        mtime = os.stat(path).st_mtime
    except OSError:
        return None
    return datetime.fromtimestamp(mtime, tz=timezone.utc).astimezone()


class FilePublisher(Publisher):
    """Writes the document to a file, unless the file is newer than the feed."""

    def __init__(self, path: str, force: bool = False):
        """

        :param path: the output file.
        :param force: write even if the file was modified after the feed was updated.
        """
        self.path = path
        self.force = force

    def publish(self, document: str, updated: datetime) -> bool:
        if not self.force:
            mtime = get_mtime(self.path)
            if mtime is not None and not updated > mtime:
                getLogger().info(f"{self.path} was modified at {mtime}, feed updated at {updated}, skipping")
                return False

        self._replace(document + "\n")
        getLogger().info(f"Wrote feed to {self.path}")
        return True

    def _replace(self, content: str):
        """Writes next to the target and renames over it, the target is never left truncated."""
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(prefix=".jsonfeed2atom-", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(tmp_path, self._mode())
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def _mode(self) -> int:
        # keep the permissions of the file being replaced, mkstemp creates it 0600
        try:
            return os.stat(self.path).st_mode & 0o777
        except OSError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask
