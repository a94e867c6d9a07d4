import logging
import sys
from typing import Optional, TypeVar

T = TypeVar("T")


def init_logging(level: str = "INFO"):
    """Send log records of the whole process to stderr, stdout is kept for the feed."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def first_present(*values: Optional[T]) -> Optional[T]:
    """Returns the first value which is not None, in priority order."""
    for value in values:
        if value is not None:
            return value
    return None
