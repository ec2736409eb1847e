from typing import Iterable, Iterator, List

from sqlcsv.errors import InputReadError
from sqlcsv.util.log_config import setup_logger

BATCH_SEPARATOR = "GO"

logger = setup_logger(__name__)


def is_batch_separator(line: str) -> bool:
    return line.strip().upper() == BATCH_SEPARATOR


def read_batches(lines: Iterable[str]) -> Iterator[str]:
    """
    Split input lines into batches terminated by a line reading ``GO``.

    Lines are re-joined with CRLF, each line keeping its terminator. A batch
    is yielded as soon as its separator line is read, so the caller can run
    it before more input arrives. Text after the last separator is never
    yielded.

    Raises:
        InputReadError: reading or decoding the input failed.
    """
    buf: List[str] = []
    try:
        for line in lines:
            line = line.rstrip("\r\n")
            if is_batch_separator(line):
                text = "".join(buf)
                buf = []
                yield text
            else:
                buf.append(line + "\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"error reading input: {e}") from e

    if buf:
        logger.debug(f"Discarding {len(buf)} trailing line(s) not followed by {BATCH_SEPARATOR}")
