import csv
from typing import Sequence, TextIO

from sqlcsv.errors import SinkWriteError


class CsvRecordSink:
    """Write CSV records to a text stream.

    Quoting is minimal: only fields containing the delimiter, the quote
    character or a line break are quoted, with embedded quotes doubled.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.writer = csv.writer(stream, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)

    def write_record(self, fields: Sequence[str], row_index: int = 0) -> None:
        try:
            self.writer.writerow(fields)
        except OSError as e:
            raise SinkWriteError(f"error writing CSV: {e}", row_index=row_index) from e

    def write_separator(self) -> None:
        """Write an empty record, which shows up as a blank line."""
        self.write_record([])

    def flush(self) -> None:
        try:
            self.stream.flush()
        except OSError as e:
            raise SinkWriteError(f"error flushing CSV output: {e}") from e
