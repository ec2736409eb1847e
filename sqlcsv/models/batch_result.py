import dataclasses
from typing import List


@dataclasses.dataclass
class BatchResult:
    """Outcome of one executed batch.

    row_counts holds one entry per result set that had columns, in the order
    the server returned them.
    """
    result_sets: int = 0
    row_counts: List[int] = dataclasses.field(default_factory=list)
    execution_time: float = 0.0

    @property
    def total_rows(self) -> int:
        return sum(self.row_counts)

    def to_summary_dict(self):
        """Convert to dictionary for logging"""
        return {
            "result_sets": self.result_sets,
            "row_counts": list(self.row_counts),
            "total_rows": self.total_rows,
            "execution_time": round(self.execution_time, 3),
        }
