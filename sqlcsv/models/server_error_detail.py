from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ServerErrorDetail:
    """Structured form of an error reported by the database server."""
    error_class: str
    sqlstate: Optional[str]
    number: Optional[int]
    message: str
