from dataclasses import dataclass
from enum import Enum


class LogErrorKind(Enum):
    DIRECTORY_RESOLUTION = "directory_resolution"
    DIRECTORY_CREATE = "directory_create"
    OPEN = "open"
    WRITE = "write"
    CLOSE = "close"
    COMPRESSION = "compression"


@dataclass(frozen=True)
class LogError:
    """A recorded, non-fatal logger failure."""

    kind: LogErrorKind
    message: str

    def __str__(self) -> str:
        return self.message
