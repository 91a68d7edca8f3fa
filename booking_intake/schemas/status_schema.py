"""User-visible submission status banner."""

from dataclasses import dataclass
from enum import Enum


class StatusKind(str, Enum):
    """What the banner is currently showing."""
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SubmissionStatus:
    """Banner kind plus the message to display (empty when idle)."""
    kind: StatusKind = StatusKind.IDLE
    message: str = ""

    @classmethod
    def idle(cls) -> "SubmissionStatus":
        return cls()

    @classmethod
    def success(cls, message: str) -> "SubmissionStatus":
        return cls(StatusKind.SUCCESS, message)

    @classmethod
    def error(cls, message: str) -> "SubmissionStatus":
        return cls(StatusKind.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.kind == StatusKind.ERROR
